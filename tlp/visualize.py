import numpy as np
import matplotlib.pyplot as plt


def plot_regression(
        session, n_points=50, show_hidden=False, ax=None,
        data_kwargs=dict(c='#7777ff', ls='-', lw=1, label='Training Data'),
        output_kwargs=dict(c='#ff7f0e', ls='-', lw=2, label='NN Output'),
        hidden_kwargs=dict(c='#2ca02c', ls='--', lw=1)):
    """ Plot the observed training data against the network output

    Parameters
    ----------
    session: tlp.core.session.TrainingSession
        A session with at least one observed example.

    n_points: int, default=50
        Number of evenly spaced inputs at which to evaluate the network.

    show_hidden: bool, default=False
        Also plot each hidden unit's output (labelled `z_j`).

    ax: matplotlib.axes.Axes, default=None
        The axis to draw on. The default of None creates a new figure.

    data_kwargs, output_kwargs, hidden_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    observed = session.sorted_observed()
    curve = session.regression_curve(n_points=n_points)

    ax.plot([ex.x for ex in observed], [ex.y for ex in observed],
            **data_kwargs)
    ax.plot(curve.x, curve.y, **output_kwargs)

    if show_hidden:
        for j in range(curve.z.shape[1]):
            ax.plot(curve.x, curve.z[:, j], label='z_%d' % j,
                    **hidden_kwargs)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend(loc='best')

    return ax


def plot_errors(errors, ax=None,
                error_kwargs=dict(c='#7777ff', ls='-', lw=2, label='Error')):
    """ Plot the averaged error snapshots against the iteration count

    Parameters
    ----------
    errors: list of tlp.core.session.ErrorSnapshot

    ax: matplotlib.axes.Axes, default=None
        The axis to draw on. The default of None creates a new figure.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    iterations = np.array([snapshot.iteration for snapshot in errors])
    values = np.array([snapshot.error for snapshot in errors])

    ax.plot(iterations, values, **error_kwargs)
    ax.set_xlabel('iteration')
    ax.set_ylabel('error')

    return ax


def show_results(session, n_points=50, show_hidden=False):
    """ Show the regression and error charts side by side
    """
    fig, (axreg, axerr) = plt.subplots(1, 2, figsize=(12, 4))

    plot_regression(session, n_points=n_points,
                    show_hidden=show_hidden, ax=axreg)
    plot_errors(session.errors, ax=axerr)

    fig.tight_layout()
    plt.show()

    return fig
