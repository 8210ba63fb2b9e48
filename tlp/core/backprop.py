""" Online (single example) backpropagation for the two-layer perceptron.

All error signals are computed against one snapshot of the weights and the
replacement matrices are returned; the caller swaps them in.
"""
from collections import namedtuple

import numpy

from tlp.core import forward


# Hidden outputs and error signals for one training example
ErrorSignals = namedtuple(
    'ErrorSignals',
    ['x', 'z', 'delta_k', 'delta_j'])


def error_signals(w_ji, w_kj, x, target):
    """ Compute the output and hidden error signals for one example

    Parameters
    ----------
    w_ji: ndarray, shape=(M, D)
        Input => hidden weights.

    w_kj: ndarray, shape=(K, M)
        Hidden => output weights.

    x: callable
        Input unit accessor, as returned by :func:`tlp.core.forward.phi`.

    target: ndarray, shape=(K,)
        The target output values.

    Returns
    -------
    signals: ErrorSignals
        `x` is the input vector, `z` the hidden outputs (bias unit first),
        `delta_k` the output errors and `delta_j` the hidden errors.
    """
    x_vec = forward.input_vector(x)

    z = numpy.ones(len(w_ji))
    for j in range(1, len(w_ji)):
        z[j] = forward.hidden_unit_output(w_ji, x, j)

    # Linear output units, so no derivative factor
    delta_k = numpy.array([
        forward.output_from_hidden(w_kj, z, k) - target[k]
        for k in range(len(w_kj))
    ])

    # Back-propagated through the pre-update output weights. The bias
    # hidden unit gets a value too, even though nothing reads it.
    delta_j = numpy.dot(delta_k, w_kj) * (1 - z**2)

    return ErrorSignals(x=x_vec, z=z, delta_k=delta_k, delta_j=delta_j)


def backpropagate(w_ji, w_kj, x, target, eta):
    """ Run one gradient descent step on the squared error of a single
    example and return the updated weights

    Parameters
    ----------
    w_ji, w_kj: ndarray
        The current weights. These are not modified.

    x: callable
        Input unit accessor.

    target: ndarray, shape=(K,)
        The target output values.

    eta: float
        The step size for this update.

    Returns
    -------
    w_ji_new, w_kj_new: ndarray, ndarray
        Replacement weights with the same shapes as `w_ji` and `w_kj`.
    """
    signals = error_signals(w_ji, w_kj, x, target)

    w_kj_new = w_kj - numpy.outer(eta * signals.delta_k, signals.z)

    # Row 0 (into the bias hidden unit) is updated as well; it is never
    # read by the forward pass.
    w_ji_new = w_ji - numpy.outer(signals.delta_j, eta * signals.x)

    return w_ji_new, w_kj_new
