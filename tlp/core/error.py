""" Squared error diagnostics. These run their own forward pass and are
never used to compute gradients.
"""
import numpy

from tlp.core import forward


def error(w_ji, w_kj, x, target):
    """ Sum over output units of the squared difference between the network
    output for the input accessor `x` and `target`
    """
    target = numpy.atleast_1d(target)
    sum_err = 0.0
    for k in range(len(w_kj)):
        err = forward.output_from_input(w_ji, w_kj, x, k) - target[k]
        sum_err += err**2
    return sum_err


def sum_of_error(w_ji, w_kj, training_set):
    """ Residual sum of squares over a training set

    Parameters
    ----------
    training_set: iterable of (x, y) pairs
        For example, a list of :class:`tlp.data.sampling.TrainingExample`.

    Returns
    -------
    e_sum: float
        Zero for an empty training set.
    """
    e_sum = 0.0
    for x_n, y_n in training_set:
        e_sum += error(w_ji, w_kj, forward.phi(x_n), y_n)
    return e_sum
