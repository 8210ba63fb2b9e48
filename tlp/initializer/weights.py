""" Weight initializers. Each function here returns a callable with no
arguments that yields one weight value per call; the network calls it once
for every entry of both weight matrices.
"""
import numpy


def uniform(low=0.0, high=1.0, random_state=None):
    """ Independent uniform draws from [low, high)

    Parameters
    ----------
    low, high: float, default=0.0, 1.0
        The interval from which to draw.

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.
    """
    random_state = (numpy.random.RandomState()
                    if random_state is None else random_state)

    def initializer():
        return random_state.uniform(low, high)

    return initializer


def normal(scale=0.1, random_state=None):
    """ Independent Gaussian draws with zero mean and standard deviation
    `scale`
    """
    random_state = (numpy.random.RandomState()
                    if random_state is None else random_state)

    def initializer():
        return scale * random_state.randn()

    return initializer


def constant(value):
    """ Every weight is set to `value`. Useful for reproducible runs.
    """

    def initializer():
        return value

    return initializer
