""" Generate training sets from a target function
"""
from collections import namedtuple

import numpy

from tlp.core.exception import InvalidArgument


TrainingExample = namedtuple('TrainingExample', ['x', 'y'])


def _validate_count(n):
    if int(n) != n or n < 1:
        msg = "Number of examples must be a positive int (got {})"
        raise InvalidArgument(msg.format(n))


def sequential(target_function, n, x_min=-1.0, x_max=1.0):
    """
    Evenly spaced training examples.

    Parameters
    ----------
    target_function: callable
        Maps an input `x` to its target value.

    n: int
        Number of examples. Both `x_min` and `x_max` are included when
        `n` > 1; a single example sits at `x_min`.

    x_min, x_max: float, default=-1.0, 1.0
        The input interval.

    Returns
    -------
    training_set: list of TrainingExample
    """
    _validate_count(n)
    n = int(n)

    if n == 1:
        xs = [x_min]
    else:
        xs = [(i * (x_max - x_min) / (n - 1)) + x_min for i in range(n)]

    return [TrainingExample(x=x, y=target_function(x)) for x in xs]


def random_sample(target_function, n, x_min=-1.0, x_max=1.0,
                  random_state=None):
    """
    Training examples with inputs drawn uniformly from [x_min, x_max).

    Parameters
    ----------
    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    See :func:`sequential` for the remaining parameters.
    """
    _validate_count(n)
    random_state = (numpy.random.RandomState()
                    if random_state is None else random_state)

    xs = random_state.uniform(x_min, x_max, size=int(n))

    return [TrainingExample(x=float(x), y=target_function(float(x)))
            for x in xs]
