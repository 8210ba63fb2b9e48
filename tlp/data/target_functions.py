""" Named target functions for generating regression data. Functions are
looked up by name from a fixed registry rather than evaluated from
expression strings.
"""
import numpy

from tlp.core.exception import InvalidArgument


def identity(x):
    return x


def square(x):
    return x * x


def sin_pi(x):
    return numpy.sin(numpy.pi * x)


def absolute(x):
    return abs(x)


def heaviside(x):
    """ 0 for negative `x`, otherwise 1
    """
    if x < 0:
        return 0.0
    return 1.0


TARGET_FUNCTIONS = {
    'x': identity,
    'x2': square,
    'sin_pi_x': sin_pi,
    'abs_x': absolute,
    'heaviside': heaviside,
}

DEFAULT_TARGET_FUNCTION = 'sin_pi_x'


def get(name):
    """ Return the target function registered under `name`
    """
    try:
        return TARGET_FUNCTIONS[name]
    except KeyError:
        msg = "Unknown target function {!r}; choose one of {}"
        raise InvalidArgument(msg.format(name, sorted(TARGET_FUNCTIONS)))


def names():
    return sorted(TARGET_FUNCTIONS)
