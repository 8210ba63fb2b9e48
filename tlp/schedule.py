""" Learning rate schedules. Each returns a callable mapping the network's
training count (the number of examples presented so far, including the
current one) to a step size.
"""


DEFAULT_LEARNING_RATE = 0.1


def constant(eta=DEFAULT_LEARNING_RATE):
    """ The same step size at every iteration
    """

    def schedule(iteration):
        return eta

    return schedule


def inverse(scale=1.0):
    """ Step size `scale / iteration`, as used by Pegasos-style solvers
    """

    def schedule(iteration):
        return scale / iteration

    return schedule


def inverse_offset(scale=100.0, offset=1000.0, floor=0.1):
    """ Step size `scale / (offset + iteration) + floor`. Decays from
    roughly `scale / offset + floor` towards `floor`.
    """

    def schedule(iteration):
        return scale / (offset + iteration) + floor

    return schedule
