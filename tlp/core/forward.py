""" Forward propagation through the two-layer perceptron.

Every function here is pure: weights are passed in explicitly and nothing
is mutated. The network computes::

    x = phi(x_n) = [1, x_n]                     (input bias unit first)
    z[0] = 1,  z[j] = tanh(dot(w_ji[j], x))     (hidden bias unit first)
    y[k] = dot(w_kj[k], z)                      (linear output)

`w_ji` has shape (M, D) and `w_kj` has shape (K, M), where D = N_INPUTS
and K = N_OUTPUTS are fixed and M is the number of hidden units including
the bias hidden unit.
"""
import numpy


# Dimension of the input including the bias unit
N_INPUTS = 2

# Dimension of the output
N_OUTPUTS = 1


def phi(x):
    """ Create the units of the input layer for the scalar input `x`

    Returns
    -------
    accessor: callable
        Has signature `accessor(i)` and returns the output of the i'th
        input unit, where unit 0 is the bias (always 1) and unit 1 is `x`.
    """
    input_units = (1.0, x)

    def accessor(i):
        return input_units[i]

    return accessor


def input_vector(x):
    """ Collect the input unit outputs from the accessor `x` as an array
    """
    return numpy.array([x(i) for i in range(N_INPUTS)], dtype=float)


def tanh(a):
    """ Hyperbolic tangent computed from exponentials with a guard against
    overflow. Non-finite ratios saturate to the sign of `a`, and values
    that drift outside [-1, 1] are clamped.

    Parameters
    ----------
    a: float or ndarray

    Returns
    -------
    h: float or ndarray
        Same shape as `a`.
    """
    a = numpy.asarray(a, dtype=float)

    with numpy.errstate(over='ignore', invalid='ignore'):
        exp_a = numpy.exp(a)
        exp_m_a = numpy.exp(-a)
        h = (exp_a - exp_m_a) / (exp_a + exp_m_a)

        finite = numpy.isfinite(h)
        h = numpy.where(~finite & (a > 0), 1.0, h)
        h = numpy.where(~finite & (a < 0), -1.0, h)
        h = numpy.where(finite & (h >= 1), 1.0, h)
        h = numpy.where(finite & (h <= -1), -1.0, h)

    if h.ndim == 0:
        return float(h)
    return h


def hidden_unit_output(w_ji, x, j):
    """ Output of the j'th hidden unit for the input accessor `x`. Unit 0
    is the bias hidden unit and always outputs 1.
    """
    if j == 0:
        return 1.0
    a = 0.0
    for i in range(N_INPUTS):
        a += w_ji[j][i] * x(i)
    return tanh(a)


def hidden_outputs(w_ji, x):
    """ Outputs of all hidden units, bias unit first

    Returns
    -------
    z: ndarray, shape=(M,)
    """
    return numpy.array([
        hidden_unit_output(w_ji, x, j) for j in range(len(w_ji))
    ])


def output_from_hidden(w_kj, z, k):
    """ Output of the k'th output unit given precomputed hidden outputs `z`.
    The output activation is the identity.
    """
    a_k = 0.0
    for j in range(len(z)):
        a_k += w_kj[k][j] * z[j]
    return a_k


def output_from_input(w_ji, w_kj, x, k):
    """ Output of the k'th output unit computed from the input accessor `x`
    by way of a fresh forward pass through the hidden layer
    """
    return output_from_hidden(w_kj, hidden_outputs(w_ji, x), k)


def outputs(w_kj, z):
    """ Outputs of all output units given hidden outputs `z`

    Returns
    -------
    y: ndarray, shape=(K,)
    """
    return numpy.array([
        output_from_hidden(w_kj, z, k) for k in range(len(w_kj))
    ])
