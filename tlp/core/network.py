import logging
import numbers
import threading

import numpy

from tlp import initializer
from tlp import schedule
from tlp.core import backprop
from tlp.core import error as error_metrics
from tlp.core import forward
from tlp.core.exception import InvalidArgument


logger = logging.getLogger(__name__)

DEFAULT_HIDDEN_UNITS = 4


class TwoLayerPerceptron:
    """
    Regression network with one scalar input, one tanh hidden layer and one
    linear output unit, trained online by backpropagation.

    Attributes
    ----------
    w_ji: ndarray, shape=(n_hidden, n_inputs)
        w_ji[j, i] = weight from input unit i to hidden unit j. Row 0 feeds
        the bias hidden unit and is never used in the forward pass.

    w_kj: ndarray, shape=(n_outputs, n_hidden)
        w_kj[k, j] = weight from hidden unit j to output unit k.

    learning_rate: callable
        Maps the training count to the step size.

    Both the input layer and the hidden layer carry a bias unit at index 0
    whose output is always 1, so `n_inputs` and `n_hidden` include them.
    """
    n_inputs = forward.N_INPUTS
    n_outputs = forward.N_OUTPUTS

    def __init__(self, hidden_units=DEFAULT_HIDDEN_UNITS,
                 learning_rate=None, weight_init=None):
        """
        Parameters
        ----------
        hidden_units: int, default=4
            Number of hidden units, including the bias hidden unit.

        learning_rate: callable, default=None
            Has signature `learning_rate(iteration)` and returns the step
            size. The default of None uses a constant 0.1.

        weight_init: callable, default=None
            Called with no arguments once per weight entry. The default
            of None draws each entry uniformly from [0, 1).
        """
        self._lock = threading.Lock()
        self.n_hidden = DEFAULT_HIDDEN_UNITS
        self.learning_rate = schedule.constant()
        self.reinitialize(hidden_units=hidden_units,
                          learning_rate=learning_rate,
                          weight_init=weight_init)

    def __repr__(self):
        return "<TwoLayerPerceptron n_hidden=%d, train_count=%d>" % (
            self.n_hidden, self._train_count)

    def reinitialize(self, hidden_units=None, learning_rate=None,
                     weight_init=None):
        """ Reset the training count and reallocate both weight matrices.

        Omitted arguments keep the current number of hidden units and the
        current learning rate schedule. Weights are always redrawn, by
        default uniformly from [0, 1).
        """
        if hidden_units is not None:
            if (isinstance(hidden_units, bool) or
                    not isinstance(hidden_units, numbers.Integral)):
                msg = "`hidden_units` must be an int (got {})"
                raise InvalidArgument(msg.format(type(hidden_units)))
            if hidden_units < 1:
                msg = "`hidden_units` must be at least 1 (got {})"
                raise InvalidArgument(msg.format(hidden_units))

        if learning_rate is not None and not callable(learning_rate):
            raise InvalidArgument("`learning_rate` must be callable")

        if weight_init is None:
            weight_init = initializer.uniform()
        elif not callable(weight_init):
            raise InvalidArgument("`weight_init` must be callable")

        with self._lock:
            self._train_count = 0

            if hidden_units is not None:
                self.n_hidden = int(hidden_units)
            if learning_rate is not None:
                self.learning_rate = learning_rate

            self.w_ji = self._init_weights(
                weight_init, self.n_hidden, self.n_inputs)
            self.w_kj = self._init_weights(
                weight_init, self.n_outputs, self.n_hidden)

        logger.info("Initialized network with %d hidden units",
                    self.n_hidden)

    @staticmethod
    def _init_weights(weight_init, n_rows, n_cols):
        # Row-major order, one call per entry
        weights = numpy.zeros((n_rows, n_cols))
        for r in range(n_rows):
            for c in range(n_cols):
                weights[r, c] = weight_init()
        return weights

    def train_count(self):
        """ The number of training examples presented since initialization
        """
        return self._train_count

    def train(self, x, target):
        """ Present one training example and update the weights by a single
        backpropagation step

        Parameters
        ----------
        x: float
            The input value.

        target: float or sequence of length n_outputs
            The desired output.
        """
        target = numpy.atleast_1d(numpy.asarray(target, dtype=float))
        if target.shape != (self.n_outputs,):
            msg = "`target` should have {} value(s) but had shape {}"
            raise InvalidArgument(msg.format(self.n_outputs, target.shape))

        with self._lock:
            self._train_count += 1
            eta = self.learning_rate(self._train_count)

            self.w_ji, self.w_kj = backprop.backpropagate(
                w_ji=self.w_ji, w_kj=self.w_kj, x=forward.phi(x),
                target=target, eta=eta)

        logger.debug("Trained on (%r, %r) with step %r",
                     x, target[0], eta)

    @staticmethod
    def phi(x):
        """ Input unit accessor for `x`; see :func:`tlp.core.forward.phi`
        """
        return forward.phi(x)

    def z(self, x):
        """ Hidden unit outputs for the input accessor `x`
        """
        return forward.hidden_outputs(self.w_ji, x)

    def y(self, z):
        """ Output unit outputs for the hidden unit outputs `z`
        """
        return forward.outputs(self.w_kj, z)

    def predict(self, xs):
        """
        Parameters
        ----------
        xs: float or array-like of floats
            Scalar input(s).

        Returns
        -------
        out: ndarray, shape=xs.shape
            The (first) network output for each input.
        """
        xs = numpy.asarray(xs, dtype=float)
        out = numpy.zeros(xs.shape)
        for index, x in numpy.ndenumerate(xs):
            out[index] = self.y(self.z(self.phi(x)))[0]
        return out

    def error(self, x, target):
        """ Squared error for the input accessor `x` against `target`
        """
        return error_metrics.error(self.w_ji, self.w_kj, x, target)

    def sum_of_error(self, training_set):
        """ Residual sum of squares over an iterable of (x, y) pairs
        """
        return error_metrics.sum_of_error(self.w_ji, self.w_kj, training_set)


def init(hidden_units=DEFAULT_HIDDEN_UNITS, learning_rate=None,
         weight_init=None):
    """ Create a freshly initialized network. See
    :class:`TwoLayerPerceptron` for the parameters.
    """
    return TwoLayerPerceptron(hidden_units=hidden_units,
                              learning_rate=learning_rate,
                              weight_init=weight_init)
