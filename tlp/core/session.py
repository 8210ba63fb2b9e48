from collections import namedtuple
import logging
import os

import numpy

from tlp.core.exception import InvalidArgument
from tlp.data.sampling import TrainingExample, random_sample


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

# Error snapshots are taken every this many updates when sampling randomly
DEFAULT_RANDOM_ERROR_PERIOD = 128

DEFAULT_X_RANGE = (-1.0, 1.0)

DEFAULT_CURVE_POINTS = 50


# Appended to `TrainingSession.errors` every `error_period` updates
ErrorSnapshot = namedtuple('ErrorSnapshot', ['iteration', 'error'])

# Network output (and hidden unit outputs) evaluated on a grid of inputs
RegressionCurve = namedtuple('RegressionCurve', ['x', 'y', 'z'])


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        Log to this file (replacing any existing file). The default of
        None logs to stderr.

    level: int, default=logging.INFO
        The root logger level.
    """
    if filename is not None and os.path.exists(filename):
        os.remove(filename)

    line_fmt = ("[%(asctime)s] [%(name)s:%(lineno)d] "
                "%(levelname)-8s %(message)s")

    date_fmt = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        filename=filename, format=line_fmt,
        datefmt=date_fmt, level=level)


class TrainingSession:
    """ Drives a network through repeated online training passes, keeping
    the observed examples and a history of averaged error snapshots
    """
    def __init__(self, network):
        """
        Parameters
        ----------
        network: TwoLayerPerceptron
            The network to train. Its weights are updated in place.
        """
        self.network = network

        # Every distinct example presented so far
        self.observed = []

        # History of ErrorSnapshot
        self.errors = []

    def _log_with_iter(self, msg, level='info'):
        """ Write to the logger with the network's training count prepended
        to the log message
        """
        full_message = "(Iteration = {:06d}) {:s}".format(
            self.network.train_count(), msg)

        if level == 'info':
            logger.info(full_message)
        elif level == 'debug':
            logger.debug(full_message)
        elif level == 'warning':
            logger.warning(full_message)
        else:
            raise ValueError("Unknown log level: {}".format(level))

    def reset(self):
        """ Forget the observed examples and error history. The network is
        left untouched.
        """
        self.observed = []
        self.errors = []

    def averaged_error(self, copies=1):
        """ Sum of squared error over the observed examples, scaled by
        `copies` and divided by the number of updates so far

        `copies` is the number of times each observed example has been
        presented, so that the result approximates the mean squared error
        per update.
        """
        count = self.network.train_count()
        if count == 0:
            raise InvalidArgument(
                "The network has not been trained; no average error")

        return self.network.sum_of_error(self.observed) * copies / count

    def _snapshot(self, copies=1):
        average = self.averaged_error(copies=copies)
        snapshot = ErrorSnapshot(
            iteration=self.network.train_count(), error=average)
        self.errors.append(snapshot)

        if numpy.isfinite(average):
            self._log_with_iter("Average error = {:.7f}".format(average))
        else:
            self._log_with_iter(
                "Average error is not finite ({})".format(average),
                level='warning')

        return snapshot

    def train_one(self, x, target):
        """ Present a single example and record it
        """
        self.observed.append(TrainingExample(x=x, y=target))
        self.network.train(x, target)

    def train_sequential(self, training_set, epochs, error_period=None):
        """ Present every example of `training_set` in order, `epochs` times

        Parameters
        ----------
        training_set: list of (x, y) pairs

        epochs: int
            Number of passes over the training set.

        error_period: int, default=None
            Record an error snapshot whenever the training count is a
            multiple of this. The default of None uses the size of the
            training set, i.e., once per epoch.

        Returns
        -------
        errors: list of ErrorSnapshot
            The snapshots recorded during this call.
        """
        training_set = [TrainingExample(*example) for example in training_set]

        if epochs < 1:
            msg = "`epochs` must be at least 1 (got {})"
            raise InvalidArgument(msg.format(epochs))

        if error_period is None:
            error_period = max(len(training_set), 1)
        self._validate_error_period(error_period)

        self.observed.extend(training_set)
        n_recorded = len(self.errors)

        self._log_with_iter(
            "Training {} examples for {} epochs".format(
                len(training_set), epochs))

        for epoch in range(epochs):
            for example in training_set:
                self.network.train(example.x, example.y)

                if self.network.train_count() % error_period == 0:
                    self._snapshot(copies=epoch+1)

        return self.errors[n_recorded:]

    def train_random(self, target_function, n_samples,
                     x_min=DEFAULT_X_RANGE[0], x_max=DEFAULT_X_RANGE[1],
                     error_period=DEFAULT_RANDOM_ERROR_PERIOD,
                     random_state=None):
        """ Present `n_samples` examples with inputs drawn uniformly from
        [x_min, x_max) and targets given by `target_function`

        Returns
        -------
        errors: list of ErrorSnapshot
            The snapshots recorded during this call.
        """
        self._validate_error_period(error_period)

        samples = random_sample(
            target_function, n_samples, x_min=x_min, x_max=x_max,
            random_state=random_state)
        n_recorded = len(self.errors)

        self._log_with_iter(
            "Training {} random samples from [{}, {})".format(
                n_samples, x_min, x_max))

        for example in samples:
            self.train_one(example.x, example.y)

            if self.network.train_count() % error_period == 0:
                self._snapshot()

        return self.errors[n_recorded:]

    def regression_curve(self, n_points=DEFAULT_CURVE_POINTS):
        """ Evaluate the network on `n_points` evenly spaced inputs spanning
        the observed examples

        Returns
        -------
        curve: RegressionCurve
            `x` has shape (n_points,), `y` has shape (n_points,) and `z`
            has shape (n_points, n_hidden) with the hidden unit outputs.
        """
        if not self.observed:
            raise InvalidArgument("No examples have been observed")
        if n_points < 2:
            msg = "`n_points` must be at least 2 (got {})"
            raise InvalidArgument(msg.format(n_points))

        xs = [example.x for example in self.observed]
        x_grid = numpy.linspace(min(xs), max(xs), n_points)

        y = numpy.zeros(n_points)
        z = numpy.zeros((n_points, self.network.n_hidden))

        for n, x in enumerate(x_grid):
            z[n] = self.network.z(self.network.phi(x))
            y[n] = self.network.y(z[n])[0]

        return RegressionCurve(x=x_grid, y=y, z=z)

    def sorted_observed(self):
        """ The observed examples sorted by input
        """
        return sorted(self.observed, key=lambda example: example.x)

    @staticmethod
    def _validate_error_period(error_period):
        if error_period < 1:
            msg = "`error_period` must be at least 1 (got {})"
            raise InvalidArgument(msg.format(error_period))
