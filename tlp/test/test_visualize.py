import unittest

import matplotlib
matplotlib.use('Agg')  # noqa: E402

import matplotlib.pyplot as plt
import numpy

from tlp import initializer
from tlp.core.network import init
from tlp.core.session import TrainingSession
from tlp.data import sampling
from tlp.data import target_functions
from tlp import visualize


class TestVisualize(unittest.TestCase):

    def setUp(self):
        network = init(
            hidden_units=3,
            weight_init=initializer.uniform(
                random_state=numpy.random.RandomState(1234)))
        self.session = TrainingSession(network)
        self.session.train_sequential(
            sampling.sequential(target_functions.sin_pi, 10), epochs=5)

    def tearDown(self):
        plt.close('all')

    def test_plot_regression(self):
        ax = visualize.plot_regression(self.session, n_points=20)
        self.assertEqual(len(ax.get_lines()), 2)

    def test_plot_regression_with_hidden_outputs(self):
        ax = visualize.plot_regression(
            self.session, n_points=20, show_hidden=True)

        # Training data, network output and one line per hidden unit
        self.assertEqual(len(ax.get_lines()), 2 + 3)
        labels = [line.get_label() for line in ax.get_lines()]
        self.assertIn('z_2', labels)

    def test_plot_errors(self):
        ax = visualize.plot_errors(self.session.errors)

        line, = ax.get_lines()
        self.assertEqual(list(line.get_xdata()), [10, 20, 30, 40, 50])


if __name__ == '__main__':
    unittest.main()
