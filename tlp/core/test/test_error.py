import unittest

import numpy

from tlp.core import error
from tlp.core import forward
from tlp.data.sampling import TrainingExample


class TestError(unittest.TestCase):

    def setUp(self):
        random_state = numpy.random.RandomState(1234)
        self.w_ji = random_state.randn(4, forward.N_INPUTS)
        self.w_kj = random_state.randn(forward.N_OUTPUTS, 4)

    def test_error_is_squared_residual(self):
        x = forward.phi(0.5)
        y = forward.output_from_input(self.w_ji, self.w_kj, x, 0)

        self.assertAlmostEqual(
            error.error(self.w_ji, self.w_kj, x, y + 2.0), 4.0, places=12)
        self.assertEqual(error.error(self.w_ji, self.w_kj, x, y), 0.0)

    def test_sum_of_error_empty(self):
        self.assertEqual(error.sum_of_error(self.w_ji, self.w_kj, []), 0.0)

    def test_sum_of_error(self):
        random_state = numpy.random.RandomState(99)
        training_set = [
            TrainingExample(x=x, y=y)
            for x, y in zip(random_state.randn(20), random_state.randn(20))
        ]

        total = error.sum_of_error(self.w_ji, self.w_kj, training_set)

        expected = sum(
            error.error(self.w_ji, self.w_kj, forward.phi(ex.x), ex.y)
            for ex in training_set)

        self.assertGreaterEqual(total, 0.0)
        self.assertAlmostEqual(total, expected, places=10)

    def test_sum_of_error_accepts_pairs(self):
        total = error.sum_of_error(
            self.w_ji, self.w_kj, [(0.1, 1.0), (-0.1, -1.0)])
        self.assertGreater(total, 0.0)


if __name__ == '__main__':
    unittest.main()
