import unittest

import numpy

from tlp.initializer import weights


class TestWeights(unittest.TestCase):

    def test_uniform_bounds(self):
        init = weights.uniform(
            low=-0.5, high=0.5, random_state=numpy.random.RandomState(1))

        draws = numpy.array([init() for _ in range(1000)])

        self.assertTrue(((draws >= -0.5) & (draws < 0.5)).all())
        # Independent draws
        self.assertGreater(len(numpy.unique(draws)), 990)

    def test_uniform_reproducible(self):
        first = weights.uniform(random_state=numpy.random.RandomState(5))
        second = weights.uniform(random_state=numpy.random.RandomState(5))

        self.assertEqual([first() for _ in range(5)],
                         [second() for _ in range(5)])

    def test_normal_scale(self):
        init = weights.normal(
            scale=0.1, random_state=numpy.random.RandomState(2))

        draws = numpy.array([init() for _ in range(5000)])

        self.assertLess(abs(draws.mean()), 0.01)
        self.assertLess(abs(draws.std() - 0.1), 0.01)

    def test_constant(self):
        init = weights.constant(0.5)
        self.assertEqual([init() for _ in range(3)], [0.5, 0.5, 0.5])


if __name__ == '__main__':
    unittest.main()
