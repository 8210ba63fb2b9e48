import unittest

import numpy

from tlp.core import forward


class TestTanh(unittest.TestCase):

    def test_zero(self):
        self.assertEqual(forward.tanh(0.0), 0.0)

    def test_odd(self):
        random_state = numpy.random.RandomState(1234)

        for a in random_state.randn(100) * 5:
            self.assertEqual(forward.tanh(-a), -forward.tanh(a))

    def test_saturates_without_overflow(self):
        self.assertEqual(forward.tanh(1000.0), 1.0)
        self.assertEqual(forward.tanh(-1000.0), -1.0)

    def test_matches_numpy(self):
        a = numpy.linspace(-5, 5, 101)
        h = forward.tanh(a)

        self.assertEqual(h.shape, a.shape)
        self.assertLess(numpy.abs(h - numpy.tanh(a)).max(), 1e-12)

    def test_array_with_large_values(self):
        h = forward.tanh(numpy.array([-1e4, 0.0, 1e4]))
        self.assertTrue((h == numpy.array([-1.0, 0.0, 1.0])).all())


class TestForward(unittest.TestCase):

    def setUp(self):
        random_state = numpy.random.RandomState(1234)
        self.n_hidden = 5
        self.w_ji = random_state.randn(self.n_hidden, forward.N_INPUTS)
        self.w_kj = random_state.randn(forward.N_OUTPUTS, self.n_hidden)

    def test_phi(self):
        x = forward.phi(0.75)

        self.assertEqual(x(0), 1.0)
        self.assertEqual(x(1), 0.75)

        self.assertTrue(
            (forward.input_vector(x) == numpy.array([1.0, 0.75])).all())

    def test_bias_hidden_unit(self):
        for x in [-100.0, 0.0, 3.0]:
            self.assertEqual(
                forward.hidden_unit_output(self.w_ji, forward.phi(x), 0), 1.0)

    def test_hidden_unit_output(self):
        x = 0.3
        j = 2
        expected = numpy.tanh(self.w_ji[j, 0] + self.w_ji[j, 1] * x)

        z_j = forward.hidden_unit_output(self.w_ji, forward.phi(x), j)

        self.assertAlmostEqual(z_j, expected, places=12)

    def test_hidden_outputs(self):
        z = forward.hidden_outputs(self.w_ji, forward.phi(-0.4))

        self.assertEqual(z.shape, (self.n_hidden,))
        self.assertEqual(z[0], 1.0)
        self.assertTrue((numpy.abs(z) <= 1).all())

    def test_outputs_are_linear_in_hidden_outputs(self):
        x = forward.phi(0.9)
        z = forward.hidden_outputs(self.w_ji, x)

        y = forward.outputs(self.w_kj, z)

        self.assertEqual(y.shape, (forward.N_OUTPUTS,))
        self.assertAlmostEqual(y[0], numpy.dot(self.w_kj[0], z), places=12)

    def test_output_from_input_matches_output_from_hidden(self):
        x = forward.phi(-0.2)
        z = forward.hidden_outputs(self.w_ji, x)

        self.assertEqual(
            forward.output_from_input(self.w_ji, self.w_kj, x, 0),
            forward.output_from_hidden(self.w_kj, z, 0))

    def test_single_hidden_unit_ignores_input(self):
        w_ji = numpy.array([[0.2, 0.3]])
        w_kj = numpy.array([[0.7]])

        for x in [-5.0, 0.0, 5.0]:
            self.assertEqual(
                forward.output_from_input(w_ji, w_kj, forward.phi(x), 0), 0.7)


if __name__ == '__main__':
    unittest.main()
