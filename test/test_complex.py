import unittest

import numpy as np

from braket import Complex


class TestComplex(unittest.TestCase):
    def test_cartesian_polar_round_trip(self):
        c = Complex(0.3, -0.65)
        r, theta = c.to_polar()
        c_reconstituted = Complex.from_polar(r, theta)
        diff = c_reconstituted - c
        self.assertTrue(abs(diff.re) < 1e-4 and abs(diff.im) < 1e-4)

    def test_polar_coordinates(self):
        r, theta = Complex(0, 2).to_polar()
        self.assertTrue(np.isclose(r, 2))
        self.assertTrue(np.isclose(theta, np.pi/2))
        self.assertTrue(np.isclose(abs(Complex(3, 4)), 5))

    def test_constants(self):
        self.assertEqual(Complex.zero(), Complex(0, 0))
        self.assertEqual(Complex.one(), Complex(1, 0))
        self.assertEqual(Complex.i(), Complex(0, 1))
        self.assertEqual(Complex(), Complex.zero())

    def test_add_subtract(self):
        a, b = Complex(1, 2), Complex(0.5, -3)
        self.assertEqual(a + b, Complex(1.5, -1))
        self.assertEqual(a - b, Complex(0.5, 5))
        self.assertEqual(-a, Complex(-1, -2))
        self.assertEqual(a + 1j, Complex(1, 3))
        self.assertEqual(1 - a, Complex(0, -2))

    def test_multiply(self):
        self.assertEqual(Complex(1, 2) * Complex(3, 4), Complex(-5, 10))
        self.assertEqual(Complex(1, 2) * 2, Complex(2, 4))
        self.assertEqual(2 * Complex(1, 2), Complex(2, 4))
        self.assertEqual(np.float64(2) * Complex(1, 1), Complex(2, 2))
        self.assertEqual(Complex.i() * Complex.i(), Complex(-1, 0))

    def test_divide_by_real(self):
        self.assertEqual(Complex(3, -6) / 3, Complex(1, -2))

    def test_divide_by_complex_uses_dividend_magnitude(self):
        # denominator is |a|^2 = 2, not |b|^2 = 4
        self.assertEqual(Complex(1, 1) / Complex(2, 0), Complex(1, -1))
        self.assertEqual(Complex(0, 1) / Complex(0, 1), Complex(1, 0))

    def test_division_by_zero_is_ieee(self):
        c = Complex(1, 0) / 0
        self.assertTrue(np.isinf(c.re))
        self.assertTrue(np.isnan(c.im))
        c = Complex(0, 0) / Complex(1, 1)
        self.assertTrue(np.isnan(c.re) and np.isnan(c.im))

    def test_conjugate(self):
        self.assertEqual(Complex(1.5, -2).conjugate(), Complex(1.5, 2))
        self.assertEqual(Complex(1.5, -2).conjugate().conjugate(), Complex(1.5, -2))

    def test_immutable(self):
        c = Complex(1, 2)
        with self.assertRaises(AttributeError):
            c.re = 3
        d = c
        d += Complex(1, 0)
        self.assertEqual(c, Complex(1, 2))
        self.assertEqual(d, Complex(2, 2))

    def test_builtin_interop(self):
        c = Complex(1, -2)
        self.assertEqual(complex(c), 1 - 2j)
        self.assertEqual(Complex.from_number(1 - 2j), c)
        self.assertEqual(c, 1 - 2j)
        self.assertEqual(hash(c), hash(1 - 2j))
        with self.assertRaises(TypeError):
            Complex.from_number('1+2j')

    def test_str(self):
        self.assertEqual(str(Complex(0.3, -0.65)), '0.3 - 0.65i')
        self.assertEqual(str(Complex(1, 0)), '1 + 0i')
        self.assertEqual(str(Complex(-0.5, -0.0)), '-0.5 + 0i')
        self.assertEqual(str(Complex(-0.0, 2.25)), '-0 + 2.25i')
        self.assertEqual(str(Complex(float('nan'), 1)), 'NaN + 1i')
        self.assertEqual(str(Complex(float('inf'), float('-inf'))), 'inf - infi')
        self.assertEqual(str(Complex(1e-7, 0)), '0.0000001 + 0i')

    def test_repr(self):
        self.assertEqual(repr(Complex(1, -0.5)), 'Complex(re=1.0, im=-0.5)')
