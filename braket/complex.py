"""
This module defines the complex scalar used by vectors and operators.
"""

import numbers
from numbers import Real

import numpy as np

from .formatting import format_complex


def _divide(x, y):
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.divide(np.float64(x), np.float64(y)))


class Complex:
    """
    Immutable complex number with double precision components.

    Arithmetic follows IEEE-754 semantics throughout: dividing by zero gives
    inf or nan instead of raising.
    """

    __slots__ = ('_re', '_im')

    # keep numpy from broadcasting over Complex operands
    __array_ufunc__ = None

    def __init__(self, re=0.0, im=0.0):
        self._re = float(re)
        self._im = float(im)

    @staticmethod
    def zero():
        return Complex(0.0, 0.0)

    @staticmethod
    def one():
        return Complex(1.0, 0.0)

    @staticmethod
    def i():
        return Complex(0.0, 1.0)

    @staticmethod
    def from_polar(r, theta):
        return Complex(r * np.cos(theta), r * np.sin(theta))

    @staticmethod
    def from_number(z):
        if isinstance(z, Complex):
            return z
        if isinstance(z, numbers.Complex):
            return Complex(z.real, z.imag)
        raise TypeError(f'cannot convert {type(z).__name__} to Complex')

    @property
    def re(self):
        return self._re

    @property
    def im(self):
        return self._im

    @property
    def real(self):
        return self._re

    @property
    def imag(self):
        return self._im

    def conjugate(self):
        return Complex(self._re, -self._im)

    def to_polar(self):
        r = float(np.sqrt(self._re * self._re + self._im * self._im))
        theta = float(np.arctan2(self._im, self._re))
        return r, theta

    def __complex__(self):
        return complex(self._re, self._im)

    def __abs__(self):
        return self.to_polar()[0]

    def __pos__(self):
        return self

    def __neg__(self):
        return Complex(-self._re, -self._im)

    def __add__(self, other):
        if isinstance(other, (numbers.Complex, Complex)):
            other = Complex.from_number(other)
            return Complex(self._re + other._re, self._im + other._im)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, (numbers.Complex, Complex)):
            other = Complex.from_number(other)
            return Complex(self._re - other._re, self._im - other._im)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Complex):
            return Complex.from_number(other) - self
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Real):
            return Complex(self._re * other, self._im * other)
        if isinstance(other, (numbers.Complex, Complex)):
            other = Complex.from_number(other)
            return Complex(
                self._re * other._re - self._im * other._im,
                self._re * other._im + self._im * other._re,
            )
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Real):
            return Complex(_divide(self._re, other), _divide(self._im, other))
        if isinstance(other, (numbers.Complex, Complex)):
            other = Complex.from_number(other)
            # normalised by the dividend's magnitude, not the divisor's
            denom = self._re * self._re + self._im * self._im
            return Complex(
                _divide(other._re * self._re + other._im * self._im, denom),
                _divide(other._im * self._re - other._re * self._im, denom),
            )
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Complex):
            return Complex.from_number(other) / self
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, (numbers.Complex, Complex)):
            other = Complex.from_number(other)
            return self._re == other._re and self._im == other._im
        return NotImplemented

    def __hash__(self):
        return hash(complex(self._re, self._im))

    def __str__(self):
        return format_complex(self._re, self._im)

    def __repr__(self):
        return f'Complex(re={self._re!r}, im={self._im!r})'
