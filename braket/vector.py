"""
This module implements bra and ket vectors of a finite dimensional complex
space.

Whether a vector is a bra or a ket is carried by its class. Arithmetic between
vectors is only defined for two vectors of the same class and dimension; the
only way to pair a bra with a ket is the inner product.
"""

import logging
from numbers import Integral, Number, Real

import numpy as np

from .complex import Complex
from .dual_space import InnerProductDualSpace
from .formatting import format_vector

logger = logging.getLogger(__name__)


class DimensionMismatchError(ValueError):
    pass


def check_dims(first, second):
    if first.dim != second.dim:
        raise DimensionMismatchError(f'dimensions do not match: {first.dim} != {second.dim}')


def as_components(values):
    components = np.array([complex(Complex.from_number(v)) for v in values], dtype=complex)
    if components.size == 0:
        raise ValueError('a vector needs at least one component')
    return components


class Vector(InnerProductDualSpace):
    marker = None
    # set once both Ket and Bra exist
    _dual = None

    __array_ufunc__ = None

    def __init__(self, values):
        if type(self) is Vector:
            raise TypeError('Vector cannot be instantiated directly; use Ket or Bra')
        self._components = as_components(values)

    @classmethod
    def zeros(cls, dim):
        if dim < 1:
            raise ValueError(f'dimension must be positive, got {dim}')
        return cls._wrap(np.zeros(dim, dtype=complex))

    @classmethod
    def _wrap(cls, components):
        vector = cls.__new__(cls)
        vector._components = components
        return vector

    @property
    def dim(self):
        return self._components.shape[0]

    def __len__(self):
        return self.dim

    def __iter__(self):
        for z in self._components:
            yield Complex.from_number(z)

    def __getitem__(self, index):
        if not isinstance(index, Integral):
            raise TypeError(f'vector indices must be integers, not {type(index).__name__}')
        return Complex.from_number(self._components[index])

    def __setitem__(self, index, value):
        if not isinstance(index, Integral):
            raise TypeError(f'vector indices must be integers, not {type(index).__name__}')
        self._components[index] = complex(Complex.from_number(value))

    def as_numpy(self):
        return self._components.copy()

    def copy(self):
        return self._wrap(self._components.copy())

    def conjugate_transpose(self):
        return self._dual._wrap(self._components.conj())

    def to_dual(self):
        return self.conjugate_transpose()

    def normalize(self):
        ip = self.inner_product(self.to_dual())
        with np.errstate(divide='ignore', invalid='ignore'):
            # sums the parts of the inner product instead of taking its modulus
            magnitude = np.sqrt(ip.re + ip.im)
            self._components = self._components / magnitude
        logger.debug('normalized %s of dimension %d by %s', type(self).__name__, self.dim, magnitude)

    def scale(self, a):
        if isinstance(a, Complex):
            a = complex(a)
        with np.errstate(over='ignore', invalid='ignore'):
            return self._wrap(self._components * a)

    def __mul__(self, other):
        if isinstance(other, (Number, Complex)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Number, Complex)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Real):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self._wrap(self._components / float(other))
        return NotImplemented

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.dim == other.dim and bool(np.all(self._components == other._components))

    __hash__ = None

    def __str__(self):
        return format_vector(self.marker, self._components)

    def __repr__(self):
        return f'{type(self).__name__}({self._components.tolist()!r})'


def inherit_unary_operators(*operator_names):
    def add_unary_operator(operator_name):
        def method(self):
            return self._wrap(getattr(self._components, operator_name)())
        method.__module__ = Vector.__module__
        method.__qualname__ = '{}.{}'.format(Vector.__qualname__, operator_name)
        method.__name__ = operator_name
        setattr(Vector, operator_name, method)
    for op_name in operator_names:
        add_unary_operator(op_name)


def inherit_binary_operators(*operator_names):
    def add_binary_operator(operator_name):
        def method(self, other):
            if type(other) is type(self):
                check_dims(self, other)
                return self._wrap(getattr(self._components, operator_name)(other._components))
            return NotImplemented
        method.__module__ = Vector.__module__
        method.__qualname__ = '{}.{}'.format(Vector.__qualname__, operator_name)
        method.__name__ = operator_name
        setattr(Vector, operator_name, method)
    for op_name in operator_names:
        add_binary_operator(op_name)


inherit_unary_operators(
    '__pos__',
    '__neg__',
)

inherit_binary_operators(
    '__add__',
    '__sub__',
)


class Ket(Vector):
    """Primal (column) vector, written |v>."""

    marker = '(|>)'

    def to_bra(self):
        return self.conjugate_transpose()

    def inner_product(self, dual):
        return inner_product(dual, self)


class Bra(Vector):
    """Dual (row) vector, written <v|."""

    marker = '(<|)'

    def to_ket(self):
        return self.conjugate_transpose()

    def inner_product(self, dual):
        return inner_product(self, dual)

    def __mul__(self, other):
        if isinstance(other, Ket):
            return inner_product(self, other)
        return super().__mul__(other)


Ket._dual = Bra
Bra._dual = Ket


def conjugate_transpose(vector):
    return vector.conjugate_transpose()


def inner_product(bra, ket):
    """
    Pair a bra with a ket: sum_i bra[i] * ket[i].

    The bra is already conjugated, so no further conjugation takes place.
    """
    if not isinstance(bra, Bra) or not isinstance(ket, Ket):
        raise TypeError(
            f'inner product pairs a Bra with a Ket, got {type(bra).__name__} and {type(ket).__name__}'
        )
    check_dims(bra, ket)
    return Complex.from_number(np.sum(bra._components * ket._components))
