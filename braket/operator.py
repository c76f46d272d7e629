"""
This module implements Hermitian operators and their action on bras and kets.
"""

import logging

import numpy as np

from .complex import Complex
from .formatting import format_grid
from .vector import Bra, DimensionMismatchError, Ket, check_dims

logger = logging.getLogger(__name__)


class HermitianViolation(ValueError):
    def __init__(self, row, column):
        super().__init__(f'Attempt to construct non-Hermitian operator: entry ({row}, {column}) '
                         f'is not the conjugate of entry ({column}, {row})')
        self.row = row
        self.column = column


def as_grid(grid):
    rows = [[complex(Complex.from_number(z)) for z in row] for row in grid]
    dim = len(rows)
    if dim == 0:
        raise DimensionMismatchError('an operator needs at least one row')
    for row in rows:
        if len(row) != dim:
            raise DimensionMismatchError(f'operator grid must be square, got a row of {len(row)} in a {dim}-row grid')
    return np.array(rows, dtype=complex)


def find_violation(matrix):
    """Return the first (row, column) with M[i][j] != conj(M[j][i]), or None."""
    dim = matrix.shape[0]
    for ridx in range(dim):
        for cidx in range(dim):
            if matrix[ridx, cidx] != np.conj(matrix[cidx, ridx]):
                return ridx, cidx
    return None


class HermitianOperator:
    """
    Square operator equal to its own conjugate transpose.

    The grid is checked once, on construction; a grid failing the check raises
    HermitianViolation, so every instance is Hermitian.
    """

    __array_ufunc__ = None

    def __init__(self, grid):
        matrix = as_grid(grid)
        violation = find_violation(matrix)
        if violation is not None:
            logger.debug('rejected %dx%d grid, first violation at %s', *matrix.shape, violation)
            raise HermitianViolation(*violation)
        matrix.setflags(write=False)
        self._matrix = matrix

    @staticmethod
    def identity(dim):
        return HermitianOperator(np.eye(dim, dtype=complex))

    @property
    def dim(self):
        return self._matrix.shape[0]

    def __len__(self):
        return self.dim

    def __getitem__(self, index):
        ridx, cidx = index
        return Complex.from_number(self._matrix[ridx, cidx])

    def rows(self):
        for row in self._matrix:
            yield [Complex.from_number(z) for z in row]

    def as_numpy(self):
        return self._matrix.copy()

    def apply(self, ket):
        return apply(self, ket)

    def apply_dual(self, bra):
        return apply_dual(bra, self)

    def expectation(self, ket):
        return ket.to_bra() * apply(self, ket)

    def __mul__(self, other):
        if isinstance(other, Ket):
            return apply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Bra):
            return apply_dual(other, self)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, HermitianOperator):
            return NotImplemented
        return self.dim == other.dim and bool(np.all(self._matrix == other._matrix))

    def __hash__(self):
        return hash(tuple(self._matrix.ravel().tolist()))

    def __str__(self):
        return format_grid(self._matrix)

    def __repr__(self):
        return f'HermitianOperator({self._matrix.tolist()!r})'


def apply(operator, ket):
    """out[i] = sum_j M[i][j] * ket[j]"""
    if not isinstance(ket, Ket):
        raise TypeError(f'operators act on a Ket from the left, got {type(ket).__name__}')
    check_dims(operator, ket)
    return Ket._wrap(operator._matrix @ ket._components)


def apply_dual(bra, operator):
    """out[j] = sum_i bra[i] * M[i][j]"""
    if not isinstance(bra, Bra):
        raise TypeError(f'operators act on a Bra from the right, got {type(bra).__name__}')
    check_dims(bra, operator)
    return Bra._wrap(bra._components @ operator._matrix)
