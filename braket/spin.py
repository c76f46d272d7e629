"""
This module defines the canonical spin-1/2 states and Pauli operators.
"""

import numpy as np

from .complex import Complex
from .operator import HermitianOperator
from .vector import Ket

ONE_OVER_SQRT2 = 1 / np.sqrt(2)


def up():
    return Ket([Complex.one(), Complex.zero()])

def down():
    return Ket([Complex.zero(), Complex.one()])

def left():
    return ONE_OVER_SQRT2 * up() - ONE_OVER_SQRT2 * down()

def right():
    return ONE_OVER_SQRT2 * up() + ONE_OVER_SQRT2 * down()

def in_():
    return ONE_OVER_SQRT2 * up() + Complex.i() * ONE_OVER_SQRT2 * down()

def out():
    return ONE_OVER_SQRT2 * up() - Complex.i() * ONE_OVER_SQRT2 * down()

def sigma_x():
    return HermitianOperator([[0, 1], [1, 0]])

def sigma_y():
    return HermitianOperator([[Complex.zero(), Complex(0, -1)], [Complex.i(), Complex.zero()]])

def sigma_z():
    return HermitianOperator([[1, 0], [0, -1]])
