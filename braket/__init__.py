import logging

from .version import VERSION as __version__
from .complex import Complex
from .vector import Vector, Ket, Bra, DimensionMismatchError, conjugate_transpose, inner_product
from .operator import HermitianOperator, HermitianViolation, apply, apply_dual
from . import spin

logging.getLogger(__name__).addHandler(logging.NullHandler())
