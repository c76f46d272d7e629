"""
This module defines the interface of a vector in a complex inner product space
paired with its dual.
"""

class InnerProductDualSpace:
    @property
    def dim(self):
        raise NotImplementedError()

    def copy(self):
        raise NotImplementedError()

    def to_dual(self):
        raise NotImplementedError()

    def inner_product(self, dual):
        raise NotImplementedError()

    def normalize(self):
        raise NotImplementedError()
