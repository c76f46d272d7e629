"""
This module renders scalars, vectors and operator grids as text.
"""

import numpy as np


def format_real(x):
    x = float(x)
    if np.isnan(x):
        return 'NaN'
    return np.format_float_positional(x, unique=True, trim='-')


def format_complex(re, im):
    join_op = '+' if im >= 0.0 else '-'
    return f'{format_real(re)} {join_op} {format_real(abs(im))}i'


def format_vector(marker, components):
    body = ', '.join(format_complex(z.real, z.imag) for z in components)
    return f'{marker} [{body}]'


def format_grid(grid):
    rows = []
    for row in grid:
        rows.append('[' + ', '.join(format_complex(z.real, z.imag) for z in row) + ']')
    return '\n[' + '\n '.join(rows) + ']'
