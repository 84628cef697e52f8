"""
Text rendering for matrices.

One line per row, every column right-aligned to its widest entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix

# Significant digits shown for inexact elements.
DEFAULT_PRECISION = 6


def format_matrix(m: Matrix, precision: int = DEFAULT_PRECISION) -> str:
    field = m.field
    cells = [
        [field.format_element(value, precision) for value in row]
        for row in m.array
    ]
    widths = [max(len(row[j]) for row in cells) for j in range(m.cols)]
    return "\n".join(
        " ".join(cell.rjust(width) for cell, width in zip(row, widths))
        for row in cells
    )
