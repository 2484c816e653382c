"""Lookup tables for REBA and RULA.

Immutable nested tuples indexed by zero-based, clamped coordinates.

REBA Table A  -> [neck 1-3][trunk 1-5][legs 1-4]
REBA Table B  -> [upper arm 1-6][lower arm 1-3][wrist 1-2 (3 uses the last column)]
REBA Table C  -> [score A 1-12][score B 1-12]
RULA Table C  -> [upper arm + lower arm - 2, 0-11][wrist 1-4]
RULA Table D  -> [neck + trunk - 2, 0-11][legs 1-4]
"""
from typing import Tuple

Table2D = Tuple[Tuple[int, ...], ...]
Table3D = Tuple[Table2D, ...]

REBA_TABLE_A: Table3D = (
    ((1, 2, 3, 4), (2, 3, 4, 5), (2, 4, 5, 6), (3, 5, 6, 7), (4, 6, 7, 8)),
    ((1, 2, 3, 4), (3, 4, 5, 6), (4, 5, 6, 7), (5, 6, 7, 8), (6, 7, 8, 9)),
    ((3, 3, 5, 6), (4, 5, 6, 7), (5, 6, 7, 8), (6, 7, 8, 9), (7, 8, 9, 9)),
)

# Wrist rows only carry two columns; a wrist index of 2 falls off the row
# and scores 0.
REBA_TABLE_B: Table3D = (
    ((1, 2), (1, 2), (3, 3)),
    ((1, 2), (2, 3), (3, 4)),
    ((3, 3), (3, 4), (5, 5)),
    ((4, 4), (4, 5), (5, 5)),
    ((6, 6), (6, 7), (7, 7)),
    ((7, 7), (7, 8), (8, 8)),
)

REBA_TABLE_C: Table2D = (
    (1, 1, 1, 2, 3, 3, 4, 5, 6, 7, 7, 7),
    (1, 2, 2, 3, 4, 4, 5, 6, 6, 7, 7, 8),
    (2, 3, 3, 3, 4, 5, 6, 7, 7, 8, 8, 8),
    (3, 4, 4, 4, 5, 6, 7, 8, 8, 9, 9, 9),
    (4, 4, 4, 5, 6, 7, 8, 8, 9, 9, 10, 10),
    (6, 6, 6, 7, 8, 8, 9, 9, 10, 10, 10, 10),
    (7, 7, 7, 8, 9, 9, 9, 10, 10, 11, 11, 11),
    (8, 8, 8, 9, 10, 10, 10, 10, 10, 11, 11, 11),
    (9, 9, 9, 10, 10, 10, 11, 11, 11, 12, 12, 12),
    (10, 10, 10, 11, 11, 11, 11, 12, 12, 12, 12, 12),
    (11, 11, 11, 11, 12, 12, 12, 12, 12, 12, 12, 12),
    (12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12),
)

RULA_TABLE_C: Table2D = (
    (1, 2, 3, 3),
    (2, 2, 3, 4),
    (3, 3, 3, 4),
    (3, 3, 4, 4),
    (4, 4, 4, 5),
    (4, 4, 4, 5),
    (5, 5, 5, 6),
    (5, 5, 5, 6),
    (6, 6, 6, 7),
    (6, 6, 7, 7),
    (7, 7, 7, 7),
    (7, 7, 7, 8),
)

RULA_TABLE_D: Table2D = (
    (1, 2, 3, 3),
    (2, 2, 3, 4),
    (3, 3, 3, 4),
    (3, 3, 4, 4),
    (4, 4, 4, 5),
    (4, 4, 4, 5),
    (5, 5, 5, 6),
    (5, 5, 5, 6),
    (6, 6, 6, 7),
    (6, 6, 7, 7),
    (7, 7, 7, 7),
    (7, 7, 7, 8),
)
