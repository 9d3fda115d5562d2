from __future__ import annotations

from typing import List, Optional, Tuple

Place = Tuple[int, int]  # (x, y) on the extended grid of cells, edges and intersections

# Unit steps towards the four sides of a cell; doubled, they reach the adjacent cell.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


def is_on_board(p: Place, cols: int, rows: int) -> bool:
    """True iff P lies within [0, 2*cols] x [0, 2*rows]."""
    x, y = p
    return 0 <= x <= 2 * cols and 0 <= y <= 2 * rows


def is_cell(p: Place, cols: int, rows: int) -> bool:
    x, y = p
    return is_on_board(p, cols, rows) and x % 2 == 1 and y % 2 == 1


def is_edge(p: Place, cols: int, rows: int) -> bool:
    x, y = p
    return is_on_board(p, cols, rows) and x % 2 != y % 2


def is_vert(p: Place, cols: int, rows: int) -> bool:
    return is_edge(p, cols, rows) and p[0] % 2 == 0


def is_horiz(p: Place, cols: int, rows: int) -> bool:
    return is_edge(p, cols, rows) and p[1] % 2 == 0


def is_intersection(p: Place, cols: int, rows: int) -> bool:
    x, y = p
    return is_on_board(p, cols, rows) and x % 2 == 0 and y % 2 == 0


def move(p: Place, dx: int, dy: int) -> Place:
    """Translates P by (dx, dy). The result is not checked against the board."""
    return p[0] + dx, p[1] + dy


def reflect(center: Place, p: Place, cols: int, rows: int) -> Optional[Place]:
    """Returns the point reflection of cell P through CENTER, or None if that
    is not a cell of a cols x rows board."""
    q = (2 * center[0] - p[0], 2 * center[1] - p[1])
    if not is_cell(q, cols, rows):
        return None
    return q


def touching_cells(p: Place) -> List[Place]:
    """Cells that "contain" P: P itself for a cell, the two cells either side
    of an edge, the four cells meeting at an intersection. Parity alone
    decides, so some results may lie off the board."""
    x, y = p
    if x % 2 == 1 and y % 2 == 1:
        return [p]
    if x % 2 == 0 and y % 2 == 1:
        return [move(p, -1, 0), move(p, 1, 0)]
    if x % 2 == 1 and y % 2 == 0:
        return [move(p, 0, -1), move(p, 0, 1)]
    return [move(p, 1, 1), move(p, -1, -1), move(p, -1, 1), move(p, 1, -1)]


def adjacent_cells(cell: Place) -> List[Tuple[Place, Place]]:
    """(edge, neighbor) pairs for the four sides of CELL, unchecked."""
    return [(move(cell, dx, dy), move(cell, 2 * dx, 2 * dy)) for dx, dy in NEIGHBOR_STEPS]
