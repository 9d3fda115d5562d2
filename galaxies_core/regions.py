from __future__ import annotations

from typing import Iterable, List, Set

from .board import Board
from .geometry import Place, adjacent_cells, touching_cells


def accrete_region(board: Board, cell: Place, region: Set[Place]) -> None:
    """
    Adds to REGION every cell reachable from CELL by single horizontal or
    vertical steps that cross no boundary. Cells already in REGION are not
    expanded again. Uses an explicit stack so large boards cannot exhaust
    the recursion limit.
    """
    if not board.is_cell(*cell):
        raise ValueError(f'not a cell: {cell}')
    stack: List[Place] = [cell]
    while stack:
        current = stack.pop()
        if current in region:
            continue
        region.add(current)
        for edge, nxt in adjacent_cells(current):
            # A removed periphery boundary must not let the fill leave the board.
            if edge in board.boundaries or not board.is_cell(*nxt):
                continue
            if nxt not in region:
                stack.append(nxt)


def find_enclosed(board: Board, center: Place) -> Set[Place]:
    """Union of the regions accreted from every on-board cell touching CENTER."""
    enclosed: Set[Place] = set()
    for cell in touching_cells(center):
        if board.is_cell(*cell):
            accrete_region(board, cell, enclosed)
    return enclosed


def off_center(board: Board, center: Place, region: Iterable[Place]) -> bool:
    """True if some cell of REGION has no mirror image through CENTER inside it."""
    cells = set(region)
    for cell in cells:
        if board.reflect(center, cell) not in cells:
            return True
    return False


def is_galaxy(board: Board, center: Place, region: Set[Place]) -> bool:
    """
    True iff REGION (assumed connected) is a correctly formed galaxy:
    - no center other than CENTER lies in it,
    - it is symmetric about CENTER, and
    - no boundary separates two of its cells.
    """
    for cell in region:
        if cell != center and board.is_center(*cell):
            return False
        for edge, nxt in adjacent_cells(cell):
            if edge in board.boundaries and nxt in region:
                return False
        if board.reflect(center, cell) not in region:
            return False
    return True


def unmarked_containing(board: Board, place: Place) -> List[Place]:
    """Cells touching PLACE if all of them exist and are unmarked, else []."""
    cells = touching_cells(place)
    if all(board.mark(*c) == 0 for c in cells):
        return cells
    return []


def unmarked_sym_adjacent(board: Board, center: Place, region: Set[Place]) -> Set[Place]:
    """
    Cells c such that c is unmarked and outside REGION, the mirror of c through
    CENTER exists and is likewise unmarked and outside REGION, and c is
    horizontally or vertically adjacent to a cell of REGION.
    """
    result: Set[Place] = set()
    for r in region:
        for _edge, p in adjacent_cells(r):
            if p in region or board.mark(*p) != 0:
                continue
            opp = board.reflect(center, p)
            if opp is None or opp in region or board.mark(*opp) != 0:
                continue
            result.add(p)
    return result


def max_unmarked_region(board: Board, center: Place) -> Set[Place]:
    """
    Largest contiguous region of unmarked cells, symmetric about CENTER, that
    contains every cell touching CENTER. Boundaries and other centers are
    ignored. Empty if a touching cell is missing or marked.

    Region membership is tracked in a local set; board marks are only read.
    """
    region: Set[Place] = set(unmarked_containing(board, center))
    if not region:
        return region
    for _ in range(max(board.cols, board.rows)):
        added = unmarked_sym_adjacent(board, center, region)
        if not added:
            break
        region |= added
    return region
