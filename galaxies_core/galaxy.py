from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Set

from .board import Board
from .geometry import Place, touching_cells
from .regions import find_enclosed, is_galaxy, max_unmarked_region, off_center

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Galaxy:
    """A validated galaxy: the cells claimed around one center."""
    center: Place
    cells: FrozenSet[Place]

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def __iter__(self) -> Iterator[Place]:
        return iter(sorted(self.cells))


def find_galaxy(board: Board, center: Place) -> Optional[Galaxy]:
    """
    Finds the galaxy around CENTER: the cells enclosed by boundaries around
    CENTER, restricted to the largest unmarked region symmetric about it, and
    validated with is_galaxy(). On success the galaxy's cells are marked 1 on
    BOARD; otherwise returns None and leaves claims untouched (apart from the
    reset described below).
    """
    enclosed = find_enclosed(board, center)
    if off_center(board, center, enclosed):
        logger.debug("center %s: enclosed region of %d cells is off-center", center, len(enclosed))
        return None

    # The center's own cells were claimed earlier: release what this center encloses.
    if any(board.mark(*c) > 0 for c in touching_cells(center)):
        board.mark_all(enclosed, 0)

    candidate = enclosed & max_unmarked_region(board, center)
    if not candidate or not is_galaxy(board, center, candidate):
        logger.debug("center %s: no galaxy (candidate of %d cells)", center, len(candidate))
        return None
    board.mark_all(candidate, 1)
    return Galaxy(center=center, cells=frozenset(candidate))


def find_galaxies(board: Board) -> List[Optional[Galaxy]]:
    """Clears all marks, then finds the galaxy of each center in placement order."""
    board.set_all_marks(0)
    return [find_galaxy(board, c) for c in board.centers()]


def solved(board: Board) -> bool:
    """True iff every center has a galaxy and together they cover every cell
    exactly once."""
    total = 0
    claimed: Set[Place] = set()
    for galaxy in find_galaxies(board):
        if galaxy is None:
            return False
        total += len(galaxy)
        claimed |= galaxy.cells
    logger.debug("solved check: %d claims over %d of %d cells", total, len(claimed), board.rows * board.cols)
    # A center re-claiming cells released for it counts them twice.
    return total == len(claimed) == board.rows * board.cols


def mark_galaxies(board: Board, v: int) -> None:
    """Marks the cells of every properly formed galaxy with V and leaves all
    other cells at 0."""
    if v < 0:
        raise ValueError(f'bad mark value: {v}')
    board.set_all_marks(0)
    for c in board.centers():
        galaxy = find_galaxy(board, c)
        if galaxy is not None:
            board.mark_all(galaxy.cells, v)
