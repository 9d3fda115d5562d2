from __future__ import annotations

# Facade module that re-exports the Galaxies core functionality used by the
# Flask app and tests. Single-responsibility modules live under galaxies_core/*.

from galaxies_core.geometry import (
    NEIGHBOR_STEPS,
    Place,
    adjacent_cells,
    is_cell,
    is_edge,
    is_horiz,
    is_intersection,
    is_on_board,
    is_vert,
    move,
    reflect,
    touching_cells,
)
from galaxies_core.board import DEFAULT_SIZE, Board
from galaxies_core.regions import (
    accrete_region,
    find_enclosed,
    is_galaxy,
    max_unmarked_region,
    off_center,
    unmarked_containing,
    unmarked_sym_adjacent,
)
from galaxies_core.galaxy import (
    Galaxy,
    find_galaxies,
    find_galaxy,
    mark_galaxies,
    solved,
)

__all__ = [
    'NEIGHBOR_STEPS',
    'Place',
    'adjacent_cells',
    'is_cell',
    'is_edge',
    'is_horiz',
    'is_intersection',
    'is_on_board',
    'is_vert',
    'move',
    'reflect',
    'touching_cells',
    'DEFAULT_SIZE',
    'Board',
    'accrete_region',
    'find_enclosed',
    'is_galaxy',
    'max_unmarked_region',
    'off_center',
    'unmarked_containing',
    'unmarked_sym_adjacent',
    'Galaxy',
    'find_galaxies',
    'find_galaxy',
    'mark_galaxies',
    'solved',
]
