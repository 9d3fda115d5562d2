"""
Galaxies core Python package.

Board state and the galaxy detection engine for the Galaxies region-partition
puzzle, kept free of any UI so it can be tested on its own.
Modules:
- geometry.py: Place, classification predicates, point reflection
- board.py: Board (boundaries, centers, marks)
- regions.py: flood fill, symmetry validation, unmarked-region growth
- galaxy.py: Galaxy, find_galaxy, solved, mark_galaxies
"""
