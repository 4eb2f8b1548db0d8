"""Spatial cell neighbourhood used to describe the player's surroundings.

The server is told which cells to report map objects for. The session always
sends a fixed-size neighbourhood: the cell containing the player followed by
the cells sharing an edge with it, all at ``CELL_ID_LEVEL``.
"""

from __future__ import annotations

import logging

import h3

from .const import CELL_ID_LEVEL
from .location import Location

_LOGGER = logging.getLogger(__name__)

# Edge neighbours of a hexagonal cell
NEIGHBOR_COUNT = 6


def get_origin_cell(location: Location, level: int = CELL_ID_LEVEL) -> str:
    """Return the index of the cell containing the location."""
    return h3.latlng_to_cell(*location.latlng, level)


def get_cell_ids(location: Location, level: int = CELL_ID_LEVEL) -> list[int]:
    """Return the origin cell id followed by its edge neighbours.

    Neighbours are ordered by ascending id so identical locations always
    produce identical lists. A pentagon origin has only five edge
    neighbours; the lowest id of its second ring fills the last slot so the
    neighbourhood always holds seven cells.

    Args:
        location: Player location
        level: Cell resolution

    Returns:
        Unsigned 64-bit cell ids, origin first
    """
    origin = get_origin_cell(location, level)
    neighbors = sorted(h3.str_to_int(cell) for cell in h3.grid_ring(origin, 1))

    if h3.is_pentagon(origin):
        _LOGGER.debug("Location %s falls in pentagon cell %s", location, origin)
        second_ring = sorted(
            h3.str_to_int(cell)
            for cell in set(h3.grid_disk(origin, 2)) - set(h3.grid_disk(origin, 1))
        )
        neighbors.extend(second_ring[: NEIGHBOR_COUNT - len(neighbors)])

    return [h3.str_to_int(origin), *neighbors]
