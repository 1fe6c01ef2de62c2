# dungeon/grid/free_space.py
"""
First-fit placement of an item footprint inside a grid.

Candidates are scanned row-major from the grid origin: row by row from the
top, and within a row column by column from the left. The first candidate
that fits inside the grid and overlaps no occupied region wins. On an empty
4x4 grid, placing 2x2, 2x2 and then 1x1 lands at (0,0), (0,2) and (2,0).
"""
from typing import Iterator, Optional, Sequence, Tuple

from dungeon.grid.region import Region

def scan_anchors(grid_bound: Region, item_width: int, item_height: int) -> Iterator[Tuple[int, int]]:
    """Yields every (row, col) anchor where the footprint stays inside the bound."""
    if item_width <= 0 or item_height <= 0 or grid_bound.is_degenerate:
        return
    for row in range(grid_bound.row, grid_bound.bottom - item_height + 1):
        for col in range(grid_bound.col, grid_bound.right - item_width + 1):
            yield row, col

def find_free_space(grid_bound: Region, item_width: int, item_height: int,
                    occupied: Sequence[Region]) -> Optional[Region]:
    """
    Returns the first free region of the requested footprint, or None if the
    grid has no room for it.
    """
    # Occupants outside the grid can never block a candidate
    blockers = [region for region in occupied if region.intersects(grid_bound)]

    for row, col in scan_anchors(grid_bound, item_width, item_height):
        candidate = Region(row, col, item_width, item_height)
        if not grid_bound.contains(candidate):
            continue
        if any(candidate.intersects(blocker) for blocker in blockers):
            continue
        return candidate
    return None
