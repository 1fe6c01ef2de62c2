# dungeon/grid/region.py
from dataclasses import dataclass
from typing import Any, Dict

REGION_FIELDS = ("row", "col", "width", "height")

@dataclass(frozen=True)
class Region:
    """
    A rectangle in grid cells: origin (row, col) plus width and height.

    Cells are half-open, so two regions that only share an edge do not
    intersect. A region with zero width or height is degenerate: it marks an
    unset grid and never intersects anything.
    """
    row: int = 0
    col: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        for name in REGION_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass but never a valid cell count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Region.{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Region.{name} must be non-negative, got {value}")

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def right(self) -> int:
        """First column past the right edge."""
        return self.col + self.width

    @property
    def bottom(self) -> int:
        """First row past the bottom edge."""
        return self.row + self.height

    def intersects(self, other: 'Region') -> bool:
        if self.is_degenerate or other.is_degenerate:
            return False
        return not (
            other.right <= self.col      # entirely left
            or other.col >= self.right   # entirely right
            or other.bottom <= self.row  # entirely above
            or other.row >= self.bottom  # entirely below
        )

    def contains(self, other: 'Region') -> bool:
        """True if `other` lies fully inside this region."""
        if other.is_degenerate or self.is_degenerate:
            return other == self
        return (
            other.col >= self.col
            and other.row >= self.row
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def offset(self, row: int, col: int) -> 'Region':
        """Translates a region relative to a panel into the panel's parent space."""
        return Region(self.row + row, self.col + col, self.width, self.height)

    def to_dict(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Region':
        """Strict: unknown or missing fields raise ValueError."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a region record, got {type(data).__name__}")
        unknown = sorted(set(data) - set(REGION_FIELDS))
        if unknown:
            raise ValueError(f"unknown region field(s): {', '.join(unknown)}")
        missing = [name for name in REGION_FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing region field(s): {', '.join(missing)}")
        return cls(data["row"], data["col"], data["width"], data["height"])

    def __str__(self) -> str:
        return f"({self.row},{self.col}) {self.width}x{self.height}"
