"""
Module: geometry

Purpose:
    Provides the Rect dataclass used for page and drawing rectangles.
    Coordinates use a top-left origin with y growing downwards, matching
    how placements are computed. Renderers convert to PDF bottom-up
    coordinates at draw time.

Key Functions:
    - Rect.contains_rect(other): Containment check with tolerance
    - Rect.aspect_ratio: width / height
    - Rect.to_dict() / Rect.from_dict(): JSON helpers

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - photodoc.layout.composer
    - photodoc.layout.models
    - photodoc.output.renderer
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Absolute tolerance for float comparisons in points
EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle in points.

    Attributes:
        x: Left edge
        y: Top edge (distance from the top of the page)
        width: Horizontal extent (>= 0)
        height: Vertical extent (>= 0)

    Invariants:
        - width >= 0 and height >= 0
        - all values finite

    Example:
        >>> page = Rect(0, 0, 595.2, 841.8)
        >>> Rect(87.15, 0, 420.9, 841.8).within(page)
        True
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite: {value!r}")
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def size(self) -> tuple[float, float]:
        """(width, height) tuple."""
        return (self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        """
        Width divided by height.

        Raises:
            ZeroDivisionError: If height is 0
        """
        return self.width / self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def within(self, other: Rect, tolerance: float = EPSILON) -> bool:
        """Check if this rectangle lies inside ``other``."""
        return other.contains_rect(self, tolerance)

    def contains_rect(self, other: Rect, tolerance: float = EPSILON) -> bool:
        """
        Check if ``other`` lies entirely inside this rectangle.

        Args:
            other: Rectangle to test
            tolerance: Slack allowed on each edge for float rounding

        Returns:
            True if every edge of ``other`` is inside this rectangle
        """
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Get as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        """Deserialize from dictionary."""
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            width=data["width"],
            height=data["height"],
        )

    @classmethod
    def of_size(cls, width: float, height: float) -> Rect:
        """Rectangle at the origin with the given size."""
        return cls(0.0, 0.0, width, height)

    def __repr__(self) -> str:
        return f"Rect({self.x:g}, {self.y:g}, {self.width:g}, {self.height:g})"
