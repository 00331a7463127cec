"""
Module: layout.config

Purpose:
    Page size policy for document composition.
    Fixed sizes are in PDF points (72 per inch).

Key Classes:
    - PageSize: A4 / LETTER / AUTO

Dependencies:
    - enum (std)

Used By:
    - layout.composer: resolve_page_rect
    - photodoc.session, photodoc.settings, photodoc.cli
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

# A4 at 72 dpi, as used by the original exporter
A4_WIDTH_PT = 595.2
A4_HEIGHT_PT = 841.8

# US Letter at 72 dpi
LETTER_WIDTH_PT = 612.0
LETTER_HEIGHT_PT = 792.0

# Used by AUTO when there is no usable image to measure
AUTO_FALLBACK_WIDTH_PT = A4_WIDTH_PT
AUTO_FALLBACK_HEIGHT_PT = A4_HEIGHT_PT


class PageSize(Enum):
    """
    Page size policy.

    A4 and LETTER carry constant dimensions. AUTO is resolved at
    composition time from the largest image width and height.

    Attributes:
        A4: 595.2 x 841.8 pt
        LETTER: 612 x 792 pt
        AUTO: Largest image width x largest image height

    Example:
        >>> PageSize.A4.dimensions
        (595.2, 841.8)
        >>> PageSize.AUTO.dimensions is None
        True
    """

    A4 = "A4"
    LETTER = "US Letter"
    AUTO = "Auto (Image Size)"

    @property
    def label(self) -> str:
        """Display label."""
        return self.value

    @property
    def dimensions(self) -> Optional[Tuple[float, float]]:
        """(width, height) in points, or None for AUTO."""
        if self is PageSize.A4:
            return (A4_WIDTH_PT, A4_HEIGHT_PT)
        if self is PageSize.LETTER:
            return (LETTER_WIDTH_PT, LETTER_HEIGHT_PT)
        return None

    @property
    def is_fixed(self) -> bool:
        return self.dimensions is not None

    @classmethod
    def parse(cls, text: str) -> PageSize:
        """
        Parse a member from its name or display label, case-insensitively.

        Raises:
            ValueError: If text matches no member
        """
        wanted = text.strip().casefold()
        for size in cls:
            if wanted in (size.name.casefold(), size.value.casefold()):
                return size
        raise ValueError(
            f"Unknown page size: {text!r} "
            f"(expected one of {', '.join(s.name.lower() for s in cls)})"
        )
