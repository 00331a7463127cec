"""
Module: collection.sort_order

Purpose:
    Enum for the two collection orderings offered to the user.

Key Classes:
    - SortOrder: ASCENDING ("Oldest First") / DESCENDING ("Newest First")

Used By:
    - collection.image_collection: ImageCollection.sort
    - photodoc.session: Session.sort_images
    - photodoc.cli: --sort option
"""

from __future__ import annotations

from enum import Enum


class SortOrder(Enum):
    """
    Ordering applied by ImageCollection.sort.

    Insertion order stands in for capture time, so ASCENDING leaves the
    collection untouched and DESCENDING reverses it.

    Attributes:
        ASCENDING: Oldest first (identity)
        DESCENDING: Newest first (reverse)

    Example:
        >>> SortOrder.parse("newest first")
        <SortOrder.DESCENDING: 'Newest First'>
    """

    ASCENDING = "Oldest First"
    DESCENDING = "Newest First"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> SortOrder:
        """
        Parse a member from its name or label, case-insensitively.

        Raises:
            ValueError: If text matches no member
        """
        wanted = text.strip().casefold()
        for order in cls:
            if wanted in (order.name.casefold(), order.value.casefold()):
                return order
        if wanted in ("asc", "oldest"):
            return cls.ASCENDING
        if wanted in ("desc", "newest"):
            return cls.DESCENDING
        raise ValueError(f"Unknown sort order: {text!r}")
