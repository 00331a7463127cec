"""
Module: collection

Purpose:
    The ordered image list that feeds page composition, plus the sort
    order enum used to rearrange it.

Key Classes:
    - ImageCollection: Ordered, thread-safe image list
    - SortOrder: ASCENDING / DESCENDING

Used By:
    - photodoc.session
    - photodoc.cli
"""

from .image_collection import ImageCollection
from .sort_order import SortOrder

__all__ = [
    "ImageCollection",
    "SortOrder",
]
