"""
Core Models Package

Immutable data models shared by the collection, composer and renderer.

All models are frozen dataclasses, so a Document built from a snapshot of
the collection can be handed to a renderer on another thread without the
collection changing underneath it.
"""

from .geometry import Rect
from .images import SourceImage

__all__ = [
    "Rect",
    "SourceImage",
]
