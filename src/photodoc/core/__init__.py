"""Core data models for photodoc."""

from .models import Rect, SourceImage

__all__ = ["Rect", "SourceImage"]
