"""
Module: errors

Purpose:
    Exception hierarchy shared by the collection, composer, sources and
    output layers. The core raises these; the session converts them into
    user-facing alerts so that nothing is fatal to the process.

Key Classes:
    - PhotodocError: Base class for all package errors
    - IndexOutOfRangeError: Collection index outside [0, len)
    - PermissionDeniedError: Image source refused access
    - UserCancelledError: Image source cancelled by the user
    - DegenerateImageError: Image geometry cannot be aspect-fit
    - ExportError: Rendering or persisting a document failed
    - SettingsError: Settings file could not be read or written

Used By:
    - photodoc.collection, photodoc.layout, photodoc.sources
    - photodoc.output, photodoc.session, photodoc.settings
"""

from __future__ import annotations

from typing import Optional


class PhotodocError(Exception):
    """Base error for photodoc."""
    pass


class IndexOutOfRangeError(PhotodocError, IndexError):
    """Index not in [0, length) for a collection operation."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for collection of {length} image(s)")
        self.index = index
        self.length = length


class PermissionDeniedError(PhotodocError):
    """Image source could not be accessed."""
    pass


class UserCancelledError(PhotodocError):
    """Image acquisition was cancelled."""
    pass


class DegenerateImageError(PhotodocError):
    """
    Image dimensions cannot produce a valid aspect-fit placement.

    Raised for zero, negative or non-finite width/height.

    Attributes:
        width: Offending width
        height: Offending height
        index: Position in the input sequence, when known
    """

    def __init__(
        self,
        width: float,
        height: float,
        index: Optional[int] = None,
    ) -> None:
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Degenerate image{where}: {width!r}x{height!r}")
        self.width = width
        self.height = height
        self.index = index

    @property
    def reason(self) -> str:
        """Short human-readable reason."""
        return f"cannot fit {self.width!r}x{self.height!r} image"


class ExportError(PhotodocError):
    """Document could not be rendered or written."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


class SettingsError(PhotodocError):
    """Settings could not be loaded or saved."""
    pass
