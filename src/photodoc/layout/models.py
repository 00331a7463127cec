"""
Module: layout.models

Purpose:
    Data models for composed documents.
    Immutable dataclasses representing pages and the finished document.

Key Classes:
    - Page: One image placed on one page
    - SkippedImage: Input image that could not be placed
    - Document: Ordered pages plus diagnostics

Dependencies:
    - dataclasses (std)
    - photodoc.core.models: Rect, SourceImage

Used By:
    - layout.composer: Creates Pages and Documents
    - photodoc.output.renderer: Draws Documents
"""

from __future__ import annotations

from dataclasses import dataclass, field

from photodoc.core.models import Rect, SourceImage

from .config import PageSize


@dataclass(frozen=True)
class Page:
    """
    A single page holding one aspect-fit image.

    Attributes:
        page_rect: Page bounds, origin at (0, 0)
        drawing_rect: Where the scaled image is drawn (top-left origin)
        image: The placed image
        source_index: Position of the image in the composed input

    Example:
        >>> page.drawing_rect.within(page.page_rect)
        True
    """

    page_rect: Rect
    drawing_rect: Rect
    image: SourceImage
    source_index: int

    @property
    def scale(self) -> float:
        """Factor applied to the image's dimensions."""
        return self.drawing_rect.width / self.image.width


@dataclass(frozen=True)
class SkippedImage:
    """
    An input image left out of the document.

    Attributes:
        index: Position in the composed input
        name: Image label for display
        reason: Why it was skipped
    """

    index: int
    name: str
    reason: str


@dataclass(frozen=True)
class Document:
    """
    Composed document (immutable).

    Attributes:
        pages: Pages in input order
        page_rect: Resolved page rectangle shared by every page
        page_size: Policy the page rectangle was resolved from
        skipped: Images that could not be placed

    Example:
        >>> doc = compose(images, PageSize.A4)
        >>> doc.page_count
        3
    """

    pages: tuple[Page, ...]
    page_rect: Rect
    page_size: PageSize
    skipped: tuple[SkippedImage, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        """Number of pages."""
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not self.pages

    @property
    def is_partial(self) -> bool:
        """True when some input images were skipped."""
        return bool(self.skipped)

    @property
    def warnings(self) -> list[str]:
        """Human-readable messages for skipped images."""
        return [f"Skipped image {s.index + 1} ({s.name}): {s.reason}" for s in self.skipped]
