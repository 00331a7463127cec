"""
Module: layout

Purpose:
    Page composition for document export.
    Converts an ordered image list into aspect-fit page placements.

Key Functions:
    - compose(): Main entry point for layout
    - resolve_page_rect(): Page rectangle for a policy
    - fit_image_rect(): Aspect-fit geometry for one image

Key Classes:
    - PageSize: Page size policy
    - Page: One placed image
    - Document: Composed pages

Dependencies:
    - photodoc.core.models: Rect, SourceImage

Used By:
    - photodoc.session
    - photodoc.output.renderer
"""

from .config import PageSize
from .models import Page, SkippedImage, Document
from .composer import compose, resolve_page_rect, fit_image_rect

__all__ = [
    # Config
    "PageSize",
    # Models
    "Page",
    "SkippedImage",
    "Document",
    # Functions
    "compose",
    "resolve_page_rect",
    "fit_image_rect",
]
