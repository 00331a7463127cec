"""
Module: layout.composer

Purpose:
    Turn an ordered sequence of images into document pages, one page per
    image, each image aspect-fit and centered within a shared page
    rectangle.

Key Functions:
    - resolve_page_rect(): Page rectangle for a policy and image list
    - fit_image_rect(): Aspect-fit placement of one image in a page
    - compose(): Main entry point

Algorithm:
    1. Resolve one page rectangle for the whole document
    2. For each image, compare image and page aspect ratios
       - wider than the page: fill the width, center vertically
       - otherwise: fill the height, center horizontally
    3. Collect pages in input order; degenerate images are skipped
       and recorded on the document

Dependencies:
    - layout.config: PageSize
    - layout.models: Page, Document, SkippedImage

Used By:
    - photodoc.session: Session.compose
    - photodoc.cli: build command
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from photodoc.core.models import Rect, SourceImage
from photodoc.errors import DegenerateImageError

from .config import AUTO_FALLBACK_HEIGHT_PT, AUTO_FALLBACK_WIDTH_PT, PageSize
from .models import Document, Page, SkippedImage

logger = logging.getLogger(__name__)


def resolve_page_rect(images: Sequence[SourceImage], page_size: PageSize) -> Rect:
    """
    Resolve the page rectangle for a document.

    AUTO uses the largest width and the largest height across the usable
    images (not necessarily from the same image). Degenerate images are
    ignored; with none left the A4 dimensions are used.

    Args:
        images: Images to be composed
        page_size: Page size policy

    Returns:
        Rect at the origin

    Example:
        >>> resolve_page_rect([img(300, 600), img(900, 200)], PageSize.AUTO)
        Rect(0, 0, 900, 600)
    """
    dimensions = page_size.dimensions
    if dimensions is not None:
        return Rect.of_size(*dimensions)

    usable = [image for image in images if not image.is_degenerate]
    width = max((image.width for image in usable), default=AUTO_FALLBACK_WIDTH_PT)
    height = max((image.height for image in usable), default=AUTO_FALLBACK_HEIGHT_PT)
    return Rect.of_size(width, height)


def fit_image_rect(image_width: float, image_height: float, page_rect: Rect) -> Rect:
    """
    Aspect-fit an image inside a page rectangle.

    The result is fully contained in the page, touches one pair of opposite
    page edges and keeps the image's aspect ratio. Nothing is cropped.

    Args:
        image_width: Source width
        image_height: Source height
        page_rect: Target page

    Returns:
        Drawing rectangle in page coordinates (top-left origin)

    Raises:
        DegenerateImageError: If either dimension is not finite and positive

    Example:
        >>> fit_image_rect(1000, 500, Rect.of_size(595.2, 841.8))
        Rect(0, 272.1, 595.2, 297.6)
    """
    if not _is_positive(image_width) or not _is_positive(image_height):
        raise DegenerateImageError(image_width, image_height)

    image_aspect = image_width / image_height
    page_aspect = page_rect.width / page_rect.height

    if image_aspect > page_aspect:
        # Wider than the page: full width, centered vertically
        height = page_rect.width / image_aspect
        return Rect(
            x=page_rect.x,
            y=page_rect.y + (page_rect.height - height) / 2,
            width=page_rect.width,
            height=height,
        )

    # Taller than (or same shape as) the page: full height, centered horizontally
    width = page_rect.height * image_aspect
    return Rect(
        x=page_rect.x + (page_rect.width - width) / 2,
        y=page_rect.y,
        width=width,
        height=page_rect.height,
    )


def compose(images: Sequence[SourceImage], page_size: PageSize) -> Document:
    """
    Compose images into a document.

    Produces exactly one page per usable image, in input order. The input
    is only read. Images with degenerate geometry are skipped, logged and
    listed in ``Document.skipped``; the remaining images still get pages.

    Args:
        images: Images in page order (typically ImageCollection.snapshot())
        page_size: Page size policy

    Returns:
        Document (zero pages for empty input)

    Example:
        >>> doc = compose(collection.snapshot(), PageSize.A4)
        >>> [p.source_index for p in doc.pages]
        [0, 1, 2]
    """
    images = tuple(images)
    page_rect = resolve_page_rect(images, page_size)

    pages: List[Page] = []
    skipped: List[SkippedImage] = []

    for index, image in enumerate(images):
        try:
            drawing_rect = fit_image_rect(image.width, image.height, page_rect)
        except DegenerateImageError as e:
            logger.warning(f"Skipping image {index} ({image.label}): {e.reason}")
            skipped.append(SkippedImage(index=index, name=image.label, reason=e.reason))
            continue

        pages.append(Page(
            page_rect=page_rect,
            drawing_rect=drawing_rect,
            image=image,
            source_index=index,
        ))

    logger.info(
        f"Composed {len(pages)} page(s) at {page_rect.width:g}x{page_rect.height:g}pt "
        f"({page_size.label})"
    )

    return Document(
        pages=tuple(pages),
        page_rect=page_rect,
        page_size=page_size,
        skipped=tuple(skipped),
    )


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0
