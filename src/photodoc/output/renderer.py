"""
Module: output.renderer

Purpose:
    Render a composed Document to PDF using ReportLab.
    Each Page becomes one PDF page with its image drawn at the page's
    drawing rectangle.

Key Functions:
    - render_to_bytes(): Render to an in-memory PDF
    - render_to_pdf(): Render to a file

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - layout.models: Document, Page

Used By:
    - output.sinks: export_document
    - photodoc.cli: build command
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from photodoc.errors import ExportError
from photodoc.layout.models import Document, Page

logger = logging.getLogger(__name__)

# Modes Pillow can write as PNG without conversion
_PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA"}


def render_to_bytes(document: Document, *, title: str = "Images") -> bytes:
    """
    Render document to PDF bytes.

    Every page uses the document's resolved page rectangle. Pages whose
    image carries no pixel data are emitted blank at the correct size.

    Args:
        document: Composed document
        title: PDF title metadata

    Returns:
        PDF file contents

    Raises:
        ExportError: If an image cannot be encoded or drawn, or ReportLab
            fails to write the document

    Example:
        >>> data = render_to_bytes(compose(images, PageSize.A4))
        >>> data[:5]
        b'%PDF-'
    """
    if document.is_empty:
        logger.warning("Empty document, creating empty PDF")

    page_size = (document.page_rect.width, document.page_rect.height)
    buf = io.BytesIO()

    c = canvas.Canvas(buf, pagesize=page_size)
    c.setTitle(title)
    c.setCreator("photodoc")

    for page in document.pages:
        try:
            _render_page(c, page)
        except Exception as e:
            raise ExportError(
                f"Could not draw page {page.source_index + 1} ({page.image.label}): {e}"
            ) from e
        c.showPage()

    try:
        c.save()
    except Exception as e:
        raise ExportError(f"Could not write PDF: {e}") from e

    logger.info(f"Rendered {document.page_count} page(s)")
    return buf.getvalue()


def render_to_pdf(document: Document, output_path: Path, **kwargs) -> Path:
    """
    Render document to a PDF file, creating parent directories.

    Returns:
        The written path

    Raises:
        ExportError: If rendering fails or the file cannot be written
    """
    data = render_to_bytes(document, **kwargs)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise ExportError(f"Could not write {output_path}: {e}") from e

    logger.info(f"Wrote {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, page: Page) -> None:
    """Draw one page's image at its drawing rectangle."""
    if page.image.image is None:
        logger.debug(f"Page {page.source_index + 1} has no pixel data, leaving blank")
        return

    rect = page.drawing_rect
    y_pt = _transform_y(page.page_rect.height, rect.y, rect.height)

    c.drawImage(
        _pil_to_reader(page.image.image),
        rect.x,
        y_pt,
        width=rect.width,
        height=rect.height,
        mask="auto",
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    if img.mode not in _PNG_MODES:
        img = img.convert("RGB")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_pt: float, y_top_pt: float, height_pt: float) -> float:
    """
    Convert a top-down Y coordinate to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        y_top_pt: Distance of the element's top edge from the page top
        height_pt: Element height

    Returns:
        Distance of the element's bottom edge from the page bottom
    """
    return page_height_pt - y_top_pt - height_pt
