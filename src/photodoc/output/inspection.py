"""
Module: output.inspection

Purpose:
    Read back produced PDFs with PyMuPDF to report page count and sizes.

Key Functions:
    - describe_pdf(): Summarise a PDF from bytes or a path

Dependencies:
    - fitz (PyMuPDF): PDF parsing

Used By:
    - photodoc.cli: info command
    - tests: Rendered output checks
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import fitz


@dataclass(frozen=True)
class PdfSummary:
    """
    Page count and page sizes of a PDF.

    Attributes:
        page_sizes: (width, height) in points for each page
        image_counts: Number of embedded images on each page
    """

    page_sizes: tuple[tuple[float, float], ...]
    image_counts: tuple[int, ...]

    @property
    def page_count(self) -> int:
        return len(self.page_sizes)


def describe_pdf(source: Union[bytes, Path]) -> PdfSummary:
    """
    Summarise a PDF document.

    Args:
        source: PDF bytes or path to a PDF file

    Returns:
        PdfSummary
    """
    if isinstance(source, (bytes, bytearray)):
        doc = fitz.open(stream=bytes(source), filetype="pdf")
    else:
        doc = fitz.open(str(source))

    try:
        sizes = []
        images = []
        for page in doc:
            sizes.append((page.rect.width, page.rect.height))
            images.append(len(page.get_images(full=True)))
    finally:
        doc.close()

    return PdfSummary(page_sizes=tuple(sizes), image_counts=tuple(images))
