"""
Module: output.sinks

Purpose:
    Export sinks accept a finished document and persist it. Export never
    raises to the caller: the outcome comes back as an ExportResult with
    either a location or the underlying cause string.

Key Functions:
    - export_document(): Render and hand off to a sink

Key Classes:
    - ExportSink: Abstract destination
    - FileExportSink: Write to a .pdf file
    - MemoryExportSink: Keep the bytes in memory
    - ExportResult: Success flag, message and location

Dependencies:
    - output.renderer: render_to_bytes

Used By:
    - photodoc.session: Session.export
    - photodoc.cli: build command
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from photodoc.errors import ExportError
from photodoc.layout.models import Document

from .renderer import render_to_bytes

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "Images.pdf"


@dataclass(frozen=True)
class ExportResult:
    """
    Outcome of an export.

    Attributes:
        success: Whether the document was persisted
        message: Confirmation or the failure cause
        location: Where the document went (file path or sink description)
        page_count: Pages written
    """

    success: bool
    message: str
    location: Optional[str] = None
    page_count: int = 0


class ExportSink(ABC):
    """Destination for rendered PDF bytes."""

    @abstractmethod
    def write(self, data: bytes) -> str:
        """
        Persist rendered bytes.

        Returns:
            Description of where the data went

        Raises:
            ExportError: If the data cannot be persisted
        """


class FileExportSink(ExportSink):
    """
    Write the PDF to a file.

    A ``.pdf`` suffix is appended when missing. The file is written to a
    temporary sibling first and moved into place, so a failed export never
    leaves a truncated document behind.
    """

    def __init__(self, path: Path) -> None:
        path = Path(path)
        if path.suffix.lower() != ".pdf":
            path = path.with_name(path.name + ".pdf")
        self.path = path

    def write(self, data: bytes) -> str:
        temp_path: Optional[Path] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                suffix=".pdf",
                dir=self.path.parent,
                delete=False,
            ) as f:
                temp_path = Path(f.name)
                f.write(data)
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise ExportError(f"Could not write {self.path}: {e}") from e
        return str(self.path)


class MemoryExportSink(ExportSink):
    """Keep the PDF bytes in memory (for sharing or tests)."""

    def __init__(self) -> None:
        self.data: Optional[bytes] = None

    def write(self, data: bytes) -> str:
        self.data = data
        return "memory"


def export_document(
    document: Document,
    sink: ExportSink,
    *,
    title: str = "Images",
) -> ExportResult:
    """
    Render a document and hand it to a sink.

    Args:
        document: Composed document
        sink: Destination
        title: PDF title metadata

    Returns:
        ExportResult; failures carry the underlying cause in ``message``

    Example:
        >>> result = export_document(doc, FileExportSink(Path("out/Images.pdf")))
        >>> result.success
        True
    """
    try:
        data = render_to_bytes(document, title=title)
        location = sink.write(data)
    except ExportError as e:
        logger.error(f"Export failed: {e.cause}")
        return ExportResult(success=False, message=e.cause)

    logger.info(f"Exported {document.page_count} page(s) to {location}")
    return ExportResult(
        success=True,
        message="PDF saved successfully",
        location=location,
        page_count=document.page_count,
    )
