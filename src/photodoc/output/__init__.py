"""
Module: output

Purpose:
    PDF rendering and export for composed documents.
    Converts a Document to PDF bytes using ReportLab and hands them to
    an export sink.

Key Functions:
    - render_to_bytes(), render_to_pdf(): Render a document
    - export_document(): Render and persist, reporting the outcome
    - describe_pdf(): Inspect a produced PDF

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - fitz (PyMuPDF): PDF inspection

Used By:
    - photodoc.session
    - photodoc.cli
"""

from .renderer import render_to_bytes, render_to_pdf
from .sinks import (
    DEFAULT_FILENAME,
    ExportResult,
    ExportSink,
    FileExportSink,
    MemoryExportSink,
    export_document,
)
from .inspection import PdfSummary, describe_pdf

__all__ = [
    "render_to_bytes",
    "render_to_pdf",
    "DEFAULT_FILENAME",
    "ExportResult",
    "ExportSink",
    "FileExportSink",
    "MemoryExportSink",
    "export_document",
    "PdfSummary",
    "describe_pdf",
]
