"""
Module: config

Purpose:
    Configuration dataclass for sessions and exports. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Page size, file name and acquisition limits

Dependencies:
    - dataclasses (std)

Used By:
    - photodoc.session: Session defaults
    - photodoc.settings: SettingsStore.to_config
    - photodoc.cli: build command
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from photodoc.layout.config import PageSize
from photodoc.output.sinks import DEFAULT_FILENAME
from photodoc.sources.files import DEFAULT_SELECTION_LIMIT


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for a session's exports (immutable).

    Attributes:
        page_size: Page size policy selected when a session starts
        default_filename: File name offered for exported documents
        selection_limit: Maximum files taken per acquisition (None = no limit)
        title: PDF title metadata

    Example:
        >>> config = ExportConfig(page_size=PageSize.LETTER)
        >>> config.default_filename
        'Images.pdf'
    """

    page_size: PageSize = PageSize.A4
    default_filename: str = DEFAULT_FILENAME
    selection_limit: Optional[int] = DEFAULT_SELECTION_LIMIT
    title: str = "Images"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.page_size, PageSize):
            raise ValueError(f"page_size must be a PageSize: {self.page_size!r}")
        if not self.default_filename.lower().endswith(".pdf"):
            raise ValueError(f"default_filename must end in .pdf: {self.default_filename!r}")
        if "/" in self.default_filename or "\\" in self.default_filename:
            raise ValueError(f"default_filename must be a bare file name: {self.default_filename!r}")
        if self.selection_limit is not None and self.selection_limit <= 0:
            raise ValueError(f"selection_limit must be positive: {self.selection_limit}")
