"""
Module: sources.files

Purpose:
    Image source that decodes files from disk with Pillow.

Key Classes:
    - FileImageSource: Decode a list of image paths

Behaviour:
    - No paths: CANCELLED (nothing was picked)
    - Any PermissionError: PERMISSION_DENIED, nothing is kept
    - Undecodable or missing files: skipped and listed in result.errors
    - More than selection_limit paths: the extra paths are ignored

Dependencies:
    - PIL: Image decoding
    - sources.base: AcquisitionResult, ImageSource

Used By:
    - photodoc.cli: build command
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import UnidentifiedImageError

from photodoc.core.models import SourceImage

from .base import AcquisitionResult, ImageSource

logger = logging.getLogger(__name__)

# Matches the selection limit of the original photo picker
DEFAULT_SELECTION_LIMIT = 20


class FileImageSource(ImageSource):
    """
    Decode images from file paths, preserving path order.

    Attributes:
        paths: Files to decode
        selection_limit: Maximum number of files taken (None = unlimited)

    Example:
        >>> result = FileImageSource([Path("a.png"), Path("b.jpg")]).acquire()
        >>> len(result.images)
        2
    """

    name = "files"

    def __init__(
        self,
        paths: Iterable[Path],
        selection_limit: Optional[int] = DEFAULT_SELECTION_LIMIT,
    ) -> None:
        if selection_limit is not None and selection_limit <= 0:
            raise ValueError(f"selection_limit must be positive: {selection_limit}")
        self.paths = [Path(p) for p in paths]
        self.selection_limit = selection_limit

    def acquire(self) -> AcquisitionResult:
        if not self.paths:
            return AcquisitionResult.cancelled("No files selected")

        paths = self.paths
        if self.selection_limit is not None and len(paths) > self.selection_limit:
            logger.warning(
                f"Selected {len(paths)} files, only the first {self.selection_limit} are used"
            )
            paths = paths[: self.selection_limit]

        images: List[SourceImage] = []
        errors: List[str] = []

        for path in paths:
            try:
                images.append(SourceImage.from_path(path))
            except PermissionError as e:
                logger.warning(f"Permission denied reading {path}: {e}")
                return AcquisitionResult.permission_denied(
                    f"Permission denied reading {path.name}"
                )
            except (FileNotFoundError, IsADirectoryError, UnidentifiedImageError, OSError) as e:
                logger.warning(f"Skipping {path}: {e}")
                errors.append(f"{path.name}: {e}")

        logger.info(f"Loaded {len(images)} of {len(paths)} file(s)")
        return AcquisitionResult.success(images, errors=errors)
