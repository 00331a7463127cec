"""
Module: images

Purpose:
    Provides the SourceImage dataclass - a decoded raster image with known
    dimensions, as held by the image collection and read by the composer.

Key Functions:
    - SourceImage.from_pil(image): Wrap an already decoded Pillow image
    - SourceImage.from_path(path): Decode a file, honouring EXIF orientation
    - SourceImage.is_degenerate: Whether the geometry can be aspect-fit

Dependencies:
    - PIL.Image, PIL.ImageOps: Decoding and orientation
    - dataclasses (std)

Used By:
    - photodoc.collection.image_collection
    - photodoc.layout.composer
    - photodoc.sources
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps


@dataclass(frozen=True, eq=False)
class SourceImage:
    """
    Decoded image with known dimensions (immutable).

    Equality is identity: two SourceImages wrapping identical pixels are
    still two distinct entries in a collection.

    Attributes:
        width: Width in pixels (treated as points when composing)
        height: Height in pixels
        image: Pillow image, or None for geometry-only entries
        name: Display name, usually the file name

    Example:
        >>> img = SourceImage.from_pil(Image.new("RGB", (1000, 500)))
        >>> img.aspect_ratio
        2.0
    """

    width: float
    height: float
    image: Optional[Image.Image] = field(default=None, repr=False)
    name: Optional[str] = None

    @classmethod
    def from_pil(cls, image: Image.Image, name: Optional[str] = None) -> SourceImage:
        """Wrap a decoded Pillow image."""
        return cls(width=image.width, height=image.height, image=image, name=name)

    @classmethod
    def from_path(cls, path: Path) -> SourceImage:
        """
        Decode an image file.

        The file handle is closed before returning; the pixels are copied
        into memory with EXIF orientation applied.

        Args:
            path: Image file readable by Pillow

        Returns:
            SourceImage named after the file

        Raises:
            PermissionError: If the file cannot be opened for reading
            PIL.UnidentifiedImageError: If the file is not a decodable image
        """
        path = Path(path)
        with Image.open(path) as opened:
            decoded = ImageOps.exif_transpose(opened)
        return cls.from_pil(decoded, name=path.name)

    @property
    def size(self) -> tuple[float, float]:
        """(width, height) tuple."""
        return (self.width, self.height)

    @property
    def is_degenerate(self) -> bool:
        """True when width or height is not a finite positive number."""
        return not (
            math.isfinite(self.width)
            and math.isfinite(self.height)
            and self.width > 0
            and self.height > 0
        )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def label(self) -> str:
        """Name for log messages."""
        return self.name or f"{self.width:g}x{self.height:g} image"
