"""
Module: sources.base

Purpose:
    Abstract interface for image acquisition and the result type every
    source returns. Sources never touch the collection; the consumer of
    the result appends.

Key Classes:
    - AcquisitionStatus: SUCCESS / CANCELLED / PERMISSION_DENIED / FAILED
    - AcquisitionResult: Images or the reason there are none
    - ImageSource: Abstract acquisition source
    - InMemoryImageSource: Source over already-decoded images

Used By:
    - sources.files: FileImageSource
    - sources.acquisition_queue: AcquisitionQueue
    - photodoc.session: Session.accept
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional

from photodoc.core.models import SourceImage
from photodoc.errors import PermissionDeniedError, UserCancelledError


class AcquisitionStatus(Enum):
    """Outcome of one acquisition."""

    SUCCESS = auto()
    CANCELLED = auto()
    PERMISSION_DENIED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class AcquisitionResult:
    """
    Result of one acquisition (immutable).

    Attributes:
        status: Outcome
        images: Decoded images, in source order (empty unless SUCCESS)
        message: Human-readable explanation for non-success outcomes
        errors: Per-item problems that were skipped during a success

    Example:
        >>> result = AcquisitionResult.success([img])
        >>> result.ok
        True
    """

    status: AcquisitionStatus
    images: tuple[SourceImage, ...] = ()
    message: Optional[str] = None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status is AcquisitionStatus.SUCCESS

    @classmethod
    def success(
        cls,
        images: Iterable[SourceImage],
        errors: Iterable[str] = (),
    ) -> AcquisitionResult:
        return cls(AcquisitionStatus.SUCCESS, tuple(images), errors=tuple(errors))

    @classmethod
    def cancelled(cls, message: str = "Cancelled") -> AcquisitionResult:
        return cls(AcquisitionStatus.CANCELLED, message=message)

    @classmethod
    def permission_denied(cls, message: str) -> AcquisitionResult:
        return cls(AcquisitionStatus.PERMISSION_DENIED, message=message)

    @classmethod
    def failed(cls, message: str) -> AcquisitionResult:
        return cls(AcquisitionStatus.FAILED, message=message)

    def raise_for_status(self) -> None:
        """
        Raise the matching error for non-success outcomes.

        Raises:
            UserCancelledError: For CANCELLED
            PermissionDeniedError: For PERMISSION_DENIED
            RuntimeError: For FAILED
        """
        if self.status is AcquisitionStatus.CANCELLED:
            raise UserCancelledError(self.message or "Cancelled")
        if self.status is AcquisitionStatus.PERMISSION_DENIED:
            raise PermissionDeniedError(self.message or "Permission denied")
        if self.status is AcquisitionStatus.FAILED:
            raise RuntimeError(self.message or "Acquisition failed")


class ImageSource(ABC):
    """
    Abstract image acquisition source.

    Implementations may block (file I/O, decoding); run them through an
    AcquisitionQueue to keep the caller responsive.
    """

    name: str = "source"

    @abstractmethod
    def acquire(self) -> AcquisitionResult:
        """
        Acquire images.

        Returns:
            AcquisitionResult; implementations report failures through the
            result status rather than raising
        """


class InMemoryImageSource(ImageSource):
    """Source that yields images already in memory."""

    name = "memory"

    def __init__(self, images: Iterable[SourceImage]) -> None:
        self._images = tuple(images)

    def acquire(self) -> AcquisitionResult:
        if not self._images:
            return AcquisitionResult.cancelled("No images selected")
        return AcquisitionResult.success(self._images)
