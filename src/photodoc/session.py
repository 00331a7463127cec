"""
Module: session

Purpose:
    Caller-facing facade for one image-to-PDF session. Owns the image
    collection and the selected page size, composes and exports documents,
    and reports problems as alerts instead of raising.

Key Classes:
    - Session: Collection commands, composition, export, acquisition
    - SessionEvent: Kinds of change notifications
    - Alert: User-facing message

Dependencies:
    - photodoc.collection: ImageCollection, SortOrder
    - photodoc.layout: compose, PageSize, Document
    - photodoc.output: export_document, ExportSink, ExportResult
    - photodoc.sources: AcquisitionQueue, AcquisitionResult

Used By:
    - photodoc.cli: build command
    - UI layers embedding photodoc
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Iterable, List, Optional

from photodoc.collection import ImageCollection, SortOrder
from photodoc.config import ExportConfig
from photodoc.core.models import SourceImage
from photodoc.errors import IndexOutOfRangeError
from photodoc.layout import Document, PageSize, compose
from photodoc.output import ExportResult, ExportSink, export_document
from photodoc.sources import (
    AcquisitionQueue,
    AcquisitionResult,
    AcquisitionStatus,
    ImageSource,
)

logger = logging.getLogger(__name__)

ACCESS_DENIED_TITLE = "Access Denied"
ACCESS_DENIED_MESSAGE = "Please enable access in Settings to add images."


class SessionEvent(Enum):
    """Change notifications delivered to listeners."""

    IMAGES_CHANGED = auto()
    PAGE_SIZE_CHANGED = auto()
    ALERT = auto()


@dataclass(frozen=True)
class Alert:
    """A message for the user."""

    title: str
    message: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


Listener = Callable[[SessionEvent, Any], None]


class Session:
    """
    One image-to-PDF session.

    Listeners registered with subscribe() are called synchronously with
    (event, payload): the collection snapshot for IMAGES_CHANGED, the new
    PageSize for PAGE_SIZE_CHANGED and the Alert for ALERT.

    Example:
        >>> session = Session()
        >>> session.add_images(images)
        >>> session.page_size = PageSize.AUTO
        >>> result = session.export(FileExportSink(Path("Images.pdf")))
    """

    def __init__(self, config: Optional[ExportConfig] = None) -> None:
        self.config = config or ExportConfig()
        self._images = ImageCollection(on_change=self._images_changed)
        self._page_size = self.config.page_size
        self._listeners: List[Listener] = []
        self._alerts: List[Alert] = []
        self._queue: Optional[AcquisitionQueue] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Observers
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: SessionEvent, payload: Any) -> None:
        for listener in list(self._listeners):
            listener(event, payload)

    def _images_changed(self, collection: ImageCollection) -> None:
        self._notify(SessionEvent.IMAGES_CHANGED, collection.snapshot())

    # ─────────────────────────────────────────────────────────────────────────
    # Alerts
    # ─────────────────────────────────────────────────────────────────────────

    def show_alert(self, title: str, message: str) -> Alert:
        alert = Alert(title=title, message=message)
        self._alerts.append(alert)
        self._notify(SessionEvent.ALERT, alert)
        return alert

    @property
    def alerts(self) -> tuple[Alert, ...]:
        return tuple(self._alerts)

    def pop_alerts(self) -> list[Alert]:
        """Return and forget pending alerts."""
        alerts, self._alerts = self._alerts, []
        return alerts

    # ─────────────────────────────────────────────────────────────────────────
    # Collection commands
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def images(self) -> tuple[SourceImage, ...]:
        return self._images.snapshot()

    @property
    def image_count(self) -> int:
        return len(self._images)

    def add_image(self, image: SourceImage) -> None:
        self._images.add(image)

    def add_images(self, images: Iterable[SourceImage]) -> int:
        return self._images.extend(images)

    def remove_image(self, at: int) -> bool:
        """
        Remove the image at ``at``.

        Returns:
            True on success; False (with an alert) when out of range
        """
        try:
            self._images.remove_at(at)
        except IndexOutOfRangeError as e:
            logger.warning(str(e))
            self.show_alert("Error", str(e))
            return False
        return True

    def move_to_front(self, at: int) -> bool:
        """Move the image at ``at`` to the front; out of range is reported."""
        if self._images.move_to_front(at):
            return True
        self.show_alert(
            "Error",
            f"Index {at} out of range for collection of {len(self._images)} image(s)",
        )
        return False

    def sort_images(self, order: SortOrder) -> None:
        self._images.sort(order)

    def clear(self) -> None:
        self._images.clear()

    # ─────────────────────────────────────────────────────────────────────────
    # Page size, composition and export
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def page_size(self) -> PageSize:
        return self._page_size

    @page_size.setter
    def page_size(self, value: PageSize) -> None:
        if not isinstance(value, PageSize):
            raise TypeError(f"page_size must be a PageSize, got {type(value).__name__}")
        if value is self._page_size:
            return
        self._page_size = value
        self._notify(SessionEvent.PAGE_SIZE_CHANGED, value)

    def compose(self, page_size: Optional[PageSize] = None) -> Document:
        """
        Compose the current images into a document.

        Reads a snapshot of the collection; calling it twice without
        changes yields equal documents.
        """
        return compose(self._images.snapshot(), page_size or self._page_size)

    def export(self, sink: ExportSink, page_size: Optional[PageSize] = None) -> ExportResult:
        """
        Compose and export, reporting the outcome as an alert.

        Skipped degenerate images are reported in the success message.
        Never raises for export failures.
        """
        document = self.compose(page_size)
        result = export_document(document, sink, title=self.config.title)

        if not result.success:
            self.show_alert("Error", result.message)
            return result

        message = result.message
        if document.is_partial:
            message = f"{message} ({len(document.skipped)} image(s) skipped)"
            for warning in document.warnings:
                logger.warning(warning)
        self.show_alert("Success", message)
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Acquisition
    # ─────────────────────────────────────────────────────────────────────────

    def accept(self, result: AcquisitionResult) -> int:
        """
        Consume an acquisition result.

        SUCCESS appends its images in order; PERMISSION_DENIED and FAILED
        raise alerts; CANCELLED is ignored.

        Returns:
            Number of images appended
        """
        if result.status is AcquisitionStatus.CANCELLED:
            logger.debug("Acquisition cancelled")
            return 0
        if result.status is AcquisitionStatus.PERMISSION_DENIED:
            self.show_alert(ACCESS_DENIED_TITLE, result.message or ACCESS_DENIED_MESSAGE)
            return 0
        if result.status is AcquisitionStatus.FAILED:
            self.show_alert("Error", result.message or "Could not load images")
            return 0

        for error in result.errors:
            logger.warning(f"Skipped while loading: {error}")
        if result.errors and not result.images:
            self.show_alert("Error", "None of the selected files could be loaded")
        return self._images.extend(result.images)

    def acquire(self, source: ImageSource) -> int:
        """Run a source on the calling thread and consume its result."""
        return self.accept(source.acquire())

    def acquire_async(self, source: ImageSource) -> None:
        """Run a source in the background; results arrive on poll()."""
        if self._queue is None:
            self._queue = AcquisitionQueue(self.accept)
        self._queue.submit(source)

    def poll(self, wait: bool = False) -> int:
        """
        Deliver finished background acquisitions on this thread.

        Args:
            wait: Block until every submitted acquisition is delivered

        Returns:
            Number of results delivered
        """
        if self._queue is None:
            return 0
        return self._queue.wait_all() if wait else self._queue.drain()

    def close(self) -> None:
        """Finish background work and drop all images."""
        if self._queue is not None:
            self._queue.shutdown()
            self._queue = None
        self._images.clear()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *args) -> None:
        self.close()
