"""
Module: collection.image_collection

Purpose:
    Ordered, mutable sequence of SourceImages that feeds the page composer.
    Order is significant and user visible; no deduplication is performed.

Key Classes:
    - ImageCollection: Thread-safe ordered image list

Behaviour:
    - add/extend append at the end
    - remove_at raises IndexOutOfRangeError outside [0, len)
    - move_to_front is a reported no-op outside [0, len)
    - sort(ASCENDING) is identity, sort(DESCENDING) reverses
    - clear empties unconditionally

Dependencies:
    - threading (std): One writer at a time
    - photodoc.core.models: SourceImage

Used By:
    - photodoc.session: Session owns one collection
    - photodoc.cli: Builds a collection from file arguments
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Iterator, List, Optional

from photodoc.core.models import SourceImage
from photodoc.errors import IndexOutOfRangeError

from .sort_order import SortOrder

logger = logging.getLogger(__name__)


class ImageCollection:
    """
    Ordered collection of images.

    Indices are always contiguous 0..N-1. Every mutator runs under a single
    lock, so appends from several acquisition threads never interleave or
    drop elements.

    Args:
        images: Optional initial images, in order
        on_change: Called with the collection after each successful mutation

    Example:
        >>> images = ImageCollection()
        >>> images.add(a); images.add(b); images.add(c)
        >>> images.move_to_front(2)
        True
        >>> images.snapshot() == (c, a, b)
        True
    """

    def __init__(
        self,
        images: Optional[Iterable[SourceImage]] = None,
        on_change: Optional[Callable[["ImageCollection"], None]] = None,
    ) -> None:
        self._images: List[SourceImage] = list(images) if images else []
        self._lock = threading.RLock()
        self._on_change = on_change

    # ─────────────────────────────────────────────────────────────────────────
    # Mutators
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, image: SourceImage) -> None:
        """Append an image to the end."""
        with self._lock:
            self._images.append(image)
            logger.debug(f"Added {image.label} at index {len(self._images) - 1}")
        self._changed()

    def extend(self, images: Iterable[SourceImage]) -> int:
        """
        Append several images as one operation.

        Returns:
            Number of images appended
        """
        batch = list(images)
        if not batch:
            return 0
        with self._lock:
            self._images.extend(batch)
        logger.debug(f"Added {len(batch)} image(s)")
        self._changed()
        return len(batch)

    def remove_at(self, index: int) -> SourceImage:
        """
        Remove the image at ``index``; later images shift down by one.

        Raises:
            IndexOutOfRangeError: If index is not in [0, len)
        """
        with self._lock:
            self._check_index(index)
            image = self._images.pop(index)
        logger.debug(f"Removed {image.label} from index {index}")
        self._changed()
        return image

    def move_to_front(self, index: int) -> bool:
        """
        Move the image at ``index`` to position 0.

        Relative order of every other image is preserved. Out-of-range
        indices are logged and ignored.

        Returns:
            True if index was valid, False if it was out of range
        """
        with self._lock:
            if not 0 <= index < len(self._images):
                logger.warning(
                    f"move_to_front ignored: index {index} out of range "
                    f"for {len(self._images)} image(s)"
                )
                return False
            image = self._images.pop(index)
            self._images.insert(0, image)
        self._changed()
        return True

    def sort(self, order: SortOrder) -> None:
        """
        Reorder the collection.

        Insertion order is taken as chronological: ASCENDING keeps it,
        DESCENDING reverses it in place.
        """
        if order is SortOrder.DESCENDING:
            with self._lock:
                self._images.reverse()
            self._changed()
        elif order is not SortOrder.ASCENDING:
            raise ValueError(f"Unsupported sort order: {order!r}")

    def clear(self) -> None:
        """Remove all images."""
        with self._lock:
            count = len(self._images)
            self._images.clear()
        logger.debug(f"Cleared {count} image(s)")
        self._changed()

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[SourceImage, ...]:
        """Immutable view of the current order, for composition."""
        with self._lock:
            return tuple(self._images)

    def index_of(self, image: SourceImage) -> int:
        """Position of ``image`` (by identity)."""
        with self._lock:
            for i, candidate in enumerate(self._images):
                if candidate is image:
                    return i
        raise ValueError(f"{image.label} is not in the collection")

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)

    def __getitem__(self, index: int) -> SourceImage:
        with self._lock:
            self._check_index(index)
            return self._images[index]

    def __iter__(self) -> Iterator[SourceImage]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ImageCollection({len(self)} image(s))"

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than counted from the end
        if not 0 <= index < len(self._images):
            raise IndexOutOfRangeError(index, len(self._images))

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)
