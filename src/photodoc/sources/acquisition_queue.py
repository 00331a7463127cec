"""
Module: sources.acquisition_queue

Purpose:
    Background acquisition queue. Sources run on a thread pool while the
    owning thread keeps going; finished results are handed to a single
    consumer on the owning thread, in submission order.

Key Classes:
    - AcquisitionQueue: Thread pool-based acquisition queue

Dependencies:
    - concurrent.futures: Thread pool execution
    - sources.base: ImageSource, AcquisitionResult

Used By:
    - photodoc.session: Session.acquire_async / Session.poll
"""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Deque, Optional

from .base import AcquisitionResult, ImageSource

logger = logging.getLogger(__name__)


class AcquisitionQueue:
    """
    Thread pool-based acquisition queue.

    Results are delivered only from drain()/wait_all(), which the owning
    thread calls, so the consumer never runs concurrently with itself.
    A result is held back until every earlier submission has been
    delivered, so append order follows submission order even when later
    sources finish first.

    Usage:
        queue = AcquisitionQueue(session.accept)
        try:
            queue.submit(FileImageSource(paths))
            queue.submit(InMemoryImageSource(images))
            ...
            queue.drain()        # deliver whatever is ready
            queue.wait_all()     # or block for everything
        finally:
            queue.shutdown()

    Attributes:
        max_workers: Maximum concurrent acquisitions.
    """

    def __init__(
        self,
        consumer: Callable[[AcquisitionResult], None],
        max_workers: int = 4,
    ):
        """
        Initialize acquisition queue.

        Args:
            consumer: Receives each AcquisitionResult on the draining thread.
            max_workers: Maximum concurrent acquisition threads.
        """
        self._consumer = consumer
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="photodoc-acquire",
        )
        self._pending: Deque[tuple[ImageSource, Future]] = deque()
        self._enabled = True

    def submit(self, source: ImageSource) -> Optional[Future]:
        """
        Queue an acquisition.

        Args:
            source: Image source to run.

        Returns:
            Future object if queued, None if the queue runs synchronously.
        """
        if not self._enabled:
            # Synchronous fallback, after everything queued before it
            self.wait_all()
            self._deliver(source, _run_source(source))
            return None

        future = self._executor.submit(_run_source, source)
        self._pending.append((source, future))
        logger.debug(f"Queued acquisition from {source.name}")
        return future

    def drain(self) -> int:
        """
        Deliver finished results without blocking.

        Stops at the first submission that is still running.

        Returns:
            Number of results delivered.
        """
        delivered = 0
        while self._pending and self._pending[0][1].done():
            source, future = self._pending.popleft()
            self._deliver(source, _result_of(source, future))
            delivered += 1
        return delivered

    def wait_all(self, timeout: Optional[float] = None) -> int:
        """
        Block until every queued acquisition is delivered.

        An acquisition still running when the timeout expires stays
        queued, along with everything submitted after it; a later
        drain() or wait_all() delivers it.

        Args:
            timeout: Max seconds to wait per acquisition (None = indefinite).

        Returns:
            Number of results delivered.
        """
        delivered = 0
        while self._pending:
            source, future = self._pending[0]
            try:
                future.exception(timeout=timeout)
            except FutureTimeoutError:
                logger.warning(
                    f"Acquisition from {source.name} still running after {timeout}s, "
                    f"{len(self._pending)} result(s) held back"
                )
                break
            self._pending.popleft()
            self._deliver(source, _result_of(source, future))
            delivered += 1
        return delivered

    @property
    def pending_count(self) -> int:
        """Acquisitions submitted but not yet delivered."""
        return len(self._pending)

    def shutdown(self) -> None:
        """Deliver outstanding results and stop the thread pool."""
        self.wait_all()
        self._executor.shutdown(wait=True)

    def disable(self) -> None:
        """Run acquisitions synchronously inside submit()."""
        self._enabled = False

    def _deliver(self, source: ImageSource, result: AcquisitionResult) -> None:
        logger.debug(f"Delivering {result.status.name} from {source.name}")
        self._consumer(result)

    def __enter__(self) -> "AcquisitionQueue":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()


def _run_source(source: ImageSource) -> AcquisitionResult:
    return source.acquire()


def _result_of(source: ImageSource, future: Future) -> AcquisitionResult:
    """Unwrap a finished future, turning a crashed source into a FAILED result."""
    try:
        return future.result()
    except Exception as e:
        logger.error(f"Acquisition from {source.name} failed: {e}")
        return AcquisitionResult.failed(str(e) or type(e).__name__)
