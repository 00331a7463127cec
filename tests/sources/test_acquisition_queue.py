"""
Unit tests for AcquisitionQueue.

Covers ordered delivery when sources finish out of order, non-blocking
drain, timeouts that leave work queued, synchronous fallback and
crashed sources.
"""

import threading

import pytest

from photodoc.sources import (
    AcquisitionQueue,
    AcquisitionResult,
    AcquisitionStatus,
    ImageSource,
    InMemoryImageSource,
)


class GatedSource(ImageSource):
    """Source that blocks until its gate is opened."""

    def __init__(self, images, name):
        self.images = images
        self.name = name
        self.gate = threading.Event()
        self.finished = threading.Event()

    def acquire(self):
        assert self.gate.wait(timeout=5)
        self.finished.set()
        return AcquisitionResult.success(self.images)


class ExplodingSource(ImageSource):
    name = "exploding"

    def acquire(self):
        raise RuntimeError("camera unplugged")


class TimingOutSource(ImageSource):
    name = "scanner"

    def acquire(self):
        raise TimeoutError("scanner timed out")


@pytest.fixture
def delivered():
    return []


@pytest.fixture
def queue(delivered):
    q = AcquisitionQueue(delivered.append, max_workers=4)
    yield q
    q.shutdown()


class TestOrderedDelivery:

    def test_wait_all_when_later_source_finishes_first_then_submission_order(self, queue, delivered, make_image):
        # Arrange
        first = GatedSource([make_image(1, 1, "first")], "first")
        second = GatedSource([make_image(2, 2, "second")], "second")
        queue.submit(first)
        queue.submit(second)

        # Act: let the second source finish before the first
        second.gate.set()
        assert second.finished.wait(timeout=5)
        first.gate.set()
        count = queue.wait_all(timeout=5)

        # Assert
        assert count == 2
        assert [r.images[0].name for r in delivered] == ["first", "second"]

    def test_drain_when_head_still_running_then_holds_back_later_results(self, queue, delivered, make_image):
        # Arrange
        first = GatedSource([make_image(1, 1, "first")], "first")
        second = GatedSource([make_image(2, 2, "second")], "second")
        queue.submit(first)
        queue.submit(second)
        second.gate.set()
        assert second.finished.wait(timeout=5)

        # Act
        drained = queue.drain()

        # Assert
        assert drained == 0
        assert delivered == []
        assert queue.pending_count == 2

        first.gate.set()
        queue.wait_all(timeout=5)
        assert queue.pending_count == 0
        assert len(delivered) == 2

    def test_drain_when_nothing_submitted_then_zero(self, queue):
        assert queue.drain() == 0

    def test_wait_all_when_timeout_expires_then_result_kept_for_later(self, queue, delivered, make_image):
        # Arrange
        slow = GatedSource([make_image(1, 1, "late")], "slow")
        queue.submit(slow)

        # Act
        count = queue.wait_all(timeout=0.05)

        # Assert: nothing delivered yet, nothing lost
        assert count == 0
        assert delivered == []
        assert queue.pending_count == 1

        slow.gate.set()
        assert queue.wait_all(timeout=5) == 1
        assert [r.status for r in delivered] == [AcquisitionStatus.SUCCESS]
        assert delivered[0].images[0].name == "late"

    def test_wait_all_when_timeout_on_head_then_later_results_held_back(self, queue, delivered, make_image):
        first = GatedSource([make_image(1, 1, "first")], "first")
        second = GatedSource([make_image(2, 2, "second")], "second")
        second.gate.set()
        queue.submit(first)
        queue.submit(second)
        assert second.finished.wait(timeout=5)

        assert queue.wait_all(timeout=0.05) == 0
        assert queue.pending_count == 2

        first.gate.set()
        queue.wait_all(timeout=5)
        assert [r.images[0].name for r in delivered] == ["first", "second"]


class TestFailuresAndModes:

    def test_wait_all_when_source_raises_then_failed_result(self, queue, delivered):
        queue.submit(ExplodingSource())

        queue.wait_all(timeout=5)

        assert len(delivered) == 1
        assert delivered[0].status is AcquisitionStatus.FAILED
        assert delivered[0].message == "camera unplugged"

    def test_wait_all_when_source_raises_timeout_error_then_failed_result(self, queue, delivered):
        queue.submit(TimingOutSource())

        assert queue.wait_all(timeout=5) == 1

        assert delivered[0].status is AcquisitionStatus.FAILED
        assert delivered[0].message == "scanner timed out"
        assert queue.pending_count == 0

    def test_submit_when_disabled_then_delivered_synchronously(self, queue, delivered, make_image):
        queue.disable()
        future = queue.submit(InMemoryImageSource([make_image(1, 1)]))

        assert future is None
        assert len(delivered) == 1
        assert queue.pending_count == 0

    def test_submit_when_disabled_with_earlier_pending_then_submission_order(self, queue, delivered, make_image):
        # Arrange
        first = GatedSource([make_image(1, 1, "first")], "first")
        queue.submit(first)
        queue.disable()
        first.gate.set()

        # Act
        queue.submit(InMemoryImageSource([make_image(2, 2, "second")]))

        # Assert
        assert [r.images[0].name for r in delivered] == ["first", "second"]
        assert queue.pending_count == 0

    def test_context_manager_when_exited_then_all_delivered(self, delivered, make_image):
        source = GatedSource([make_image(1, 1)], "gated")
        source.gate.set()

        with AcquisitionQueue(delivered.append) as q:
            q.submit(source)

        assert len(delivered) == 1
