"""
Tests for Session, the caller-facing facade.

Test Coverage:
- Collection commands and reported (non-raising) index errors
- Listener notifications
- Compose/export with alerts
- Acquisition results: success, cancelled, permission denied, failed
- Background acquisition through poll()
"""

import threading

import fitz
import pytest

from photodoc.collection import SortOrder
from photodoc.config import ExportConfig
from photodoc.errors import ExportError
from photodoc.layout import PageSize
from photodoc.output import ExportSink, MemoryExportSink, describe_pdf
from photodoc.session import ACCESS_DENIED_TITLE, Session, SessionEvent
from photodoc.sources import AcquisitionResult, ImageSource, InMemoryImageSource


@pytest.fixture
def session():
    with Session() as s:
        yield s


@pytest.fixture
def events(session):
    received = []
    session.subscribe(lambda event, payload: received.append((event, payload)))
    return received


class FailingSink(ExportSink):
    def write(self, data: bytes) -> str:
        raise ExportError("The file couldn't be saved because the volume is read only.")


class TestCollectionCommands:

    def test_add_and_reorder_when_valid_then_images_reflect_commands(self, session, make_image):
        # Arrange
        a, b, c = make_image(1, 1, "a"), make_image(2, 2, "b"), make_image(3, 3, "c")
        session.add_image(a)
        session.add_images([b, c])

        # Act
        session.move_to_front(2)
        session.sort_images(SortOrder.DESCENDING)

        # Assert
        assert session.images == (b, a, c)
        assert session.image_count == 3

    def test_remove_image_when_out_of_range_then_false_and_alert(self, session, make_image):
        session.add_image(make_image(1, 1))

        removed = session.remove_image(3)

        assert removed is False
        assert session.image_count == 1
        assert session.alerts[-1].title == "Error"
        assert "Index 3 out of range" in session.alerts[-1].message

    def test_move_to_front_when_out_of_range_then_false_and_alert(self, session):
        assert session.move_to_front(0) is False
        assert len(session.alerts) == 1

    def test_clear_when_populated_then_empty(self, session, make_image):
        session.add_images([make_image(1, 1), make_image(1, 1)])
        session.clear()
        assert session.images == ()

    def test_pop_alerts_when_called_then_alerts_forgotten(self, session):
        session.show_alert("Title", "Message")

        popped = session.pop_alerts()

        assert [a.message for a in popped] == ["Message"]
        assert session.alerts == ()


class TestNotifications:

    def test_subscribe_when_images_change_then_snapshot_delivered(self, session, events, make_image):
        img = make_image(1, 1)

        session.add_image(img)

        assert events == [(SessionEvent.IMAGES_CHANGED, (img,))]

    def test_page_size_when_changed_then_notified_once(self, session, events):
        session.page_size = PageSize.LETTER
        session.page_size = PageSize.LETTER

        assert events == [(SessionEvent.PAGE_SIZE_CHANGED, PageSize.LETTER)]

    def test_page_size_when_not_enum_then_type_error(self, session):
        with pytest.raises(TypeError):
            session.page_size = "A4"

    def test_show_alert_when_called_then_alert_event(self, session, events):
        alert = session.show_alert("Success", "done")
        assert events == [(SessionEvent.ALERT, alert)]

    def test_unsubscribe_when_removed_then_no_more_events(self, session, make_image):
        received = []
        listener = lambda event, payload: received.append(event)
        session.subscribe(listener)
        session.unsubscribe(listener)

        session.add_image(make_image(1, 1))

        assert received == []


class TestComposeAndExport:

    def test_compose_when_default_then_uses_config_page_size(self, make_image):
        session = Session(ExportConfig(page_size=PageSize.LETTER))
        session.add_image(make_image(10, 10))

        document = session.compose()

        assert document.page_size is PageSize.LETTER
        assert document.page_rect.size == (612, 792)

    def test_compose_when_override_then_override_used(self, session, make_image):
        session.add_images([make_image(300, 600), make_image(900, 200)])

        document = session.compose(PageSize.AUTO)

        assert document.page_rect.size == (900, 600)
        assert session.page_size is PageSize.A4

    def test_compose_when_empty_then_zero_pages(self, session):
        assert session.compose().page_count == 0

    def test_export_when_success_then_success_alert(self, session, pil_image):
        session.add_images([pil_image(), pil_image()])
        sink = MemoryExportSink()

        result = session.export(sink)

        assert result.success
        assert describe_pdf(sink.data).page_count == 2
        assert [(a.title, a.message) for a in session.alerts] == [
            ("Success", "PDF saved successfully")
        ]

    def test_export_when_degenerate_image_then_success_mentions_skipped(self, session, pil_image, make_image):
        session.add_images([pil_image(), make_image(10, 0)])

        result = session.export(MemoryExportSink())

        assert result.success
        assert result.page_count == 1
        assert "1 image(s) skipped" in session.alerts[-1].message

    def test_export_when_sink_fails_then_error_alert_with_cause(self, session, pil_image):
        session.add_image(pil_image())

        result = session.export(FailingSink())

        assert not result.success
        assert session.alerts[-1].title == "Error"
        assert "read only" in session.alerts[-1].message

    def test_export_when_config_title_then_used_as_pdf_title(self, pil_image):
        sink = MemoryExportSink()
        with Session(ExportConfig(title="My Scan")) as session:
            session.add_image(pil_image())

            session.export(sink)

        pdf = fitz.open(stream=sink.data, filetype="pdf")
        try:
            assert pdf.metadata["title"] == "My Scan"
        finally:
            pdf.close()


class TestAcquisition:

    def test_accept_when_success_then_images_appended(self, session, make_image):
        images = [make_image(1, 1), make_image(2, 2)]

        added = session.accept(AcquisitionResult.success(images))

        assert added == 2
        assert session.images == tuple(images)

    def test_accept_when_cancelled_then_silently_ignored(self, session):
        assert session.accept(AcquisitionResult.cancelled()) == 0
        assert session.alerts == ()

    def test_accept_when_permission_denied_then_access_alert(self, session):
        session.accept(AcquisitionResult.permission_denied("Camera access denied"))

        assert session.alerts[-1].title == ACCESS_DENIED_TITLE
        assert session.alerts[-1].message == "Camera access denied"
        assert session.image_count == 0

    def test_accept_when_failed_then_error_alert(self, session):
        session.accept(AcquisitionResult.failed("boom"))
        assert session.alerts[-1].message == "boom"

    def test_accept_when_all_files_unreadable_then_error_alert(self, session):
        session.accept(AcquisitionResult.success([], errors=["a.png: broken"]))
        assert session.alerts[-1].message == "None of the selected files could be loaded"

    def test_acquire_when_file_source_then_images_loaded(self, session, image_files):
        from photodoc.sources import FileImageSource

        added = session.acquire(FileImageSource(image_files))

        assert added == 3
        assert [img.name for img in session.images] == ["wide.png", "tall.jpg", "square.png"]

    def test_acquire_async_when_polled_then_appended_in_submission_order(self, session, make_image):
        # Arrange
        gate = threading.Event()

        class SlowSource(ImageSource):
            name = "slow"

            def acquire(self):
                gate.wait(timeout=5)
                return AcquisitionResult.success([make_image(1, 1, "slow")])

        session.acquire_async(SlowSource())
        session.acquire_async(InMemoryImageSource([make_image(2, 2, "fast")]))

        # Act
        early = session.poll()
        gate.set()
        late = session.poll(wait=True)

        # Assert
        assert early == 0
        assert late == 2
        assert [img.name for img in session.images] == ["slow", "fast"]

    def test_poll_when_nothing_submitted_then_zero(self, session):
        assert session.poll() == 0
