from pathlib import Path

import pytest

from yoinkdesk.app import (
    CaptureFormContentChanged,
    CapturesLoaded,
    CaptureSearchChanged,
    CaptureSubjectChanged,
    CaptureTopicChanged,
    FileOpened,
    HideError,
    ShowError,
    SubmitCapture,
    TOPIC_ERROR,
    Yoink,
)
from yoinkdesk.errors import ErrorKind, StoreError
from yoinkdesk.storage import parse_capture_line


def run(app, message):
    while message is not None:
        message = app.update(message)


def fill_form(app, topic, subject, content):
    app.update(CaptureTopicChanged(topic))
    app.update(CaptureSubjectChanged(subject))
    app.update(CaptureFormContentChanged(content))


def test_initial_state(tmp_path):
    app = Yoink(tmp_path / "c.md")
    assert app.captures == []
    assert app.show_error is False
    assert app.ui_error == ""
    assert app.capture_pane.is_visible is True
    assert app.capture_sidebar.is_visible is True
    assert app.capture.updated_file is None


def test_load_missing_file_reports_error(tmp_path):
    app = Yoink(tmp_path / "missing.md")
    message = app.load()
    assert isinstance(message.result, StoreError)
    assert message.result.kind is ErrorKind.FILE_NOT_FOUND
    assert app.update(message) is None
    assert app.captures == []


def test_load_existing_captures(tmp_path):
    path = tmp_path / "c.md"
    path.write_text(
        "<!--yoink::::2024-01-01 10:00:00::::_topic::::subject-->\nbody\n",
        encoding="utf-8",
    )
    app = Yoink(path)
    run(app, app.load())
    assert app.captures == [["yoink", "2024-01-01 10:00:00", "_topic", "subject"]]


def test_form_messages_update_capture(tmp_path):
    app = Yoink(tmp_path / "c.md")
    app.update(CaptureSearchChanged("find"))
    fill_form(app, "_t", "s", "body text")
    assert app.capture.search == "find"
    assert app.capture.form_topic == "_t"
    assert app.capture.form_subject == "s"
    assert app.capture.form_content == "body text"


def test_submit_without_underscore_shows_error(tmp_path):
    path = tmp_path / "c.md"
    app = Yoink(path)
    fill_form(app, "topic", "s", "body")
    follow_up = app.update(SubmitCapture())
    assert isinstance(follow_up, ShowError)
    assert app.ui_error == TOPIC_ERROR
    assert not path.exists()
    app.update(follow_up)
    assert app.show_error is True
    app.update(HideError())
    assert app.show_error is False


def test_show_error_with_error_result_keeps_overlay_hidden(tmp_path):
    app = Yoink(tmp_path / "c.md")
    app.update(ShowError(StoreError(ErrorKind.IO, "InvalidData")))
    assert app.show_error is False


def test_submit_writes_record(tmp_path):
    path = tmp_path / "c.md"
    app = Yoink(path)
    fill_form(app, "_topic", "subject", "body")
    follow_up = app.update(SubmitCapture())
    assert isinstance(follow_up, FileOpened)
    assert follow_up.result == path
    app.update(follow_up)
    assert app.capture.updated_file == str(path)

    lines = path.read_text(encoding="utf-8").split("\n")
    fields = parse_capture_line(lines[0])
    assert fields[0] == "yoink"
    assert len(fields[1]) == 19
    assert fields[2:] == ["_topic", "subject"]
    assert lines[1] == "body"


def test_two_submissions_load_back(tmp_path):
    path = tmp_path / "c.md"
    app = Yoink(path)
    fill_form(app, "_one", "a", "first")
    run(app, SubmitCapture())
    fill_form(app, "_two", "b", "second")
    run(app, SubmitCapture())

    fresh = Yoink(path)
    run(fresh, fresh.load())
    assert [c[2:] for c in fresh.captures] == [["_one", "a"], ["_two", "b"]]


def test_submit_to_directory_fails(tmp_path):
    app = Yoink(tmp_path)
    fill_form(app, "_t", "s", "body")
    follow_up = app.update(SubmitCapture())
    assert isinstance(follow_up, FileOpened)
    assert isinstance(follow_up.result, StoreError)
    app.update(follow_up)
    assert app.capture.updated_file is None


def test_captures_loaded_error_keeps_previous(tmp_path):
    app = Yoink(tmp_path / "c.md")
    app.update(CapturesLoaded([["yoink", "x", "_t", "s"]]))
    app.update(CapturesLoaded(StoreError(ErrorKind.FILE_NOT_FOUND)))
    assert app.captures == [["yoink", "x", "_t", "s"]]


def test_unknown_message_rejected(tmp_path):
    app = Yoink(tmp_path / "c.md")
    with pytest.raises(TypeError):
        app.update("not a message")


def test_default_path_is_relative_file():
    app = Yoink()
    assert app.path == Path("_test.md")