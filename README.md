# yoinkdesk

A small desktop notebook for capturing short, topic-tagged notes into a
single Markdown file.

The window has two parts:

- a **sidebar** with a search box and the header fields of the captures
  found in the file when the window opened;
- a **capture pane** with a topic field, a subject field, a text area for
  the note itself and a *Submit* button.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python
installations. The package has no other dependencies.

## Running

```
yoinkdesk [PATH]
```

`PATH` is the Markdown file that holds the captures. It defaults to
`_test.md` in the current directory.

When the window opens, the file is read and every capture header in it is
listed in the sidebar, one field per line. If the file does not exist, or
holds no capture header, the list stays empty.

## Writing a capture

Fill in a topic and a subject, type the note, and press *Submit*.
The topic must start with an underscore (for example `_reading`);
otherwise nothing is written and an error notice covers the window until
it is clicked.

Each accepted capture is written as a header comment followed by the note
text and a newline:

```
<!--yoink::::2024-05-01 09:30:12::::_reading::::Chapter one-->
Notes about the first chapter.
```

The header holds the local time of submission (to the second), the topic
and the subject, separated by `::::`. If the file does not exist yet it is
created; otherwise the new capture is appended after a blank line.

## Using it from Python

The pieces behind the window can be used on their own.

`yoinkdesk.storage`:

- `spec_line(timestamp, topic, subject)` builds the header line; the
  timestamp may be a `datetime` or a ready-made string;
- `capture_record(timestamp, topic, subject, content)` builds the text of
  one whole capture;
- `parse_capture_line(line)` splits a header line into its fields
  (`["yoink", timestamp, topic, subject]`), or returns `None` for any
  other line;
- `read_lines(path)` reads a UTF-8 file into lines without line endings;
- `load_captures(path)` returns the fields of every header in the file,
  and raises `StoreError` if there are none;
- `write_capture(capture_string, path)` creates or appends to the capture
  file and returns its path.

`yoinkdesk.app`:

- `Yoink(path)` holds the application state. `Yoink.load()` reads the
  file and returns a `CapturesLoaded` message; `Yoink.update(message)`
  applies a message (`CaptureTopicChanged`, `CaptureSubjectChanged`,
  `CaptureFormContentChanged`, `CaptureSearchChanged`, `SubmitCapture`,
  `HideError`, …) and returns the follow-up message, if any;
- `YoinkWindow(root, app)` draws that state in a Tk window;
- `main(argv)` is the `yoinkdesk` command.

`yoinkdesk.models` holds the dataclasses `Capture`, `CapturePane` and
`CaptureSidebar`.

File problems are raised as `yoinkdesk.errors.StoreError`, whose `kind`
(an `ErrorKind`) tells permission problems and missing files apart from
other I/O failures; `error_from_os(exc)` maps an `OSError` onto one.

## What it does not do

- The search box records what is typed but does not filter the list.
- The sidebar is filled once, when the window opens; captures submitted
  afterwards appear only after a restart.
- Failures to write the file are not shown in the window.

## Running the tests

```
pip install ".[test]"
pytest
```