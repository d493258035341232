"""Capture application state, its messages, and the desktop window."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from .errors import StoreError
from .models import Capture, CapturePane, CaptureSidebar
from .storage import capture_record, load_captures, write_capture

if TYPE_CHECKING:
    import tkinter

TOPIC_ERROR = "Submission failed: Topic must start with underscore."
OVERLAY_TEXT = "Cannot begin with underscore!"
DEFAULT_PATH = "_test.md"

_DARK = "#0f0909"
_LIGHT = "#ffe0b5"
_ERROR_BG = "#ffb6b6"


@dataclass(frozen=True)
class CapturesLoaded:
    """Captures read from the file, or the error that stopped the read."""

    result: Union[list[list[str]], StoreError]


@dataclass(frozen=True)
class CaptureSearchChanged:
    value: str


@dataclass(frozen=True)
class CaptureTopicChanged:
    value: str


@dataclass(frozen=True)
class CaptureSubjectChanged:
    value: str


@dataclass(frozen=True)
class CaptureFormContentChanged:
    """The full text of the content editor after an edit."""

    content: str


@dataclass(frozen=True)
class SubmitCapture:
    pass


@dataclass(frozen=True)
class FileOpened:
    """The file a capture was written to, or the error from writing it."""

    result: Union[Path, StoreError]


@dataclass(frozen=True)
class ShowError:
    """Request to show the error overlay; an error result leaves it hidden."""

    result: Union[str, StoreError]


@dataclass(frozen=True)
class HideError:
    pass


Message = Union[
    CapturesLoaded,
    CaptureSearchChanged,
    CaptureTopicChanged,
    CaptureSubjectChanged,
    CaptureFormContentChanged,
    SubmitCapture,
    FileOpened,
    ShowError,
    HideError,
]


class Yoink:
    """Application state. ``update`` applies a message and may return a follow-up one."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.captures: list[list[str]] = []
        self.capture = Capture()
        self.capture_pane = CapturePane()
        self.capture_sidebar = CaptureSidebar()
        self.ui_error = ""
        self.show_error = False

    def load(self) -> CapturesLoaded:
        """Read the capture file and return the message carrying the outcome."""
        try:
            return CapturesLoaded(load_captures(self.path))
        except StoreError as exc:
            return CapturesLoaded(exc)

    def update(self, message: Message) -> Optional[Message]:
        """Apply a message to the state and return the next message to process, if any."""
        if isinstance(message, ShowError):
            if not isinstance(message.result, StoreError):
                self.show_error = True
        elif isinstance(message, HideError):
            self.hide_error()
        elif isinstance(message, CapturesLoaded):
            if not isinstance(message.result, StoreError):
                self.captures = message.result
        elif isinstance(message, CaptureSearchChanged):
            self.capture.search = message.value
        elif isinstance(message, CaptureTopicChanged):
            self.capture.form_topic = message.value
        elif isinstance(message, CaptureSubjectChanged):
            self.capture.form_subject = message.value
        elif isinstance(message, CaptureFormContentChanged):
            self.capture.form_content = message.content
        elif isinstance(message, SubmitCapture):
            return self._submit()
        elif isinstance(message, FileOpened):
            if not isinstance(message.result, StoreError):
                self.capture.updated_file = str(message.result)
        else:
            raise TypeError(f"unknown message: {message!r}")
        return None

    def hide_error(self) -> None:
        self.show_error = False

    def _submit(self) -> Message:
        if not self.capture.form_topic.startswith("_"):
            self.ui_error = TOPIC_ERROR
            return ShowError(self.ui_error)
        record = capture_record(
            datetime.now(),
            self.capture.form_topic,
            self.capture.form_subject,
            self.capture.form_content,
        )
        try:
            return FileOpened(write_capture(record, self.path))
        except StoreError as exc:
            return FileOpened(exc)


class YoinkWindow:
    """Tk window showing the capture sidebar, the capture form and the error overlay."""

    def __init__(self, root: "tkinter.Misc", app: Yoink) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.app = app

        root.columnconfigure(0, weight=2, uniform="cols")
        root.columnconfigure(1, weight=6, uniform="cols")
        root.rowconfigure(0, weight=1)

        self.sidebar = tk.Frame(root, bg=_DARK, padx=5, pady=5)
        self.sidebar.grid(row=0, column=0, sticky="nsew")
        self.pane = tk.Frame(root, bg=_LIGHT, padx=5, pady=5)
        self.pane.grid(row=0, column=1, sticky="nsew")

        self.search_var = tk.StringVar(value=app.capture.search)
        self.topic_var = tk.StringVar(value=app.capture.form_topic)
        self.subject_var = tk.StringVar(value=app.capture.form_subject)
        self.search_var.trace_add(
            "write", lambda *_: self.dispatch(CaptureSearchChanged(self.search_var.get()))
        )
        self.topic_var.trace_add(
            "write", lambda *_: self.dispatch(CaptureTopicChanged(self.topic_var.get()))
        )
        self.subject_var.trace_add(
            "write",
            lambda *_: self.dispatch(CaptureSubjectChanged(self.subject_var.get())),
        )

        self._build_sidebar()
        self._build_pane()

        self.overlay = tk.Frame(root, bg="#000000")
        box = tk.Label(
            self.overlay, text=OVERLAY_TEXT, bg=_ERROR_BG, fg=_DARK, padx=10, pady=10
        )
        box.place(relx=0.5, rely=0.5, anchor="center")
        self.overlay.bind("<Button-1>", lambda _event: self.dispatch(HideError()))

        self.refresh()

    def _build_sidebar(self) -> None:
        tk = self._tk
        if not self.app.capture_sidebar.is_visible:
            tk.Label(self.sidebar, text="Sidebar hidden.", bg=_DARK, fg=_LIGHT).pack(
                anchor="nw"
            )
            self.capture_list = None
            return
        tk.Entry(self.sidebar, textvariable=self.search_var).pack(fill="x", pady=(0, 10))
        self.capture_list = tk.Frame(self.sidebar, bg=_DARK)
        self.capture_list.pack(fill="both", expand=True)

    def _build_pane(self) -> None:
        tk = self._tk
        if not self.app.capture_pane.is_visible:
            tk.Label(self.pane, text="Pane hidden.", bg=_LIGHT, fg=_DARK).pack(anchor="nw")
            self.editor = None
            return
        tk.Label(self.pane, text="Capture", bg=_LIGHT, fg=_DARK).pack(anchor="w", pady=5)
        tk.Entry(self.pane, textvariable=self.topic_var).pack(fill="x", pady=5)
        tk.Entry(self.pane, textvariable=self.subject_var).pack(fill="x", pady=5)
        self.editor = tk.Text(self.pane, height=12)
        self.editor.pack(fill="both", expand=True, pady=5)
        self.editor.bind("<<Modified>>", self._on_editor_modified)
        tk.Button(
            self.pane,
            text="Submit",
            bg=_DARK,
            fg=_LIGHT,
            activebackground=_DARK,
            activeforeground=_LIGHT,
            command=lambda: self.dispatch(SubmitCapture()),
        ).pack(anchor="w", pady=5)

    def _on_editor_modified(self, _event: Any) -> None:
        if self.editor is None or not self.editor.edit_modified():
            return
        content = self.editor.get("1.0", "end-1c")
        self.editor.edit_modified(False)
        self.dispatch(CaptureFormContentChanged(content))

    def dispatch(self, message: Optional[Message]) -> None:
        """Feed a message and every follow-up it produces to the app, then redraw."""
        while message is not None:
            message = self.app.update(message)
        self.refresh()

    def refresh(self) -> None:
        """Redraw the capture list and the error overlay from the app state."""
        tk = self._tk
        if self.capture_list is not None:
            for child in self.capture_list.winfo_children():
                child.destroy()
            for capture in self.app.captures:
                entry = tk.Frame(self.capture_list, bg=_DARK)
                entry.pack(fill="x", pady=(0, 5))
                for field in capture:
                    tk.Label(entry, text=field, bg=_DARK, fg=_LIGHT, anchor="w").pack(
                        fill="x"
                    )
        if self.app.show_error:
            self.overlay.place(relx=0, rely=0, relwidth=1, relheight=1)
            self.overlay.lift()
        else:
            self.overlay.place_forget()


def main(argv: Optional[list[str]] = None) -> int:
    """Open the capture window on the given markdown file."""
    parser = argparse.ArgumentParser(prog="yoinkdesk", description="Yoink Desktop")
    parser.add_argument(
        "path", nargs="?", default=DEFAULT_PATH, help="markdown file holding captures"
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("Yoink Desktop")
    root.option_add("*Font", "TkFixedFont")
    app = Yoink(args.path)
    window = YoinkWindow(root, app)
    window.dispatch(app.load())
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())