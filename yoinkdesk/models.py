"""State held by the capture form and its panels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Capture:
    """The search box and the fields of the capture form."""

    search: str = ""
    form_topic: str = ""
    form_subject: str = ""
    form_content: str = ""
    updated_file: str | None = None


@dataclass
class CapturePane:
    """Visibility of the capture form pane."""

    is_visible: bool = True


@dataclass
class CaptureSidebar:
    """Visibility of the sidebar listing loaded captures."""

    is_visible: bool = True