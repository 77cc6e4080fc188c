"""Data models for MeetSum."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InputMode(str, Enum):
    TEXT = "text"
    FILE = "file"


class OperationOutcome(str, Enum):
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    FAILED = "failed"
    BUSY = "busy"


@dataclass
class SelectedFile:
    name: str
    content: bytes

    @property
    def content_type(self) -> str:
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"

    @classmethod
    def from_path(cls, path: str) -> "SelectedFile":
        with open(path, "rb") as handle:
            content = handle.read()
        return cls(name=os.path.basename(path), content=content)


@dataclass
class SummaryResult:
    summary: str
    summary_id: str


@dataclass
class Notice:
    level: str
    message: str


@dataclass
class Session:
    """The single mutable record behind one summarize-and-share workflow."""

    transcript: str = ""
    custom_instruction: str = ""
    input_mode: InputMode = InputMode.TEXT
    selected_file: Optional[SelectedFile] = None
    summary_text: str = ""
    edited_summary_text: str = ""
    summary_id: str = ""
    recipients_raw: str = ""
    is_processing_file: bool = False
    is_summarizing_text: bool = False
    is_sending_email: bool = False

    @property
    def file_name(self) -> str:
        return self.selected_file.name if self.selected_file else ""
