"""Session reset."""

from __future__ import annotations

import logging

from .models import InputMode, Session

logger = logging.getLogger("meetsum")


class ResetController:
    def __init__(self, session: Session) -> None:
        self.session = session

    def has_content(self) -> bool:
        return bool(
            self.session.transcript
            or self.session.selected_file is not None
            or self.session.summary_text
        )

    def clear_all(self) -> None:
        # Busy flags belong to in-flight operations and are left alone.
        session = self.session
        session.transcript = ""
        session.custom_instruction = ""
        session.summary_text = ""
        session.edited_summary_text = ""
        session.summary_id = ""
        session.recipients_raw = ""
        session.selected_file = None
        session.input_mode = InputMode.TEXT
        logger.info("Session cleared")
