"""Mutual exclusion between typed and uploaded transcripts."""

from __future__ import annotations

import logging

from .models import InputMode, SelectedFile, Session

logger = logging.getLogger("meetsum")


class InputModeController:
    def __init__(self, session: Session) -> None:
        self.session = session

    def set_mode(self, mode: InputMode) -> None:
        mode = InputMode(mode)
        self.session.input_mode = mode
        if mode is InputMode.TEXT:
            self.session.selected_file = None
        else:
            self.session.transcript = ""
        logger.debug("Input mode set to %s", mode.value)

    def select_file(self, file: SelectedFile) -> None:
        # Transcript is cleared whatever the current mode is.
        self.session.selected_file = file
        self.session.transcript = ""
        logger.info("File selected: %s (%d bytes)", file.name, len(file.content))
