"""Precondition checks run before every backend call."""

from __future__ import annotations

from .errors import ValidationError
from .models import Session

PROCESS_FILE_MESSAGE = "Please select a file and provide custom instruction"
GENERATE_SUMMARY_MESSAGE = "Please provide both transcript and custom instruction"
SEND_EMAIL_MESSAGE = "Please provide both summary and recipient emails"


def _filled(value: str) -> bool:
    return bool(value and value.strip())


class ValidationGate:
    """Raises ValidationError when an operation may not be dispatched.

    The ``can_*`` helpers fold in the lane's busy flag so a front end can
    enable or disable the matching trigger.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def check_process_file(self) -> None:
        if self.session.selected_file is None or not _filled(
            self.session.custom_instruction
        ):
            raise ValidationError(PROCESS_FILE_MESSAGE)

    def check_generate_summary(self) -> None:
        if not _filled(self.session.transcript) or not _filled(
            self.session.custom_instruction
        ):
            raise ValidationError(GENERATE_SUMMARY_MESSAGE)

    def check_send_email(self) -> None:
        if not _filled(self.session.edited_summary_text) or not _filled(
            self.session.recipients_raw
        ):
            raise ValidationError(SEND_EMAIL_MESSAGE)

    def can_process_file(self) -> bool:
        return (
            not self.session.is_processing_file
            and self.session.selected_file is not None
            and _filled(self.session.custom_instruction)
        )

    def can_generate_summary(self) -> bool:
        return (
            not self.session.is_summarizing_text
            and _filled(self.session.transcript)
            and _filled(self.session.custom_instruction)
        )

    def can_send_email(self) -> bool:
        # Send stays enabled with empty fields; the check reports what is missing.
        return not self.session.is_sending_email
