"""Workflow orchestration for the summarize-and-share session.

The orchestrator owns one Session and drives the three backend lanes
(file processing, text summarization, email dispatch). Each lane:

1. drops the call if its busy flag is already set,
2. runs the validation gate and surfaces the message on failure,
3. sets its busy flag and awaits the backend,
4. applies the result to the session on success, or surfaces
   ``<prefix>: <detail>`` on failure with the session left as it was,
5. clears its busy flag on every exit path.

Lanes are independent; completions land in whatever order the backend
answers and the last write wins. Mutation happens on the thread running
the event loop, so front ends must submit edits through that loop.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .api_client import BackendClient
from .errors import TransportError, ValidationError
from .input_mode import InputModeController
from .models import InputMode, Notice, OperationOutcome, SelectedFile, Session
from .reset import ResetController
from .validation import ValidationGate

logger = logging.getLogger("meetsum")

Notifier = Callable[[Notice], None]

EMAIL_SENT_MESSAGE = "Email sent successfully!"


def parse_recipients(raw: str) -> List[str]:
    """Split on commas and trim each token; empty tokens are kept."""
    return [token.strip() for token in raw.split(",")]


def _log_notice(notice: Notice) -> None:
    logger.info("Notice (%s): %s", notice.level, notice.message)


class WorkflowOrchestrator:
    def __init__(
        self,
        client: BackendClient,
        session: Optional[Session] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.client = client
        self.session = session or Session()
        self.notifier = notifier or _log_notice
        self.gate = ValidationGate(self.session)
        self.input_mode = InputModeController(self.session)
        self.resetter = ResetController(self.session)

    def _notify(self, level: str, message: str) -> None:
        self.notifier(Notice(level=level, message=message))

    def _reject(self, exc: ValidationError) -> OperationOutcome:
        logger.info("Validation failed: %s", exc)
        self._notify("error", str(exc))
        return OperationOutcome.REJECTED

    def _fail(self, prefix: str, exc: TransportError) -> OperationOutcome:
        message = f"{prefix}: {exc}"
        logger.warning(message)
        self._notify("error", message)
        return OperationOutcome.FAILED

    # Field edits

    def set_transcript(self, text: str) -> None:
        self.session.transcript = text

    def set_custom_instruction(self, text: str) -> None:
        self.session.custom_instruction = text

    def edit_summary(self, text: str) -> None:
        self.session.edited_summary_text = text

    def set_recipients(self, raw: str) -> None:
        self.session.recipients_raw = raw

    def set_mode(self, mode: InputMode) -> None:
        self.input_mode.set_mode(mode)

    def select_file(self, file: SelectedFile) -> None:
        self.input_mode.select_file(file)

    def clear_all(self) -> None:
        self.resetter.clear_all()

    def can_clear(self) -> bool:
        return self.resetter.has_content()

    # Backend lanes

    async def process_file(self) -> OperationOutcome:
        session = self.session
        if session.is_processing_file:
            logger.debug("process_file dropped: lane busy")
            return OperationOutcome.BUSY
        try:
            self.gate.check_process_file()
        except ValidationError as exc:
            return self._reject(exc)

        file = session.selected_file
        instruction = session.custom_instruction
        session.is_processing_file = True
        logger.info("Processing file %s", file.name)
        try:
            result = await self.client.upload(file, instruction)
        except TransportError as exc:
            return self._fail("Error processing file", exc)
        else:
            session.summary_text = result.summary
            session.edited_summary_text = result.summary
            session.summary_id = result.summary_id
            session.selected_file = None
            logger.info("File processed, summary id %s", result.summary_id)
            return OperationOutcome.SUCCEEDED
        finally:
            session.is_processing_file = False

    async def generate_summary(self) -> OperationOutcome:
        session = self.session
        if session.is_summarizing_text:
            logger.debug("generate_summary dropped: lane busy")
            return OperationOutcome.BUSY
        try:
            self.gate.check_generate_summary()
        except ValidationError as exc:
            return self._reject(exc)

        transcript = session.transcript
        instruction = session.custom_instruction
        session.is_summarizing_text = True
        logger.info("Generating summary (%d chars)", len(transcript))
        try:
            result = await self.client.summarize(transcript, instruction)
        except TransportError as exc:
            return self._fail("Error generating summary", exc)
        else:
            session.summary_text = result.summary
            session.edited_summary_text = result.summary
            session.summary_id = result.summary_id
            logger.info("Summary generated, summary id %s", result.summary_id)
            return OperationOutcome.SUCCEEDED
        finally:
            session.is_summarizing_text = False

    async def send_email(self) -> OperationOutcome:
        session = self.session
        if session.is_sending_email:
            logger.debug("send_email dropped: lane busy")
            return OperationOutcome.BUSY
        try:
            self.gate.check_send_email()
        except ValidationError as exc:
            return self._reject(exc)

        recipients = parse_recipients(session.recipients_raw)
        session.is_sending_email = True
        logger.info("Sending email to %d recipient(s)", len(recipients))
        try:
            await self.client.send_email(
                session.summary_id, recipients, session.edited_summary_text
            )
        except TransportError as exc:
            return self._fail("Error sending email", exc)
        else:
            session.recipients_raw = ""
            self._notify("info", EMAIL_SENT_MESSAGE)
            return OperationOutcome.SUCCEEDED
        finally:
            session.is_sending_email = False
