import pytest

from meetsum.errors import ValidationError
from meetsum.models import SelectedFile, Session
from meetsum.validation import (
    GENERATE_SUMMARY_MESSAGE,
    PROCESS_FILE_MESSAGE,
    SEND_EMAIL_MESSAGE,
    ValidationGate,
)


@pytest.mark.parametrize(
    "selected, instruction, ok",
    [
        (SelectedFile("a.txt", b"x"), "Bullets", True),
        (SelectedFile("a.txt", b"x"), "   ", False),
        (None, "Bullets", False),
        (None, "", False),
    ],
)
def test_process_file_precondition(selected, instruction, ok):
    gate = ValidationGate(Session(selected_file=selected, custom_instruction=instruction))
    if ok:
        gate.check_process_file()
    else:
        with pytest.raises(ValidationError, match=PROCESS_FILE_MESSAGE):
            gate.check_process_file()
    assert gate.can_process_file() is ok


def test_generate_summary_requires_transcript_and_instruction():
    gate = ValidationGate(Session(transcript=" \n", custom_instruction="Bullets"))
    with pytest.raises(ValidationError) as excinfo:
        gate.check_generate_summary()
    assert str(excinfo.value) == GENERATE_SUMMARY_MESSAGE

    gate.session.transcript = "Meeting notes..."
    gate.check_generate_summary()
    assert gate.can_generate_summary()


def test_send_email_requires_summary_and_recipients():
    gate = ValidationGate(Session(edited_summary_text="- point 1", recipients_raw=" "))
    with pytest.raises(ValidationError, match=SEND_EMAIL_MESSAGE):
        gate.check_send_email()

    gate.session.recipients_raw = "a@x.com"
    gate.check_send_email()


def test_busy_lane_disables_trigger():
    session = Session(transcript="notes", custom_instruction="Bullets")
    gate = ValidationGate(session)
    assert gate.can_generate_summary()

    session.is_summarizing_text = True
    assert not gate.can_generate_summary()

    session.is_sending_email = True
    assert not gate.can_send_email()


def test_send_trigger_enabled_without_input():
    assert ValidationGate(Session()).can_send_email()
