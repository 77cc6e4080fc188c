from meetsum.input_mode import InputModeController
from meetsum.models import InputMode, SelectedFile, Session


def _notes_file() -> SelectedFile:
    return SelectedFile(name="notes.txt", content=b"Alice: hi")


def test_switch_to_text_clears_selected_file():
    session = Session(input_mode=InputMode.FILE, selected_file=_notes_file())
    InputModeController(session).set_mode(InputMode.TEXT)

    assert session.input_mode is InputMode.TEXT
    assert session.selected_file is None
    assert session.file_name == ""


def test_switch_to_file_clears_transcript():
    session = Session(transcript="Meeting notes...")
    InputModeController(session).set_mode(InputMode.FILE)

    assert session.input_mode is InputMode.FILE
    assert session.transcript == ""


def test_repeated_switch_to_same_mode_is_noop():
    session = Session(transcript="Meeting notes...", custom_instruction="Bullets")
    controller = InputModeController(session)
    controller.set_mode(InputMode.TEXT)
    controller.set_mode(InputMode.TEXT)

    assert session.transcript == "Meeting notes..."
    assert session == Session(transcript="Meeting notes...", custom_instruction="Bullets")


def test_set_mode_accepts_string_value():
    session = Session(transcript="x")
    InputModeController(session).set_mode("file")

    assert session.input_mode is InputMode.FILE
    assert session.transcript == ""


def test_select_file_clears_transcript_even_in_text_mode():
    session = Session(transcript="typed text")
    InputModeController(session).select_file(_notes_file())

    assert session.input_mode is InputMode.TEXT
    assert session.transcript == ""
    assert session.file_name == "notes.txt"


def test_selected_file_content_type():
    assert SelectedFile("notes.txt", b"").content_type == "text/plain"
    assert SelectedFile("minutes.pdf", b"").content_type == "application/pdf"
    assert SelectedFile("blob", b"").content_type == "application/octet-stream"
