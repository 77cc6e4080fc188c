from unittest.mock import AsyncMock, patch

import pytest

from meetsum.cli import main
from meetsum.errors import TransportError
from meetsum.models import SummaryResult


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_summarize_prints_summary_and_id(capsys):
    with patch(
        "meetsum.api_client.BackendClient.summarize",
        new_callable=AsyncMock,
        return_value=SummaryResult("- point 1", "abc123"),
    ) as summarize:
        code = main(["summarize", "--text", "Meeting notes...", "--prompt", "Bullets"])

    assert code == 0
    summarize.assert_awaited_once_with("Meeting notes...", "Bullets")
    out = capsys.readouterr().out
    assert "- point 1" in out
    assert "Summary id: abc123" in out


def test_summarize_without_prompt_is_rejected(capsys):
    with patch(
        "meetsum.api_client.BackendClient.summarize", new_callable=AsyncMock
    ) as summarize:
        code = main(["summarize", "--text", "Meeting notes..."])

    assert code == 1
    summarize.assert_not_awaited()
    assert "Please provide both transcript and custom instruction" in capsys.readouterr().err


def test_upload_writes_summary_file(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("Alice: ship Friday", encoding="utf-8")
    out_path = tmp_path / "summary.md"

    with patch(
        "meetsum.api_client.BackendClient.upload",
        new_callable=AsyncMock,
        return_value=SummaryResult("- ship Friday", "f1"),
    ) as upload:
        code = main(
            ["upload", str(source), "--prompt", "Bullets", "--out", str(out_path)]
        )

    assert code == 0
    sent_file, prompt = upload.await_args.args
    assert sent_file.name == "notes.txt"
    assert sent_file.content == b"Alice: ship Friday"
    assert prompt == "Bullets"
    assert out_path.read_text(encoding="utf-8") == "- ship Friday"


def test_email_failure_reports_error(capsys):
    with patch(
        "meetsum.api_client.BackendClient.send_email",
        new_callable=AsyncMock,
        side_effect=TransportError("Request failed with status code 502"),
    ):
        code = main(
            [
                "email",
                "--summary-id",
                "abc123",
                "--recipients",
                "a@x.com, b@y.com",
                "--summary",
                "- point 1",
            ]
        )

    assert code == 1
    assert (
        "Error sending email: Request failed with status code 502"
        in capsys.readouterr().err
    )


def test_email_success(capsys):
    with patch(
        "meetsum.api_client.BackendClient.send_email", new_callable=AsyncMock
    ) as send:
        code = main(
            ["email", "--summary-id", "abc123", "--recipients", "a@x.com", "--summary", "hi"]
        )

    assert code == 0
    send.assert_awaited_once_with("abc123", ["a@x.com"], "hi")
    assert "Email sent successfully!" in capsys.readouterr().out


def test_config_write(tmp_path, capsys):
    path = tmp_path / "meetsum_config.yml"
    code = main(
        ["--config", str(path), "--api-base", "http://localhost:5000/api", "config", "--write"]
    )

    assert code == 0
    assert path.exists()
    assert "api_base: http://localhost:5000/api" in path.read_text(encoding="utf-8")
