"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .api_client import BackendClient
from .config import DEFAULT_CONFIG_PATH, load_config, save_config
from .logging_utils import setup_logging
from .models import InputMode, Notice, OperationOutcome, SelectedFile, Session
from .orchestrator import WorkflowOrchestrator


def _print_notice(notice: Notice) -> None:
    stream = sys.stderr if notice.level == "error" else sys.stdout
    print(notice.message, file=stream)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _write_summary(session: Session, out_path: str | None) -> None:
    if out_path:
        with open(out_path, "w", encoding="utf-8") as handle:
            handle.write(session.summary_text)
        print(f"Wrote {out_path}")
    else:
        print(session.summary_text)
    print(f"Summary id: {session.summary_id}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="meetsum")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Config.")
    parser.add_argument("--api-base", help="Override the backend base URL.")
    sub = parser.add_subparsers(dest="command")

    summarize_cmd = sub.add_parser("summarize")
    source = summarize_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Transcript text.")
    source.add_argument("--transcript-file", help="Read transcript from a file.")
    summarize_cmd.add_argument("--prompt", default="", help="Custom instruction.")
    summarize_cmd.add_argument("--out", help="Write the summary to a file.")

    upload_cmd = sub.add_parser("upload")
    upload_cmd.add_argument("path", help="Transcript file (.txt, .doc, .docx, .pdf).")
    upload_cmd.add_argument("--prompt", default="", help="Custom instruction.")
    upload_cmd.add_argument("--out", help="Write the summary to a file.")

    email_cmd = sub.add_parser("email")
    email_cmd.add_argument("--summary-id", default="", help="Summary identifier.")
    email_cmd.add_argument(
        "--recipients", default="", help="Comma-separated email addresses."
    )
    body = email_cmd.add_mutually_exclusive_group(required=True)
    body.add_argument("--summary", help="Summary text to send.")
    body.add_argument("--summary-file", help="Read the summary from a file.")

    config_cmd = sub.add_parser("config")
    config_cmd.add_argument(
        "--write", action="store_true", help="Save the effective config."
    )
    sub.add_parser("gui")

    args = parser.parse_args(argv)
    config = load_config(args.config)
    if args.api_base:
        config.api_base = args.api_base

    if args.command == "config":
        print(f"api_base: {config.api_base}")
        print(f"request_timeout_s: {config.request_timeout_s}")
        print(f"log_dir: {config.log_dir}")
        print(f"debug_logging: {config.debug_logging}")
        if args.write:
            save_config(args.config, config)
            print(f"Wrote {args.config}")
        return 0

    if args.command == "gui":
        from .gui import launch_gui

        launch_gui(config_path=args.config, config=config)
        return 0

    if args.command not in ("summarize", "upload", "email"):
        parser.print_help()
        return 0

    setup_logging(
        log_dir=config.log_dir,
        level=logging.DEBUG if config.debug_logging else logging.INFO,
    )
    client = BackendClient(config.api_base, timeout=config.request_timeout_s)
    workflow = WorkflowOrchestrator(client, notifier=_print_notice)

    if args.command == "summarize":
        text = args.text if args.text is not None else _read_text(args.transcript_file)
        workflow.set_transcript(text)
        workflow.set_custom_instruction(args.prompt)
        outcome = asyncio.run(workflow.generate_summary())
        if outcome is OperationOutcome.SUCCEEDED:
            _write_summary(workflow.session, args.out)
            return 0
        return 1

    if args.command == "upload":
        workflow.set_mode(InputMode.FILE)
        workflow.select_file(SelectedFile.from_path(args.path))
        workflow.set_custom_instruction(args.prompt)
        outcome = asyncio.run(workflow.process_file())
        if outcome is OperationOutcome.SUCCEEDED:
            _write_summary(workflow.session, args.out)
            return 0
        return 1

    summary = args.summary if args.summary is not None else _read_text(args.summary_file)
    workflow.session.summary_id = args.summary_id
    workflow.session.summary_text = summary
    workflow.edit_summary(summary)
    workflow.set_recipients(args.recipients)
    outcome = asyncio.run(workflow.send_email())
    return 0 if outcome is OperationOutcome.SUCCEEDED else 1


if __name__ == "__main__":
    raise SystemExit(main())
