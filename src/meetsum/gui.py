"""Tkinter GUI for summarizing and sharing meeting notes."""

from __future__ import annotations

import asyncio
import logging
import queue
import threading
from typing import Optional

from .api_client import BackendClient
from .config import DEFAULT_CONFIG_PATH, Config, load_config
from .logging_utils import setup_logging
from .models import InputMode, Notice, OperationOutcome, SelectedFile
from .orchestrator import WorkflowOrchestrator


def launch_gui(
    config_path: str = DEFAULT_CONFIG_PATH, config: Optional[Config] = None
) -> None:
    import tkinter as tk
    from tkinter import filedialog, messagebox, ttk

    if config is None:
        try:
            config = load_config(config_path)
        except Exception:
            config = Config()

    logger, _log_path = setup_logging(
        log_dir=config.log_dir,
        level=logging.DEBUG if config.debug_logging else logging.INFO,
    )

    def _thread_excepthook(args) -> None:
        logger.exception(
            "Thread exception",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    threading.excepthook = _thread_excepthook

    root = tk.Tk()
    root.title("MeetSum")
    root.configure(bg="#0b0f14")

    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass
    style.configure("TFrame", background="#0b0f14")
    style.configure("TLabel", background="#0b0f14", foreground="#d8e1ff")
    style.configure(
        "Neo.TLabelframe",
        background="#0b0f14",
        foreground="#8bd3ff",
        bordercolor="#0f1a2a",
    )
    style.configure(
        "Neo.TLabelframe.Label", background="#0b0f14", foreground="#8bd3ff"
    )
    style.configure(
        "TButton",
        background="#132033",
        foreground="#e6f1ff",
        borderwidth=1,
        relief="flat",
    )
    style.map(
        "TButton",
        background=[("active", "#1b2a44"), ("disabled", "#0f1a2a")],
        foreground=[("active", "#ffffff"), ("disabled", "#51607a")],
    )
    style.configure(
        "TEntry",
        fieldbackground="#111827",
        foreground="#e6f1ff",
        bordercolor="#1b2a44",
    )
    style.configure("TRadiobutton", background="#0b0f14", foreground="#9ad1ff")

    events: queue.Queue = queue.Queue()

    # Every session mutation runs on this loop's thread.
    loop = asyncio.new_event_loop()
    loop_thread = threading.Thread(target=loop.run_forever, daemon=True)
    loop_thread.start()

    client = BackendClient(config.api_base, timeout=config.request_timeout_s)
    workflow = WorkflowOrchestrator(
        client, notifier=lambda notice: events.put(("notice", notice))
    )
    workflow.set_custom_instruction(config.gui.default_instruction)
    session = workflow.session
    logger.info("GUI started (backend %s)", client.base_url)

    def _submit(fn, *args, sync: bool = False) -> None:
        loop.call_soon_threadsafe(fn, *args)
        loop.call_soon_threadsafe(events.put, ("refresh", sync))

    def _run(name: str, op) -> None:
        async def _tracked():
            task = asyncio.ensure_future(op())
            # One step in, the lane's busy flag is set.
            await asyncio.sleep(0)
            events.put(("refresh", False))
            return await task

        future = asyncio.run_coroutine_threadsafe(_tracked(), loop)
        future.add_done_callback(lambda f: events.put(("done", name, f)))

    def _set_status(text: str) -> None:
        status_var.set(text)
        logger.info(text)

    main = ttk.Frame(root, padding=8)
    main.grid(row=0, column=0, sticky="nsew")
    root.columnconfigure(0, weight=1)
    root.rowconfigure(0, weight=1)
    main.columnconfigure(0, weight=1)

    mode_var = tk.StringVar(value=InputMode.TEXT.value)
    instruction_var = tk.StringVar(value=session.custom_instruction)
    recipients_var = tk.StringVar()
    file_label_var = tk.StringVar(value="Choose a file")
    status_var = tk.StringVar(value="Ready")

    input_frame = ttk.LabelFrame(main, text="1. Input Method", style="Neo.TLabelframe")
    input_frame.grid(row=0, column=0, sticky="nsew", pady=(0, 6))
    input_frame.columnconfigure(0, weight=1)

    tabs = ttk.Frame(input_frame)
    tabs.grid(row=0, column=0, sticky="w")
    ttk.Radiobutton(
        tabs,
        text="Text Input",
        value=InputMode.TEXT.value,
        variable=mode_var,
        command=lambda: _on_mode_change(),
    ).grid(row=0, column=0, padx=(0, 12))
    ttk.Radiobutton(
        tabs,
        text="File Upload",
        value=InputMode.FILE.value,
        variable=mode_var,
        command=lambda: _on_mode_change(),
    ).grid(row=0, column=1)

    text_section = ttk.Frame(input_frame)
    ttk.Label(text_section, text="Paste Meeting Transcript").grid(
        row=0, column=0, sticky="w"
    )
    transcript_box = tk.Text(
        text_section,
        width=80,
        height=10,
        wrap="word",
        bg="#111827",
        fg="#e6f1ff",
        insertbackground="#e6f1ff",
    )
    transcript_box.grid(row=1, column=0, sticky="nsew")
    text_section.columnconfigure(0, weight=1)

    file_section = ttk.Frame(input_frame)
    ttk.Label(file_section, text="Upload Meeting File").grid(
        row=0, column=0, sticky="w"
    )
    choose_btn = ttk.Button(
        file_section, textvariable=file_label_var, command=lambda: _choose_file()
    )
    choose_btn.grid(row=1, column=0, sticky="w", pady=(2, 2))
    file_info = ttk.Label(file_section, text="", foreground="#6aa6ff")
    file_info.grid(row=2, column=0, sticky="w")

    prompt_frame = ttk.LabelFrame(
        main, text="2. Custom Instruction", style="Neo.TLabelframe"
    )
    prompt_frame.grid(row=1, column=0, sticky="ew", pady=(0, 6))
    prompt_frame.columnconfigure(0, weight=1)
    instruction_entry = ttk.Entry(prompt_frame, textvariable=instruction_var)
    instruction_entry.grid(row=0, column=0, sticky="ew")
    ttk.Label(
        prompt_frame,
        text="e.g., Summarize in bullet points for executives",
        foreground="#6aa6ff",
    ).grid(row=1, column=0, sticky="w")

    buttons = ttk.Frame(main)
    buttons.grid(row=2, column=0, sticky="w", pady=(0, 6))
    action_btn = ttk.Button(buttons, command=lambda: _on_action())
    action_btn.grid(row=0, column=0, padx=(0, 6))
    clear_btn = ttk.Button(buttons, text="Clear All", command=lambda: _on_clear())

    summary_frame = ttk.LabelFrame(
        main, text="3. Generated Summary (Editable)", style="Neo.TLabelframe"
    )
    summary_frame.columnconfigure(0, weight=1)
    summary_box = tk.Text(
        summary_frame,
        width=80,
        height=15,
        wrap="word",
        bg="#111827",
        fg="#e6f1ff",
        insertbackground="#e6f1ff",
    )
    summary_box.grid(row=0, column=0, sticky="nsew")

    email_frame = ttk.LabelFrame(
        main, text="4. Share via Email", style="Neo.TLabelframe"
    )
    email_frame.columnconfigure(0, weight=1)
    ttk.Label(
        email_frame,
        text="Enter email addresses (comma-separated)",
        foreground="#6aa6ff",
    ).grid(row=0, column=0, sticky="w")
    recipients_entry = ttk.Entry(email_frame, textvariable=recipients_var)
    recipients_entry.grid(row=1, column=0, sticky="ew", padx=(0, 6))
    send_btn = ttk.Button(email_frame, command=lambda: _on_send())
    send_btn.grid(row=1, column=1)

    ttk.Label(main, textvariable=status_var, foreground="#8bd3ff").grid(
        row=5, column=0, sticky="w", pady=(6, 0)
    )

    def _set_text(box, value: str) -> None:
        if box.get("1.0", "end-1c") != value:
            box.delete("1.0", "end")
            box.insert("1.0", value)

    def _sync_widgets() -> None:
        mode_var.set(session.input_mode.value)
        _set_text(transcript_box, session.transcript)
        if instruction_var.get() != session.custom_instruction:
            instruction_var.set(session.custom_instruction)
        if recipients_var.get() != session.recipients_raw:
            recipients_var.set(session.recipients_raw)
        _set_text(summary_box, session.edited_summary_text)

    def _refresh() -> None:
        text_mode = session.input_mode is InputMode.TEXT
        if text_mode:
            file_section.grid_remove()
            text_section.grid(row=1, column=0, sticky="nsew", pady=(4, 0))
            busy = session.is_summarizing_text
            action_btn.configure(
                text="Generating Summary..." if busy else "Generate Summary"
            )
            enabled = workflow.gate.can_generate_summary()
        else:
            text_section.grid_remove()
            file_section.grid(row=1, column=0, sticky="nsew", pady=(4, 0))
            busy = session.is_processing_file
            action_btn.configure(
                text="Processing File..." if busy else "Upload & Process File"
            )
            enabled = workflow.gate.can_process_file()
        action_btn.state(["!disabled"] if enabled else ["disabled"])

        file_label_var.set(session.file_name or "Choose a file")
        file_info.configure(
            text=f"Selected file: {session.file_name}" if session.file_name else ""
        )

        if workflow.can_clear():
            clear_btn.grid(row=0, column=1)
        else:
            clear_btn.grid_remove()

        if session.summary_text:
            summary_frame.grid(row=3, column=0, sticky="nsew", pady=(0, 6))
            email_frame.grid(row=4, column=0, sticky="ew")
        else:
            summary_frame.grid_remove()
            email_frame.grid_remove()
        send_btn.configure(
            text="Sending Email..." if session.is_sending_email else "Send Email"
        )
        send_btn.state(
            ["!disabled"] if workflow.gate.can_send_email() else ["disabled"]
        )

    def _show_notice(notice: Notice) -> None:
        if notice.level == "error":
            messagebox.showerror("MeetSum", notice.message, parent=root)
        else:
            messagebox.showinfo("MeetSum", notice.message, parent=root)

    def _on_done(name: str, future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error("%s crashed", name, exc_info=exc)
            _set_status(f"{name} failed unexpectedly: {exc}")
            return
        outcome = future.result()
        if outcome is OperationOutcome.SUCCEEDED:
            _set_status(f"{name} done")
            _sync_widgets()
        elif outcome is OperationOutcome.FAILED:
            _set_status(f"{name} failed")
        elif outcome is OperationOutcome.REJECTED:
            _set_status(f"{name} needs more input")

    def _poll_events() -> None:
        while True:
            try:
                item = events.get_nowait()
            except queue.Empty:
                break
            kind = item[0]
            if kind == "notice":
                _show_notice(item[1])
            elif kind == "done":
                _on_done(item[1], item[2])
            elif kind == "refresh" and item[1]:
                _sync_widgets()
            _refresh()
        root.after(100, _poll_events)

    def _on_mode_change() -> None:
        mode = InputMode(mode_var.get())
        logger.info("Input method: %s", mode.value)
        _submit(workflow.set_mode, mode, sync=True)

    def _choose_file() -> None:
        patterns = " ".join(f"*{ext}" for ext in config.gui.upload_types)
        path = filedialog.askopenfilename(
            parent=root,
            title="Upload Meeting File",
            filetypes=[("Meeting files", patterns), ("All files", "*.*")],
        )
        if not path:
            return
        try:
            selected = SelectedFile.from_path(path)
        except OSError as exc:
            messagebox.showerror("MeetSum", f"Could not read file: {exc}", parent=root)
            return
        _submit(workflow.select_file, selected, sync=True)
        _set_status(f"Selected {selected.name}")

    def _on_action() -> None:
        if session.input_mode is InputMode.TEXT:
            _submit(workflow.set_transcript, transcript_box.get("1.0", "end-1c"))
            _set_status("Generating summary...")
            _run("Generate summary", workflow.generate_summary)
        else:
            _set_status("Processing file...")
            _run("Process file", workflow.process_file)

    def _on_send() -> None:
        _submit(workflow.edit_summary, summary_box.get("1.0", "end-1c"))
        _set_status("Sending email...")
        _run("Send email", workflow.send_email)

    def _on_clear() -> None:
        _submit(workflow.clear_all, sync=True)
        _set_status("Cleared")

    def _bind_text_edits(box, setter) -> None:
        def _on_modified(_event=None) -> None:
            if box.edit_modified():
                _submit(setter, box.get("1.0", "end-1c"))
                box.edit_modified(False)

        box.bind("<<Modified>>", _on_modified)

    _bind_text_edits(transcript_box, workflow.set_transcript)
    _bind_text_edits(summary_box, workflow.edit_summary)
    instruction_var.trace_add(
        "write",
        lambda *_: _submit(workflow.set_custom_instruction, instruction_var.get()),
    )
    recipients_var.trace_add(
        "write", lambda *_: _submit(workflow.set_recipients, recipients_var.get())
    )

    def _on_close() -> None:
        logger.info("GUI closing")
        loop.call_soon_threadsafe(loop.stop)
        root.destroy()

    _refresh()
    _poll_events()
    root.protocol("WM_DELETE_WINDOW", _on_close)
    root.mainloop()
