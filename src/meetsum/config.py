"""Configuration handling."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional
import yaml

DEFAULT_API_BASE = "https://ai-meeting-summarizer-backend-arx1.onrender.com/api"
DEFAULT_CONFIG_PATH = "meetsum_config.yml"


@dataclass
class GuiConfig:
    default_instruction: str = ""
    upload_types: List[str] = field(
        default_factory=lambda: [".txt", ".doc", ".docx", ".pdf"]
    )


@dataclass
class Config:
    api_base: str = DEFAULT_API_BASE
    request_timeout_s: Optional[float] = None
    log_dir: str = "logs"
    debug_logging: bool = False
    gui: GuiConfig = field(default_factory=GuiConfig)


def load_config(path: str) -> Config:
    if not os.path.exists(path):
        return Config()

    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    gui = GuiConfig(**data.get("gui", {}))
    timeout = data.get("request_timeout_s")

    return Config(
        api_base=data.get("api_base") or DEFAULT_API_BASE,
        request_timeout_s=float(timeout) if timeout is not None else None,
        log_dir=data.get("log_dir", "logs"),
        debug_logging=bool(data.get("debug_logging", False)),
        gui=gui,
    )


def save_config(path: str, config: Config) -> None:
    data = {
        "api_base": config.api_base,
        "request_timeout_s": config.request_timeout_s,
        "log_dir": config.log_dir,
        "debug_logging": config.debug_logging,
        "gui": {
            "default_instruction": config.gui.default_instruction,
            "upload_types": list(config.gui.upload_types),
        },
    }
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)
