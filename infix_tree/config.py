from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def repo_root() -> Path:
    # Project root is the directory that contains the `infix_tree/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def parse_log_level(value: str) -> int:
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}: {value!r}")
    return logging.getLevelName(name)


@dataclass(frozen=True)
class ToolSettings:
    log_level: str

    @property
    def log_level_number(self) -> int:
        return parse_log_level(self.log_level)


def load_settings() -> ToolSettings:
    load_env()
    raw = os.getenv("INFIX_TREE_LOG_LEVEL") or "WARNING"
    parse_log_level(raw)
    return ToolSettings(log_level=raw.strip().upper())
