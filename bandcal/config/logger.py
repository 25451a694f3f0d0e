"""Centralized logger for bandcal.

Lines are built as rich ``Text`` rather than markup strings, so contexts
like ``repo.member`` and values containing brackets print verbatim.
"""

from datetime import datetime
from typing import Any

from rich.console import Console
from rich.text import Text

from .env import get_log_level

console = Console(stderr=True)

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
LEVEL_STYLES = {"debug": "dim", "info": "cyan", "warn": "yellow", "error": "red bold"}

# Context tags are colored by their first dotted segment: repo.member -> repo.
CONTEXT_STYLES = {"repo": "blue", "consolidation": "magenta", "tools": "green"}

MAX_VALUE_LENGTH = 150

_current_level = LEVELS.get(get_log_level(), 10)


def _should_log(level: str) -> bool:
    return LEVELS.get(level, 0) >= _current_level


def _context_style(context: str) -> str:
    return CONTEXT_STYLES.get(context.split(".", 1)[0], "white")


def _format_value(value: Any) -> str:
    s = "None" if value is None else str(value)
    if len(s) > MAX_VALUE_LENGTH:
        return s[:MAX_VALUE_LENGTH] + "..."
    return s


def format_line(level: str, context: str, message: str, **data) -> Text:
    """Builds one log line: time, level, [context], message and key=value pairs."""
    line = Text()
    line.append(datetime.now().strftime("%H:%M:%S.%f")[:-3], style="dim")
    line.append(" ")
    line.append(level.upper().ljust(5), style=LEVEL_STYLES.get(level, "white"))
    line.append(" ")
    line.append(f"[{context}]", style=_context_style(context))
    line.append(" ")
    line.append(message)
    if data:
        line.append(" | " + ", ".join(f"{k}={_format_value(v)}" for k, v in data.items()))
    return line


def log(level: str, context: str, message: str, **data):
    if not _should_log(level):
        return
    console.print(format_line(level, context, message, **data), highlight=False)


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
