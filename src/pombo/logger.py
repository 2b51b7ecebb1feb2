"""Console logging for the game."""

from __future__ import annotations

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """
    Compact one-line format for terminal display.

    Records logged with extra={"session": engine.session_context()} get a
    "[phase f<frame> s<score>]" tag so a game-over line shows where it happened.
    """

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("pombo.", "")
        session = getattr(record, "session", None)
        tag = ""
        if session:
            tag = f" [{session['phase']} f{session['frame']} s{session['score']}]"
        return f"{color}{ts} [{record.levelname[0]}]{tag} {name}: {record.getMessage()}{self.RESET}"


def setup_logging(level: str = "info") -> None:
    """Configure the pombo root logger."""
    root = logging.getLogger("pombo")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    root.propagate = False
