"""Logging helpers for the zipf-sampler CLI."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_logging(level: int | str = logging.INFO, log_paths: list[str] | None = None) -> None:
    """
    Configure default logging if no handlers are present.

    When handlers already exist (embedding application, pytest) only the root
    level is adjusted.
    """
    resolved = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    for entry in log_paths or []:
        path = Path(entry)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
