# src/thematic/logging_utils.py

"""
Logging setup for applications that use this package.

Library modules only call ``logging.getLogger(__name__)``; nothing is printed
until an application configures handlers, for example with::

    from thematic.logging_utils import init_logger
    logger = init_logger(level="DEBUG")

:func:`init_logger` attaches a Rich console handler when stdout is a TTY (a
plain stream handler otherwise) and, optionally, a plain-format file handler.
Calling it again for the same logger returns the cached logger without adding
handlers.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["init_logger", "get_logger", "PACKAGE_LOGGER"]

PACKAGE_LOGGER = "thematic"

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def _is_tty(stream) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _fmt_plain() -> logging.Formatter:
    # timestamp | level | name | message
    return logging.Formatter(fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s", datefmt="%H:%M:%S")


def init_logger(
    file_path: Optional[Union[str, Path]] = None,
    *,
    level: str = "INFO",
    rich: bool = True,
    name: str = PACKAGE_LOGGER,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure `name` (the package logger by default) once.

    Parameters
    ----------
    file_path : str or Path, optional
        Also append plain-format records to this file (parent dirs are created).
    level : str, default "INFO"
    rich : bool, default True
        Use :class:`rich.logging.RichHandler` when stdout is a TTY or an explicit
        `console` is given.
    name : str, default "thematic"
    console : rich.console.Console, optional
        Console for the Rich handler.
    """
    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    lvl = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(lvl)

    if not logger.handlers:
        if rich and (console is not None or _is_tty(sys.stdout)):
            ch = RichHandler(console=console or Console(), show_time=False, show_path=False)
        else:
            ch = logging.StreamHandler(sys.stdout)
            ch.setFormatter(_fmt_plain())
        ch.setLevel(lvl)
        logger.addHandler(ch)

        if file_path:
            path = Path(file_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(path), mode="a", encoding="utf-8")
            fh.setLevel(lvl)
            fh.setFormatter(_fmt_plain())
            logger.addHandler(fh)

    _LOGGER_CACHE[name] = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace (``"ranged"`` -> ``"thematic.ranged"``)."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
