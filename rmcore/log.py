"""Logger set-up: a coloured console handler and a file handler."""

from __future__ import annotations

import itertools
import logging
import os
from enum import Enum

TRACE = 5
OFF = logging.CRITICAL + 10
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER_NAME = "rmcore"

_logger_numbers = itertools.count()

_LEVEL_NAMES: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "err": logging.ERROR,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": OFF,
}


class FMT(Enum):
    DEFAULT = "default"
    FILE = "file"
    TEST = "test"
    THREAD = "thread"


_FMT_DEFAULT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
_FORMATS: dict[FMT, str] = {
    FMT.DEFAULT: _FMT_DEFAULT,
    FMT.FILE: (
        "[%(asctime)s] [%(levelname)s] [%(funcName)s] "
        "[%(filename)s:%(lineno)d] %(message)s"
    ),
    FMT.TEST: (
        "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] "
        "\033[34m[%(funcName)s]\033[0m %(message)s"
    ),
    FMT.THREAD: (
        "[%(asctime)s] (id:%(thread)d) [%(levelname)s] "
        "[%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
    ),
}


def to_format_string(fmt: FMT) -> str:
    """The logging format string for a format choice."""
    return _FORMATS.get(fmt, _FMT_DEFAULT)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        try:
            return _LEVEL_NAMES[level.lower()]
        except KeyError:
            raise ValueError(f"unknown log level: {level!r}") from None
    return int(level)


def set_logger(
    path: str | os.PathLike = "log/log.log",
    fmt: FMT = FMT.TEST,
    level: int | str = logging.DEBUG,
) -> logging.Logger:
    """Make the package logger write to the console and to a fresh file at path."""
    numeric_level = _resolve_level(level)
    handle_name = f"handle_{next(_logger_numbers)}"
    fmt_str = to_format_string(fmt)

    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)

    console = logging.StreamHandler()
    console.set_name(f"{handle_name}.console")
    console.setFormatter(logging.Formatter(fmt_str))
    console.setLevel(numeric_level)

    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.set_name(f"{handle_name}.file")
    file_handler.setFormatter(logging.Formatter(_FMT_DEFAULT))
    file_handler.setLevel(numeric_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(console)
    logger.addHandler(file_handler)
    logger.setLevel(numeric_level)

    logger.log(TRACE, "Format code : %s", fmt_str)
    logger.debug("file path : %s", path)
    logger.debug("%s Logger is setted.", handle_name)
    return logger


def get_level_string() -> str:
    """The active level of the package logger, as a lower-case name."""
    level = logging.getLogger(ROOT_LOGGER_NAME).getEffectiveLevel()
    for limit, name in (
        (TRACE, "trace"),
        (logging.DEBUG, "debug"),
        (logging.INFO, "info"),
        (logging.WARNING, "warning"),
        (logging.ERROR, "error"),
        (logging.CRITICAL, "critical"),
    ):
        if level <= limit:
            return name
    return "off"