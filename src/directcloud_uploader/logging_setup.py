"""Logging configuration, with GitHub Actions workflow commands when running in CI."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TextIO

PACKAGE_LOGGER = "directcloud_uploader"

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ActionsFormatter(logging.Formatter):
    """Render warnings and errors as GitHub Actions annotations."""

    COMMANDS = {
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        # Workflow commands are single-line
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def running_in_actions(environ: Mapping[str, str] | None = None) -> bool:
    if environ is None:
        environ = os.environ
    return environ.get("GITHUB_ACTIONS") == "true"


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    if running_in_actions():
        handler.setFormatter(ActionsFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
