"""Logging configuration for the command line entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from spright_editor.settings import get_log_level_name

console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Install a single Rich handler on the root logger."""
    root_logger = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
    level = logging.DEBUG if verbose else getattr(logging, get_log_level_name(), logging.INFO)
    root_logger.setLevel(level)
