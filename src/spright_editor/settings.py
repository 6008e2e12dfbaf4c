import math
import os
import platform
import shutil
import sys
from pathlib import Path

import typer

from spright_editor.core.scheduler import DEFAULT_SETTLE_DELAY

BINARY_NAME = "spright"
# bundled binaries live in bin/ inside the installed package
PACKAGE_ROOT = Path(__file__).resolve().parent

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
}


def bundled_binary_name() -> str:
    """Name of the platform-specific binary shipped under ``bin/``, e.g. ``spright-linux-x64``."""
    machine = platform.machine().lower()
    arch = _ARCH_ALIASES.get(machine, machine)
    suffix = ".exe" if sys.platform == "win32" else ""
    return f"{BINARY_NAME}-{sys.platform}-{arch}{suffix}"


def resolve_binary_path(root: Path | None = None) -> str:
    configured = os.getenv("SPRIGHT_BINARY")
    if configured:
        return configured
    bundled = (root or PACKAGE_ROOT) / "bin" / bundled_binary_name()
    if bundled.is_file():
        return str(bundled)
    return shutil.which(BINARY_NAME) or BINARY_NAME


def get_settle_delay() -> float:
    value = os.getenv("SPRIGHT_SETTLE_DELAY_MS")
    if not value:
        return DEFAULT_SETTLE_DELAY
    try:
        delay_ms = float(value)
    except ValueError:
        delay_ms = math.nan
    if not math.isfinite(delay_ms) or delay_ms < 0:
        raise typer.BadParameter(
            f"SPRIGHT_SETTLE_DELAY_MS must be a non-negative number of milliseconds, got {value!r}"
        )
    return delay_ms / 1000


def get_log_level_name() -> str:
    return os.getenv("SPRIGHT_EDITOR_LOG_LEVEL", "INFO").upper()
