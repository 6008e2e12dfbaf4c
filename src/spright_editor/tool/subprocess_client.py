from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path

from spright_editor.core.ports.tool import ToolOperation, ToolResult, ToolSpawnError

logger = logging.getLogger(__name__)


class SubprocessToolClient:
    """Run ``<binary> <operation> <document>`` with the input text on stdin.

    Implements the ``ToolClient`` protocol. Tool errors arrive on stderr and
    are returned as text; only a failure to start the process raises.
    """

    def __init__(self, binary: str | Path) -> None:
        self._binary = str(binary)

    @property
    def binary(self) -> str:
        return self._binary

    async def invoke(self, operation: ToolOperation, document_path: Path, input_text: str) -> ToolResult:
        try:
            proc = await asyncio.create_subprocess_exec(
                self._binary,
                operation.value,
                str(document_path),
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ToolSpawnError(f"Failed to start {self._binary}: {exc}") from exc

        try:
            stdout, stderr = await proc.communicate(input_text.encode("utf-8"))
        except asyncio.CancelledError:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            raise
        if proc.returncode != 0:
            logger.debug("%s %s exited with %s", self._binary, operation.value, proc.returncode)
        return ToolResult(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
