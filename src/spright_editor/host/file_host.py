from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class FileDocumentHost:
    """Keep the configuration document in a file on disk.

    Implements the ``DocumentHost`` protocol. Replacements are written to a
    temporary sibling and renamed over the document so readers never see a
    partial file. Writes are serialized.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        return self._path.read_text(encoding="utf-8")

    async def replace_text(self, text: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write, text)
        logger.info("Replaced %s (%d characters)", self._path.name, len(text))

    def _write(self, text: str) -> None:
        fd, temp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(text)
            os.replace(temp_name, self._path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise


class MemoryDocumentHost:
    """In-memory document, used where no file backs the editor."""

    def __init__(self, path: str | Path, text: str = "") -> None:
        self._path = Path(path)
        self.text = text
        self.replacements = 0

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        return self.text

    async def replace_text(self, text: str) -> None:
        self.text = text
        self.replacements += 1
