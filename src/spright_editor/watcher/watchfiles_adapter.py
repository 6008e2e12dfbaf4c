from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from pathlib import Path

from watchfiles import awatch

logger = logging.getLogger(__name__)


class WatchfilesWatcher:
    """Watch one document file and call ``on_change`` whenever it is written.

    Implements the ``FileWatcherPort`` protocol. The parent directory is
    watched so that atomic replacements (write + rename) are still seen.
    """

    def __init__(self, document_path: str | Path, on_change: Callable[[], None]) -> None:
        self._document_path = Path(document_path).resolve()
        self._on_change = on_change
        self._task: asyncio.Task[None] | None = None

    def _is_document(self, path: str) -> bool:
        return Path(path).resolve() == self._document_path

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._document_path)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._document_path)

    async def _watch(self) -> None:
        async for changes in awatch(self._document_path.parent):
            if any(self._is_document(p) for _, p in changes):
                logger.debug("Detected change in %s", self._document_path.name)
                try:
                    self._on_change()
                except Exception:
                    logger.exception("Error in watcher callback")
