from typing import Protocol


class FileWatcherPort(Protocol):
    """Reports edits of the watched document until stopped."""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
