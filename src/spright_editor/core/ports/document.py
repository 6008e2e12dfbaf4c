from pathlib import Path
from typing import Protocol


class DocumentHost(Protocol):
    """Owns the authoritative document text and applies full replacements."""

    @property
    def path(self) -> Path: ...

    def read_text(self) -> str: ...

    async def replace_text(self, text: str) -> None: ...
