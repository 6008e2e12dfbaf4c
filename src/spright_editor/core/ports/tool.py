from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Protocol


class ToolOperation(StrEnum):
    AUTOCOMPLETE = "autocomplete"
    DESCRIBE = "describe"


@dataclass(frozen=True)
class ToolResult:
    stdout: str
    stderr: str


class ToolSpawnError(Exception):
    """The external tool process could not be started."""


class ToolClient(Protocol):
    async def invoke(self, operation: ToolOperation, document_path: Path, input_text: str) -> ToolResult: ...
