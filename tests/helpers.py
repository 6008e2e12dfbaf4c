"""Shared test helpers: a stand-in for the spright process and description builders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from spright_editor.core.ports.tool import ToolOperation, ToolResult, ToolSpawnError


def make_sprite(
    index: int,
    sprite_id: str,
    rect: tuple[float, float, float, float],
    pivot: tuple[float, float] = (0, 0),
    source_index: int = 0,
) -> dict[str, Any]:
    x, y, w, h = rect
    box = {"x": x, "y": y, "w": w, "h": h}
    return {
        "id": sprite_id,
        "index": index,
        "inputSpriteIndex": index,
        "pivot": {"x": pivot[0], "y": pivot[1]},
        "rect": box,
        "trimmedRect": box,
        "rotated": False,
        "sourceIndex": source_index,
        "sourceRect": box,
        "trimmedSourceRect": box,
        "sliceIndex": 0,
        "sliceSpriteIndex": index,
        "data": {},
        "tags": {},
        "vertices": [{"x": x, "y": y}, {"x": x + w, "y": y + h}],
    }


class FakeToolClient:
    """Stands in for the spright process.

    ``autocomplete`` echoes its input (optionally with a suffix) and reports
    ``stderr``; ``describe`` returns ``description``.
    """

    def __init__(
        self,
        description: str = '{"inputs": [], "sources": [], "sprites": []}',
        stderr: str = "",
        autocomplete_suffix: str = "",
    ) -> None:
        self.description = description
        self.stderr = stderr
        self.autocomplete_suffix = autocomplete_suffix
        self.spawn_error: str | None = None
        self.fail_describe_spawn = False
        self.calls: list[tuple[ToolOperation, Path, str]] = []

    async def invoke(self, operation: ToolOperation, document_path: Path, input_text: str) -> ToolResult:
        self.calls.append((operation, document_path, input_text))
        if self.spawn_error is not None:
            raise ToolSpawnError(self.spawn_error)
        if operation is ToolOperation.AUTOCOMPLETE:
            return ToolResult(stdout=input_text + self.autocomplete_suffix, stderr=self.stderr)
        if self.fail_describe_spawn:
            raise ToolSpawnError("describe could not start")
        return ToolResult(stdout=self.description, stderr="")
