from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import ValidationError

from spright_editor.core.diagnostics import DiagnosticsChannel, parse_error_output
from spright_editor.core.document import Document
from spright_editor.core.ports.tool import ToolClient, ToolOperation, ToolSpawnError
from spright_editor.models import Description, SyncState

logger = logging.getLogger(__name__)


class RefreshErrorKind(Enum):
    TOOL_SPAWN_FAILURE = "tool_spawn_failure"
    MALFORMED_DESCRIPTION = "malformed_description"


@dataclass(frozen=True)
class RefreshError:
    kind: RefreshErrorKind
    message: str


def resolve_source_uri(document_path: Path, path: str, filename: str) -> str:
    """Return the file URI of a source image relative to the document's directory."""
    return (document_path.resolve().parent / path / filename).resolve().as_uri()


def _with_source_uris(description: Description, document_path: Path) -> Description:
    sources = [
        source.model_copy(update={"uri": resolve_source_uri(document_path, source.path, source.filename)})
        for source in description.sources
    ]
    return description.model_copy(update={"sources": sources})


async def refresh(document: Document, tool: ToolClient, channel: DiagnosticsChannel) -> SyncState | RefreshError:
    """Run one refresh cycle against a document snapshot.

    Tool-reported errors end up in ``channel``; a spawn failure leaves the
    diagnostics untouched. Failures are returned, never raised.
    """
    try:
        completed = await tool.invoke(ToolOperation.AUTOCOMPLETE, document.path, document.text)
    except ToolSpawnError as exc:
        return RefreshError(RefreshErrorKind.TOOL_SPAWN_FAILURE, str(exc))

    channel.set(parse_error_output(completed.stderr, document))

    try:
        described = await tool.invoke(ToolOperation.DESCRIBE, document.path, completed.stdout)
    except ToolSpawnError as exc:
        return RefreshError(RefreshErrorKind.TOOL_SPAWN_FAILURE, str(exc))

    try:
        description = Description.model_validate_json(described.stdout)
    except ValidationError as exc:
        logger.debug("Rejected description output: %s", exc)
        return RefreshError(RefreshErrorKind.MALFORMED_DESCRIPTION, f"{exc.error_count()} validation error(s)")

    return SyncState(config=completed.stdout, description=_with_source_uris(description, document.path))
