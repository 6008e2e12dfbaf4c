from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from spright_editor.core.diagnostics import DiagnosticsSink
from spright_editor.core.session import EditorSession
from spright_editor.host.file_host import FileDocumentHost
from spright_editor.models import Diagnostic
from spright_editor.settings import get_settle_delay, resolve_binary_path
from spright_editor.tool.subprocess_client import SubprocessToolClient

logger = logging.getLogger(__name__)

console = Console()

DocumentArg = Annotated[
    Path,
    typer.Argument(help="Path to the spright configuration file.", exists=True, dir_okay=False, resolve_path=True),
]
BinaryOpt = Annotated[str | None, typer.Option("--binary", help="spright executable (default: $SPRIGHT_BINARY).")]


def build_session(
    document: Path,
    binary: str | None,
    diagnostics_sink: DiagnosticsSink | None = None,
) -> EditorSession:
    tool = SubprocessToolClient(binary or resolve_binary_path())
    logger.debug("Using spright binary %s", tool.binary)
    return EditorSession(
        FileDocumentHost(document),
        tool,
        diagnostics_sink=diagnostics_sink,
        settle_delay=get_settle_delay(),
    )


def render_diagnostics(path: Path, diagnostics: Sequence[Diagnostic]) -> None:
    if not diagnostics:
        console.print(f"[green]No problems in {path.name}[/green]")
        return
    table = Table(show_lines=False)
    table.add_column("line", justify="right")
    table.add_column("column", justify="right")
    table.add_column("message")
    for d in diagnostics:
        table.add_row(str(d.range.start_line + 1), str(d.range.start_column + 1), d.message)
    console.print(table)
    console.print(f"({len(diagnostics)} problems)")
