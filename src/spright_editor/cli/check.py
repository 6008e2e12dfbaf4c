import asyncio
import json
from typing import Annotated

import typer
from rich.table import Table

from spright_editor.cli.common import BinaryOpt, DocumentArg, build_session, console, render_diagnostics
from spright_editor.core.refresh import RefreshError
from spright_editor.core.session import EditorSession
from spright_editor.models import SyncState


async def _refresh(session: EditorSession) -> SyncState | RefreshError:
    try:
        return await session.refresh_now()
    finally:
        await session.close()


def _refresh_or_exit(session: EditorSession) -> SyncState:
    result = asyncio.run(_refresh(session))
    if isinstance(result, RefreshError):
        console.print(f"[red]Refresh failed ({result.kind.value}):[/red] {result.message}")
        raise typer.Exit(1)
    return result


def check(document: DocumentArg, binary: BinaryOpt = None) -> None:
    """Run spright on a configuration and list its problems."""
    session = build_session(document, binary)
    _refresh_or_exit(session)
    diagnostics = session.channel.diagnostics
    render_diagnostics(document, diagnostics)
    if diagnostics:
        raise typer.Exit(1)


def describe(
    document: DocumentArg,
    binary: BinaryOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the resolved description as JSON.")] = False,
) -> None:
    """Print the inputs, sources and sprites spright derives from a configuration."""
    session = build_session(document, binary)
    state = _refresh_or_exit(session)
    description = state.description

    if as_json:
        console.print_json(json.dumps(description.model_dump(by_alias=True)))
        return

    table = Table(show_lines=False)
    table.add_column("input")
    table.add_column("source")
    table.add_column("size", justify="right")
    table.add_column("sprites", justify="right")
    for input_ in description.inputs:
        for index in input_.source_indices:
            source = description.sources[index]
            table.add_row(
                input_.filename,
                source.filename,
                f"{source.width}x{source.height}",
                str(len(source.sprite_indices)),
            )
    console.print(table)
    console.print(f"({len(description.sprites)} sprites)")
