import asyncio
from typing import Annotated

import typer

from spright_editor.cli.common import BinaryOpt, DocumentArg, build_session, console
from spright_editor.core.session import EditorSession
from spright_editor.watcher.watchfiles_adapter import WatchfilesWatcher


async def _start(session: EditorSession, watcher: WatchfilesWatcher) -> None:
    await watcher.start()
    session.notify_changed()


def serve(
    document: DocumentArg,
    binary: BinaryOpt = None,
    host: Annotated[str, typer.Option(help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8050,
) -> None:
    """Start the preview dashboard for a configuration."""
    from spright_editor.dashboard.app import create_dashboard
    from spright_editor.dashboard.context import start_loop_thread

    loop = start_loop_thread()
    session = build_session(document, binary)
    watcher = WatchfilesWatcher(document, session.notify_changed)
    asyncio.run_coroutine_threadsafe(_start(session, watcher), loop).result(timeout=30)

    app = create_dashboard(session, loop)
    console.print(f"[green]Starting preview of {document.name} on http://{host}:{port}[/green]")
    try:
        app.run(host=host, port=port)
    finally:
        asyncio.run_coroutine_threadsafe(watcher.stop(), loop).result(timeout=30)
        asyncio.run_coroutine_threadsafe(session.close(), loop).result(timeout=30)
        loop.call_soon_threadsafe(loop.stop)
