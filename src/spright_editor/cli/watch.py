import asyncio
import contextlib
import logging

from spright_editor.cli.common import BinaryOpt, DocumentArg, build_session, console, render_diagnostics
from spright_editor.watcher.watchfiles_adapter import WatchfilesWatcher

logger = logging.getLogger(__name__)


def watch(document: DocumentArg, binary: BinaryOpt = None) -> None:
    """Re-run spright whenever the configuration changes and print its problems."""
    session = build_session(document, binary, diagnostics_sink=render_diagnostics)
    session.set_active(True)
    watcher = WatchfilesWatcher(document, session.notify_changed)

    async def _run() -> None:
        await watcher.start()
        session.notify_changed()
        try:
            await asyncio.Event().wait()
        finally:
            await watcher.stop()
            await session.close()

    console.print(f"[green]Watching {document} (Ctrl+C to stop)[/green]")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())
