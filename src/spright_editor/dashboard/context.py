from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from spright_editor.core.session import EditorSession
from spright_editor.presentation.layer import PresentationLayer

_TIMEOUT = 30


@dataclass
class DashboardContext:
    """Everything the Dash callbacks reach into.

    The session lives on ``loop``, which runs in its own thread; Dash worker
    threads hand work over to it instead of touching the session directly.
    """

    session: EditorSession
    presentation: PresentationLayer
    loop: asyncio.AbstractEventLoop

    @property
    def source_root(self) -> Path:
        return self.session.host.path.resolve().parent

    def run_async(self, coro: Coroutine[Any, Any, Any]) -> Any:
        return asyncio.run_coroutine_threadsafe(coro, self.loop).result(timeout=_TIMEOUT)

    def call_soon(self, fn: Callable[..., Any], *args: Any) -> None:
        self.loop.call_soon_threadsafe(fn, *args)


def start_loop_thread() -> asyncio.AbstractEventLoop:
    loop = asyncio.new_event_loop()
    threading.Thread(target=loop.run_forever, daemon=True, name="spright-session").start()
    return loop
