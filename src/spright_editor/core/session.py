from __future__ import annotations

import logging
from typing import assert_never

from spright_editor.core.diagnostics import DiagnosticsChannel, DiagnosticsSink
from spright_editor.core.document import Document
from spright_editor.core.messages import SetConfigMessage, UpdateConfigMessage
from spright_editor.core.ports.document import DocumentHost
from spright_editor.core.ports.presentation import PresentationPort
from spright_editor.core.ports.tool import ToolClient
from spright_editor.core.refresh import RefreshError, refresh
from spright_editor.core.scheduler import DEFAULT_SETTLE_DELAY, UpdateScheduler
from spright_editor.models import SyncState

logger = logging.getLogger(__name__)


class EditorSession:
    """Keep one configuration document and its preview in sync.

    Change notifications go through the scheduler; each cycle snapshots the
    document, runs the tool and, on success, swaps ``state`` and pushes it to
    the presentation layer. A failed cycle keeps the previous state.
    """

    def __init__(
        self,
        host: DocumentHost,
        tool: ToolClient,
        presentation: PresentationPort | None = None,
        diagnostics_sink: DiagnosticsSink | None = None,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ) -> None:
        self._host = host
        self._tool = tool
        self._presentation = presentation
        self.channel = DiagnosticsChannel(host.path, diagnostics_sink)
        self.scheduler = UpdateScheduler(self.refresh_now, settle_delay)
        self.state: SyncState | None = None
        self.last_error: RefreshError | None = None

    @property
    def host(self) -> DocumentHost:
        return self._host

    def attach(self, presentation: PresentationPort) -> None:
        self._presentation = presentation
        if self.state is not None:
            presentation.post_message(self._set_config_message(self.state))

    def notify_changed(self) -> None:
        self.scheduler.notify_changed()

    def snapshot(self) -> Document:
        return Document(self._host.path, self._host.read_text())

    async def refresh_now(self) -> SyncState | RefreshError:
        """Run one refresh cycle immediately, bypassing the scheduler."""
        result = await refresh(self.snapshot(), self._tool, self.channel)
        if isinstance(result, RefreshError):
            self.last_error = result
            logger.warning("Refresh of %s failed (%s): %s", self._host.path.name, result.kind.value, result.message)
            return result
        self.last_error = None
        self.state = result
        if self._presentation is not None:
            self._presentation.post_message(self._set_config_message(result))
        return result

    def set_active(self, active: bool) -> None:
        if active:
            self.channel.show()
        else:
            self.channel.hide()

    async def on_message(self, message: SetConfigMessage | UpdateConfigMessage) -> None:
        match message:
            case UpdateConfigMessage(text=text):
                # The whole document is replaced; no minimal edit is computed.
                await self._host.replace_text(text)
                self.notify_changed()
            case SetConfigMessage():
                logger.debug("Ignoring setConfig sent to the session")
            case _:
                assert_never(message)

    async def close(self) -> None:
        await self.scheduler.close()

    @staticmethod
    def _set_config_message(state: SyncState) -> SetConfigMessage:
        return SetConfigMessage(config=state.config, description=state.description)
