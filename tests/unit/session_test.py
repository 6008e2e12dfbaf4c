"""Tests for the editor session tying document, tool and presentation together."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from spright_editor.core.messages import SetConfigMessage, UpdateConfigMessage
from spright_editor.core.refresh import RefreshError
from spright_editor.core.scheduler import SchedulerState
from spright_editor.core.session import EditorSession
from spright_editor.host.file_host import MemoryDocumentHost
from spright_editor.models import Diagnostic, SyncState
from tests.helpers import FakeToolClient


def _session(
    host: MemoryDocumentHost,
    tool: FakeToolClient,
    presentation: MagicMock | None = None,
    sink: MagicMock | None = None,
) -> EditorSession:
    return EditorSession(host, tool, presentation=presentation, diagnostics_sink=sink, settle_delay=0)


class TestRefreshNow:
    @pytest.mark.asyncio
    async def test_success_posts_set_config(self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient) -> None:
        presentation = MagicMock()
        session = _session(memory_host, fake_tool, presentation)

        result = await session.refresh_now()

        assert isinstance(result, SyncState)
        assert session.state is result
        presentation.post_message.assert_called_once()
        message = presentation.post_message.call_args[0][0]
        assert isinstance(message, SetConfigMessage)
        assert message.config == memory_host.text
        assert message.description.sources[0].uri.startswith("file://")

    @pytest.mark.asyncio
    async def test_malformed_description_keeps_previous_state(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        presentation = MagicMock()
        session = _session(memory_host, fake_tool, presentation)
        first = await session.refresh_now()

        fake_tool.description = "]]"
        memory_host.text = 'input "other.png"\n'
        result = await session.refresh_now()

        assert isinstance(result, RefreshError)
        assert session.state is first
        assert session.last_error is result
        assert presentation.post_message.call_count == 1

    @pytest.mark.asyncio
    async def test_spawn_failure_keeps_previous_state(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        session = _session(memory_host, fake_tool)
        first = await session.refresh_now()
        fake_tool.spawn_error = "missing binary"

        result = await session.refresh_now()

        assert isinstance(result, RefreshError)
        assert session.state is first

    @pytest.mark.asyncio
    async def test_recovers_after_failure(self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient) -> None:
        session = _session(memory_host, fake_tool)
        fake_tool.spawn_error = "missing binary"
        await session.refresh_now()
        fake_tool.spawn_error = None

        result = await session.refresh_now()
        assert isinstance(result, SyncState)
        assert session.last_error is None


class TestScheduledRefresh:
    @pytest.mark.asyncio
    async def test_final_state_reflects_last_edit(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        session = _session(memory_host, fake_tool)
        session.notify_changed()
        for i in range(5):
            memory_host.text = f'input "frame{i}.png"\n'
            session.notify_changed()
            await asyncio.sleep(0)
        await session.scheduler.wait_idle()

        assert session.state is not None
        assert session.state.config == 'input "frame4.png"\n'
        assert session.scheduler.state is SchedulerState.IDLE

    @pytest.mark.asyncio
    async def test_no_overlapping_tool_invocations(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        in_flight = 0
        max_in_flight = 0
        original_invoke = fake_tool.invoke

        async def slow_invoke(*args: object) -> object:
            nonlocal in_flight, max_in_flight
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(0.01)
            try:
                return await original_invoke(*args)  # type: ignore[arg-type]
            finally:
                in_flight -= 1

        fake_tool.invoke = slow_invoke  # type: ignore[method-assign]
        session = _session(memory_host, fake_tool)
        for _ in range(3):
            session.notify_changed()
            await asyncio.sleep(0.005)
        await session.scheduler.wait_idle()

        assert max_in_flight == 1


class TestFocus:
    @pytest.mark.asyncio
    async def test_diagnostics_shown_only_while_active(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        sink = MagicMock()
        session = _session(memory_host, fake_tool, sink=sink)
        fake_tool.stderr = "broken in line 1"
        await session.refresh_now()
        sink.assert_not_called()

        session.set_active(True)
        path, published = sink.call_args[0]
        assert path == memory_host.path
        assert [d.message for d in published] == ["broken"]

        session.set_active(False)
        assert tuple(sink.call_args[0][1]) == ()
        assert not session.channel.visible

    @pytest.mark.asyncio
    async def test_refresh_while_active_republishes(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        published: list[tuple[Diagnostic, ...]] = []
        session = _session(memory_host, fake_tool, sink=lambda _p, d: published.append(tuple(d)))
        session.set_active(True)
        fake_tool.stderr = "one"
        await session.refresh_now()
        fake_tool.stderr = ""
        await session.refresh_now()
        assert [len(p) for p in published] == [0, 1, 0]


class TestMessages:
    @pytest.mark.asyncio
    async def test_update_config_replaces_document_and_refreshes(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        session = _session(memory_host, fake_tool)
        await session.on_message(UpdateConfigMessage(text='input "new.png"\n'))

        assert memory_host.text == 'input "new.png"\n'
        assert memory_host.replacements == 1
        await session.scheduler.wait_idle()
        assert session.state is not None
        assert session.state.config == 'input "new.png"\n'

    @pytest.mark.asyncio
    async def test_set_config_is_ignored(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient, description_json: str
    ) -> None:
        session = _session(memory_host, fake_tool)
        message = SetConfigMessage.model_validate_json(
            '{"type": "setConfig", "config": "x", "description": ' + description_json + "}"
        )
        await session.on_message(message)
        assert memory_host.replacements == 0
        assert fake_tool.calls == []

    @pytest.mark.asyncio
    async def test_attach_pushes_current_state(
        self, memory_host: MemoryDocumentHost, fake_tool: FakeToolClient
    ) -> None:
        session = _session(memory_host, fake_tool)
        await session.refresh_now()
        presentation = MagicMock()
        session.attach(presentation)
        presentation.post_message.assert_called_once()
