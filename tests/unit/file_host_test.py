"""Tests for the document hosts."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from spright_editor.host.file_host import FileDocumentHost, MemoryDocumentHost


class TestFileDocumentHost:
    def test_read_text(self, tmp_path: Path) -> None:
        path = tmp_path / "sprites.conf"
        path.write_text('input "a.png"\n', encoding="utf-8")
        assert FileDocumentHost(path).read_text() == 'input "a.png"\n'

    @pytest.mark.asyncio
    async def test_replace_text(self, tmp_path: Path) -> None:
        path = tmp_path / "sprites.conf"
        path.write_text("old\n", encoding="utf-8")
        host = FileDocumentHost(path)

        await host.replace_text('input "b.png"\r\n  grid 8 8\r\n')

        assert path.read_bytes() == b'input "b.png"\r\n  grid 8 8\r\n'
        assert sorted(p.name for p in tmp_path.iterdir()) == ["sprites.conf"]

    @pytest.mark.asyncio
    async def test_replace_creates_missing_file(self, tmp_path: Path) -> None:
        host = FileDocumentHost(tmp_path / "new.conf")
        await host.replace_text("sheet\n")
        assert host.read_text() == "sheet\n"

    @pytest.mark.asyncio
    async def test_concurrent_replacements_leave_one_whole_document(self, tmp_path: Path) -> None:
        host = FileDocumentHost(tmp_path / "sprites.conf")
        texts = [f"input {i}.png\n" * 50 for i in range(5)]

        await asyncio.gather(*(host.replace_text(t) for t in texts))

        assert host.read_text() in texts
        assert sorted(p.name for p in tmp_path.iterdir()) == ["sprites.conf"]

    @pytest.mark.asyncio
    async def test_missing_directory_raises(self, tmp_path: Path) -> None:
        host = FileDocumentHost(tmp_path / "missing" / "sprites.conf")
        with pytest.raises(OSError):
            await host.replace_text("x")


class TestMemoryDocumentHost:
    @pytest.mark.asyncio
    async def test_replace_text(self, tmp_path: Path) -> None:
        host = MemoryDocumentHost(tmp_path / "sprites.conf", "a")
        await host.replace_text("b")
        assert host.read_text() == "b"
        assert host.replacements == 1
        assert host.path == tmp_path / "sprites.conf"
