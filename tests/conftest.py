"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from spright_editor.core.document import Document
from spright_editor.host.file_host import MemoryDocumentHost
from tests.helpers import FakeToolClient, make_sprite

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_TESTS_ROOT)
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def description_payload() -> dict[str, Any]:
    return {
        "inputs": [
            {"filename": "hero.png", "sourceIndices": [0]},
            {"filename": "tiles/*.png", "sourceIndices": [1, 2]},
        ],
        "sources": [
            {
                "index": 0,
                "filename": "hero.png",
                "path": "images",
                "width": 64,
                "height": 32,
                "spriteIndices": [0, 1],
            },
            {"index": 1, "filename": "tiles/grass.png", "path": "", "width": 16, "height": 16, "spriteIndices": [2]},
            {"index": 2, "filename": "tiles/water.png", "path": "", "width": 16, "height": 16, "spriteIndices": []},
        ],
        "sprites": [
            make_sprite(0, "hero_idle", (2, 1, 12, 14), pivot=(6, 14)),
            make_sprite(1, "hero_walk", (18, 0, 12, 16), pivot=(6, 16)),
            make_sprite(2, "grass", (0, 0, 16, 16), pivot=(8, 8), source_index=1),
        ],
    }


@pytest.fixture
def description_json(description_payload: dict[str, Any]) -> str:
    return json.dumps(description_payload)


@pytest.fixture
def fake_tool(description_json: str) -> FakeToolClient:
    return FakeToolClient(description=description_json)


@pytest.fixture
def config_text() -> str:
    return 'input "hero.png"\n  grid 16 16\ninput "tiles/*.png"\n'


@pytest.fixture
def memory_host(tmp_path: Path, config_text: str) -> MemoryDocumentHost:
    return MemoryDocumentHost(tmp_path / "sprites.conf", config_text)


@pytest.fixture
def five_line_document(tmp_path: Path) -> Document:
    text = 'sheet "sprites"\n  input "a.png"\n  foo: bar\n  output "out.png"\n# end'
    return Document(tmp_path / "sprites.conf", text)
