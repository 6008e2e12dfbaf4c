"""Map spright's stderr lines back onto document ranges.

Each stderr line is either a bare message or ``<message> in line <N>`` with a
1-based line number. Numbered messages cover the referenced line from its
first non-whitespace character to its end; everything else is pinned to the
start of the document.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from spright_editor.core.document import Document
from spright_editor.models import Diagnostic, LineRange

logger = logging.getLogger(__name__)

LINE_SEPARATOR = " in line "

_LINE_SPLIT = re.compile(r"[\r\n]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_DOCUMENT_START = LineRange(start_line=0, start_column=0, end_line=0, end_column=0)

DiagnosticsSink = Callable[[Path, Sequence[Diagnostic]], None]


def _parse_line_number(suffix: str) -> int | None:
    match = _LEADING_INT.match(suffix)
    if match is None:
        return None
    return int(match.group(1))


def _line_range(document: Document, line_number: int) -> LineRange:
    index = line_number - 1
    last = document.line_count - 1
    if index < 0 or index > last:
        clamped = min(max(index, 0), last)
        logger.warning(
            "Diagnostic line %d outside of %s (%d lines), reporting at line %d",
            line_number,
            document.path.name,
            document.line_count,
            clamped + 1,
        )
        index = clamped
    line = document.line_at(index)
    return LineRange(
        start_line=index,
        start_column=line.first_non_whitespace,
        end_line=index,
        end_column=len(line.text),
    )


def parse_error_output(output: str, document: Document) -> list[Diagnostic]:
    """Turn one stderr blob into the complete diagnostics set for ``document``."""
    diagnostics: list[Diagnostic] = []
    for line in _LINE_SPLIT.split(output):
        if not line:
            continue
        message, separator, suffix = line.partition(LINE_SEPARATOR)
        line_number = _parse_line_number(suffix) if separator else None
        if line_number is None:
            line_range = _DOCUMENT_START
        else:
            line_range = _line_range(document, line_number)
        diagnostics.append(Diagnostic(message=message, range=line_range))
    return diagnostics


class DiagnosticsChannel:
    """Diagnostics of one document, published only while the document is active.

    ``hide()`` drops the published collection entirely and ``show()`` creates
    it anew; ``set()`` always swaps the whole set.
    """

    def __init__(self, path: Path, sink: DiagnosticsSink | None = None) -> None:
        self._path = path
        self._sink = sink
        self._diagnostics: tuple[Diagnostic, ...] = ()
        self._published: tuple[Diagnostic, ...] | None = None

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self._diagnostics

    @property
    def visible(self) -> bool:
        return self._published is not None

    @property
    def published(self) -> tuple[Diagnostic, ...]:
        return self._published or ()

    def set(self, diagnostics: Sequence[Diagnostic]) -> None:
        self._diagnostics = tuple(diagnostics)
        self._publish()

    def show(self) -> None:
        if self._published is None:
            self._published = ()
        self._publish()

    def hide(self) -> None:
        if self._published is None:
            return
        self._published = None
        if self._sink is not None:
            self._sink(self._path, ())

    def _publish(self) -> None:
        if self._published is None:
            return
        self._published = self._diagnostics
        if self._sink is not None:
            self._sink(self._path, self._published)
