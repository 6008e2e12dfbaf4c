import re
from dataclasses import dataclass, field
from pathlib import Path

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class TextLine:
    number: int
    text: str

    @property
    def first_non_whitespace(self) -> int:
        stripped = self.text.lstrip()
        if not stripped:
            return len(self.text)
        return len(self.text) - len(stripped)


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of the configuration document taken at the start of a cycle."""

    path: Path
    text: str
    _lines: list[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", _LINE_BREAK.split(self.text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, number: int) -> TextLine:
        return TextLine(number, self._lines[number])

    @property
    def directory(self) -> Path:
        return self.path.resolve().parent
