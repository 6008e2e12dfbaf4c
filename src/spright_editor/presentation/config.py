"""Structured model of spright's indentation-scoped configuration text.

::

    sheet "sprites"
      input "characters/*.png"
        grid 16 16   # comment
      output "sheet.png"

Every non-blank line is a keyword followed by bare or double-quoted
arguments; deeper indentation opens a scope below the previous line.

``to_text`` re-indents and normalizes spacing but keeps what the user wrote:
comments stay attached to the definition they precede or follow, and quoted
arguments stay quoted.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_KEYWORD = re.compile(r"[A-Za-z_][-A-Za-z0-9_]*\Z")
_BARE_ARGUMENT = re.compile(r"\S+\Z")
_INDENT = "  "
_COMMENT_GAP = "  "


class ConfigParseError(ValueError):
    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"{message} in line {line_number}")
        self.line_number = line_number


@dataclass
class Definition:
    keyword: str
    arguments: list[str] = field(default_factory=list)
    children: list[Definition] = field(default_factory=list)
    line_number: int = 0
    # full-line comments directly above, and the comment ending the line
    leading_comments: list[str] = field(default_factory=list)
    comment: str | None = None
    quoted: list[bool] = field(default_factory=list, compare=False, repr=False)
    indent: int = field(default=0, compare=False, repr=False)

    def rendered_arguments(self) -> list[str]:
        quoted = self.quoted + [False] * (len(self.arguments) - len(self.quoted))
        return [_quote(a, q) for a, q in zip(self.arguments, quoted)]


@dataclass(frozen=True)
class _Token:
    text: str
    quoted: bool


def _tokenize(line: str, line_number: int) -> tuple[list[_Token], str | None]:
    tokens: list[_Token] = []
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char.isspace():
            i += 1
        elif char == "#":
            return tokens, line[i:].rstrip()
        elif char == '"':
            end = line.find('"', i + 1)
            if end < 0:
                raise ConfigParseError("unterminated string", line_number)
            tokens.append(_Token(line[i + 1 : end], quoted=True))
            i = end + 1
        else:
            start = i
            while i < length and not line[i].isspace() and line[i] != "#":
                i += 1
            tokens.append(_Token(line[start:i], quoted=False))
    return tokens, None


def _quote(argument: str, quoted: bool = False) -> str:
    if quoted:
        return f'"{argument}"'
    if argument and _BARE_ARGUMENT.match(argument) and '"' not in argument and "#" not in argument:
        return argument
    return f'"{argument}"'


@dataclass
class SpriteConfig:
    definitions: list[Definition] = field(default_factory=list)
    # comments after the last definition
    trailing_comments: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> SpriteConfig:
        root = Definition(keyword="")
        # (indent, definition) pairs of the open scopes, outermost first
        scopes: list[tuple[int, Definition]] = [(-1, root)]
        pending_comments: list[str] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            tokens, comment = _tokenize(line, line_number)
            if not tokens:
                if comment is not None:
                    pending_comments.append(comment)
                continue
            keyword, *arguments = tokens
            if not _KEYWORD.match(keyword.text):
                raise ConfigParseError(f"invalid keyword '{keyword.text}'", line_number)
            indent = len(line) - len(line.lstrip())
            while indent <= scopes[-1][0]:
                scopes.pop()
            parent = scopes[-1][1]
            if parent.children and indent != parent.children[0].indent:
                raise ConfigParseError("inconsistent indentation", line_number)
            definition = Definition(
                keyword.text,
                [a.text for a in arguments],
                line_number=line_number,
                leading_comments=pending_comments,
                comment=comment,
                quoted=[a.quoted for a in arguments],
                indent=indent,
            )
            pending_comments = []
            parent.children.append(definition)
            scopes.append((indent, definition))
        return cls(root.children, pending_comments)

    def find(self, keyword: str) -> Iterator[Definition]:
        stack = list(reversed(self.definitions))
        while stack:
            definition = stack.pop()
            if definition.keyword == keyword:
                yield definition
            stack.extend(reversed(definition.children))

    def to_text(self) -> str:
        lines: list[str] = []

        def emit(definitions: list[Definition], depth: int) -> None:
            prefix = _INDENT * depth
            for definition in definitions:
                lines.extend(prefix + c for c in definition.leading_comments)
                line = prefix + " ".join([definition.keyword, *definition.rendered_arguments()])
                if definition.comment is not None:
                    line += _COMMENT_GAP + definition.comment
                lines.append(line)
                emit(definition.children, depth + 1)

        emit(self.definitions, 0)
        lines.extend(self.trailing_comments)
        return "\n".join(lines) + "\n" if lines else ""

    def __str__(self) -> str:
        return self.to_text()
