"""Draw a layout tree as Dash components.

Coordinates are emitted as ``calc(<px> * var(--zoom))`` so that zooming only
changes the ``--zoom`` property set on an enclosing container.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from dash import html

from spright_editor.dashboard.styles import (
    ERROR_STYLE,
    FRAME_STYLE,
    INPUT_STYLE,
    INPUTS_STYLE,
    PIVOT_STYLE,
    SOURCES_STYLE,
    SPRITE_STYLE,
    SPRITE_TEXT_STYLE,
    TEXT_STYLE,
)
from spright_editor.presentation.layer import ErrorView, View
from spright_editor.presentation.layout import InputBlock, LayoutTree, SourceBlock


ImageUrl = Callable[[str], str]


def _unchanged(uri: str) -> str:
    return uri


def _px(value: float) -> str:
    return f"calc({value:g}px * var(--zoom))"


def zoom_style(scale: float) -> dict[str, Any]:
    return {"--zoom": f"{scale:g}"}


def _render_source(source: SourceBlock, image_url: ImageUrl) -> html.Div:
    children: list[Any] = []
    if source.show_label:
        children.append(html.Div(source.filename, className="text", style=TEXT_STYLE))

    sprites: list[Any] = []
    for box, pivot in zip(source.sprites, source.pivots, strict=True):
        sprites.append(
            html.Div(
                html.Div(box.id, className="text", style=SPRITE_TEXT_STYLE),
                className="sprite",
                style={
                    **SPRITE_STYLE,
                    "left": _px(box.x),
                    "top": _px(box.y),
                    "width": _px(box.w),
                    "height": _px(box.h),
                },
            )
        )
        sprites.append(html.Div(className="pivot", style={**PIVOT_STYLE, "left": _px(pivot.x), "top": _px(pivot.y)}))

    style: dict[str, Any] = {
        "position": "relative",
        "width": _px(source.width),
        "height": _px(source.height),
    }
    url = image_url(source.uri)
    if url:
        style.update(backgroundImage=f"url('{url}')", backgroundSize="100% 100%", imageRendering="pixelated")
    canvas = html.Div(sprites, className="sprites", style=style)
    children.append(html.Div(canvas, className="frame", style=FRAME_STYLE))
    return html.Div(children, className="source")


def _render_input(input_block: InputBlock, image_url: ImageUrl) -> html.Div:
    return html.Div(
        [
            html.Div(input_block.filename, className="text", style=TEXT_STYLE),
            html.Div(
                [_render_source(s, image_url) for s in input_block.sources],
                className="sources",
                style=SOURCES_STYLE,
            ),
        ],
        className="input",
        style=INPUT_STYLE,
    )


def render_tree(tree: LayoutTree, image_url: ImageUrl | None = None) -> html.Div:
    """Draw ``tree``; ``image_url`` maps a source URI to the URL the browser loads it from."""
    resolve = image_url or _unchanged
    return html.Div(
        [_render_input(i, resolve) for i in tree.inputs],
        className="inputs",
        style=INPUTS_STYLE,
    )


def render_view(view: View | None, image_url: ImageUrl | None = None) -> Any:
    if view is None:
        return html.Div("Waiting for spright...", className="placeholder")
    if isinstance(view, ErrorView):
        return html.Div(view.message, className="error", style=ERROR_STYLE)
    return render_tree(view, image_url)
