"""Dash layout with Preview and Source tabs."""

from __future__ import annotations

from dash import dcc, html

from spright_editor.dashboard.render import zoom_style
from spright_editor.dashboard.styles import EDITOR_STYLE, PAGE_STYLE, TOOLBAR_STYLE

POLL_INTERVAL_MS = 300


def _build_preview_tab(zoom: float) -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.Button("-", id="zoom-out", n_clicks=0, title="Zoom out"),
                    html.Span(f"{zoom:g}x", id="zoom-label", style={"minWidth": "40px", "textAlign": "center"}),
                    html.Button("+", id="zoom-in", n_clicks=0, title="Zoom in"),
                ],
                style=TOOLBAR_STYLE,
            ),
            html.Div(html.Div(id="preview"), id="preview-scale", style=zoom_style(zoom)),
        ]
    )


def _build_source_tab() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.Button("Apply", id="apply-btn", n_clicks=0),
                    html.Button("Reformat", id="reformat-btn", n_clicks=0),
                    html.Span(id="apply-status", style={"fontSize": "12px", "color": "#555"}),
                ],
                style=TOOLBAR_STYLE,
            ),
            dcc.Textarea(id="source-editor", value="", spellCheck=False, style=EDITOR_STYLE),
            html.H4("Problems", style={"marginBottom": "4px"}),
            html.Ul(id="diagnostics", children=[]),
        ]
    )


def build_layout(title: str, zoom: float) -> html.Div:
    """Return the top-level layout.

    Both tabs are part of the initial DOM so every component ID exists from
    page load. Switching to the Source tab makes the document active, which
    shows its diagnostics.
    """
    return html.Div(
        [
            dcc.Interval(id="poll", interval=POLL_INTERVAL_MS, n_intervals=0),
            dcc.Store(id="preview-version", data=-1),
            html.H1(title),
            dcc.Tabs(
                id="main-tabs",
                value="preview",
                children=[
                    dcc.Tab(label="Preview", value="preview", children=[_build_preview_tab(zoom)]),
                    dcc.Tab(label="Source", value="source", children=[_build_source_tab()]),
                ],
            ),
        ],
        style=PAGE_STYLE,
    )
