"""Dash callback registrations."""

from __future__ import annotations

import logging
from typing import Any

from dash import Dash, Input, Output, State, ctx, html, no_update

from spright_editor.dashboard.context import DashboardContext
from spright_editor.dashboard.render import render_view, zoom_style
from spright_editor.dashboard.server import source_url
from spright_editor.dashboard.styles import DIAGNOSTIC_STYLE
from spright_editor.models import Diagnostic

_log = logging.getLogger(__name__)


def diagnostics_to_items(diagnostics: tuple[Diagnostic, ...]) -> list[Any]:
    return [
        html.Li(
            f"{d.range.start_line + 1}:{d.range.start_column + 1}  {d.message}",
            style=DIAGNOSTIC_STYLE,
        )
        for d in diagnostics
    ]


def register_callbacks(app: Dash, context: DashboardContext) -> None:
    presentation = context.presentation
    session = context.session
    source_root = context.source_root

    def image_url(uri: str) -> str:
        return source_url(uri, source_root)

    # ── Preview: rebuild when a new state arrived ──────────────────

    @app.callback(
        [
            Output("preview", "children"),
            Output("preview-version", "data"),
            Output("preview-scale", "style", allow_duplicate=True),
        ],
        Input("poll", "n_intervals"),
        State("preview-version", "data"),
        prevent_initial_call=True,
    )
    def refresh_preview(_: Any, shown_version: int | None) -> tuple[Any, Any, Any]:
        version = presentation.version
        if version == shown_version:
            return no_update, no_update, no_update
        return render_view(presentation.view, image_url), version, zoom_style(presentation.zoom)

    # ── Preview: zoom re-applies the scale only ────────────────────

    @app.callback(
        [Output("preview-scale", "style"), Output("zoom-label", "children")],
        [Input("zoom-in", "n_clicks"), Input("zoom-out", "n_clicks")],
        prevent_initial_call=True,
    )
    def change_zoom(_in: int, _out: int) -> tuple[dict[str, Any], str]:
        if ctx.triggered_id == "zoom-in":
            zoom = presentation.zoom_in()
        else:
            zoom = presentation.zoom_out()
        return zoom_style(zoom), f"{zoom:g}x"

    # ── Source: activating the tab shows diagnostics ───────────────

    @app.callback(
        Output("source-editor", "value"),
        Input("main-tabs", "value"),
    )
    def switch_tab(tab: str) -> Any:
        active = tab == "source"
        context.call_soon(session.set_active, active)
        if not active:
            return no_update
        try:
            return session.host.read_text()
        except OSError:
            _log.exception("Reading %s failed", session.host.path)
            return no_update

    @app.callback(
        Output("diagnostics", "children"),
        Input("poll", "n_intervals"),
    )
    def refresh_diagnostics(_: Any) -> list[Any]:
        return diagnostics_to_items(session.channel.published)

    # ── Source: full document replacement ──────────────────────────

    @app.callback(
        Output("apply-status", "children"),
        Input("apply-btn", "n_clicks"),
        State("source-editor", "value"),
        prevent_initial_call=True,
    )
    def apply_source(_: int, text: str | None) -> str:
        try:
            presentation.request_update(text or "")
        except Exception as exc:
            _log.exception("Document update failed")
            return f"Update failed: {exc}"
        return "Document updated."

    @app.callback(
        Output("source-editor", "value", allow_duplicate=True),
        Input("reformat-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def reformat_source(_: int) -> Any:
        config = presentation.config
        if config is None:
            return no_update
        return config.to_text()
