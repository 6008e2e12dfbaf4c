"""Dash application factory."""

from __future__ import annotations

import asyncio

from dash import Dash

from spright_editor.core.session import EditorSession
from spright_editor.dashboard.callbacks import register_callbacks
from spright_editor.dashboard.context import DashboardContext
from spright_editor.dashboard.layout import build_layout
from spright_editor.dashboard.server import register_message_routes, register_source_route
from spright_editor.presentation.layer import PresentationLayer


def create_dashboard(session: EditorSession, loop: asyncio.AbstractEventLoop) -> Dash:
    """Build the preview app and wire it to ``session`` running on ``loop``."""
    presentation = PresentationLayer(
        post_message=lambda message: context.run_async(session.on_message(message)),
    )
    context = DashboardContext(session=session, presentation=presentation, loop=loop)
    context.call_soon(session.attach, presentation)

    app = Dash(__name__, title="Spright Configuration Editor", suppress_callback_exceptions=True)
    app.layout = build_layout(session.host.path.name, presentation.zoom)
    register_callbacks(app, context)
    register_source_route(app.server, context.source_root)
    register_message_routes(app.server, context)
    return app
