"""Flask routes served next to the Dash app.

``/sources/<path>`` serves source images from the document's directory, since
a page loaded over http cannot show ``file://`` images. ``/messages`` carries
the ``setConfig`` / ``updateConfig`` protocol as JSON for clients other than
the dashboard itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote, urlparse
from urllib.request import url2pathname

from flask import Flask, Response, jsonify, request, send_from_directory
from pydantic import ValidationError

from spright_editor.core.messages import SetConfigMessage, dump_message, parse_message
from spright_editor.dashboard.context import DashboardContext

_log = logging.getLogger(__name__)

SOURCES_ROUTE = "/sources/"
MESSAGES_ROUTE = "/messages"


def source_url(uri: str, root: Path) -> str:
    """Map a source's ``file://`` URI onto the image route.

    Returns ``""`` for files outside ``root``; other URIs are returned as they are.
    """
    if not uri:
        return ""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return uri
    path = Path(url2pathname(parsed.path))
    try:
        relative = path.relative_to(root)
    except ValueError:
        _log.debug("Not serving %s, it is outside of %s", path, root)
        return ""
    return SOURCES_ROUTE + quote(relative.as_posix())


def register_source_route(server: Flask, root: Path) -> None:
    @server.get(f"{SOURCES_ROUTE}<path:filename>")
    def serve_source(filename: str) -> Response:
        return send_from_directory(root, filename)


def register_message_routes(server: Flask, context: DashboardContext) -> None:
    @server.get(MESSAGES_ROUTE)
    def latest_message() -> Response | tuple[str, int]:
        state = context.presentation.state
        if state is None:
            return "", 204
        return jsonify(dump_message(SetConfigMessage(config=state.config, description=state.description)))

    @server.post(MESSAGES_ROUTE)
    def post_message() -> tuple[Response, int]:
        payload = request.get_json(silent=True)
        try:
            message = parse_message(payload)
        except ValidationError as exc:
            _log.warning("Rejected message: %s", exc)
            return jsonify({"error": str(exc)}), 400
        context.run_async(context.session.on_message(message))
        return jsonify({"accepted": message.type}), 202
