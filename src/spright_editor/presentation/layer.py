from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from spright_editor.core.messages import SetConfigMessage, UpdateConfigMessage
from spright_editor.models import Description, SyncState
from spright_editor.presentation.config import ConfigParseError, SpriteConfig
from spright_editor.presentation.layout import LayoutTree, layout, with_zoom
from spright_editor.presentation.zoom import DEFAULT_ZOOM, step_zoom

logger = logging.getLogger(__name__)

CONFIG_PARSE_FAILED = "Parsing configuration failed"


@dataclass(frozen=True)
class ErrorView:
    message: str


View = LayoutTree | ErrorView


class PresentationLayer:
    """Holds the latest state pushed by the session and the view built from it.

    ``render`` rebuilds the whole view; zooming only re-applies the scale to
    the view already built. ``version`` increases with every rebuild so pollers
    can tell when to redraw.
    """

    def __init__(
        self,
        post_message: Callable[[UpdateConfigMessage], None] | None = None,
        zoom: float = DEFAULT_ZOOM,
    ) -> None:
        self._post_message = post_message
        self.zoom = zoom
        self.state: SyncState | None = None
        self.config: SpriteConfig | None = None
        self.view: View | None = None
        self.version = 0

    def post_message(self, message: SetConfigMessage) -> None:
        """Entry point of the ``PresentationPort`` used by the session."""
        self.on_message(message)

    def on_message(self, message: SetConfigMessage | UpdateConfigMessage) -> None:
        match message:
            case SetConfigMessage(config=config, description=description):
                self.set_config(config, description)
            case UpdateConfigMessage():
                logger.debug("Ignoring updateConfig sent to the presentation layer")
            case _:
                assert_never(message)

    def set_config(self, config: str, description: Description) -> None:
        self.restore_state(SyncState(config=config, description=description))

    def restore_state(self, state: SyncState) -> View:
        self.state = state
        self.view = self.render(state)
        self.version += 1
        return self.view

    def render(self, state: SyncState) -> View:
        try:
            config = SpriteConfig.parse(state.config)
        except ConfigParseError as exc:
            logger.warning("Could not build configuration model: %s", exc)
            self.config = None
            return ErrorView(CONFIG_PARSE_FAILED)
        self.config = config
        return layout(state.description, self.zoom)

    def zoom_in(self) -> float:
        return self._set_zoom(step_zoom(self.zoom, 1))

    def zoom_out(self) -> float:
        return self._set_zoom(step_zoom(self.zoom, -1))

    def _set_zoom(self, zoom: float) -> float:
        self.zoom = zoom
        if isinstance(self.view, LayoutTree):
            self.view = with_zoom(self.view, zoom)
        return zoom

    def request_update(self, text: str) -> None:
        """Ask the session to replace the whole document with ``text``."""
        if self._post_message is None:
            logger.warning("No session attached, dropping document update")
            return
        self._post_message(UpdateConfigMessage(text=text))
