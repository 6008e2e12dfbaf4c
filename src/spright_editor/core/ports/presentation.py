from typing import Protocol

from spright_editor.core.messages import SetConfigMessage


class PresentationPort(Protocol):
    def post_message(self, message: SetConfigMessage) -> None: ...
