"""Messages exchanged between the editor session and the presentation layer."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from spright_editor.models import CamelModel, Description


class SetConfigMessage(CamelModel):
    """Pushed to the presentation layer after every successful refresh."""

    type: Literal["setConfig"] = "setConfig"
    config: str
    description: Description


class UpdateConfigMessage(CamelModel):
    """Pushed by the presentation layer to replace the whole document with ``text``."""

    type: Literal["updateConfig"] = "updateConfig"
    text: str


Message = Annotated[SetConfigMessage | UpdateConfigMessage, Field(discriminator="type")]

_MESSAGE_ADAPTER: TypeAdapter[SetConfigMessage | UpdateConfigMessage] = TypeAdapter(Message)


def parse_message(payload: Any) -> SetConfigMessage | UpdateConfigMessage:
    """Validate a raw message dict; raises ``pydantic.ValidationError`` on unknown types."""
    return _MESSAGE_ADAPTER.validate_python(payload)


def dump_message(message: SetConfigMessage | UpdateConfigMessage) -> dict[str, Any]:
    return message.model_dump(by_alias=True)
