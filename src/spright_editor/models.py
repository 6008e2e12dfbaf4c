from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Point(CamelModel):
    x: float
    y: float


class Rect(CamelModel):
    x: float
    y: float
    w: float
    h: float


class Input(CamelModel):
    filename: str
    source_indices: list[int] = Field(default_factory=list)


class Source(CamelModel):
    index: int
    filename: str
    path: str = ""
    width: int
    height: int
    sprite_indices: list[int] = Field(default_factory=list)
    uri: str = ""


class Sprite(CamelModel):
    id: str = ""
    index: int
    input_sprite_index: int = 0
    pivot: Point
    rect: Rect
    trimmed_rect: Rect
    rotated: bool = False
    source_index: int
    source_rect: Rect
    trimmed_source_rect: Rect
    slice_index: int = 0
    slice_sprite_index: int = 0
    data: dict[str, Any] = Field(default_factory=dict)
    tags: dict[str, Any] = Field(default_factory=dict)
    vertices: list[Point] = Field(default_factory=list)


class Description(CamelModel):
    inputs: list[Input] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)
    sprites: list[Sprite] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_indices(self) -> "Description":
        for input_ in self.inputs:
            for index in input_.source_indices:
                if not 0 <= index < len(self.sources):
                    raise ValueError(f"input {input_.filename!r} references missing source {index}")
        for source in self.sources:
            for index in source.sprite_indices:
                if not 0 <= index < len(self.sprites):
                    raise ValueError(f"source {source.filename!r} references missing sprite {index}")
        return self


class SyncState(CamelModel):
    config: str
    description: Description


class Severity(StrEnum):
    ERROR = "error"


class LineRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_line: int
    start_column: int
    end_line: int
    end_column: int


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    range: LineRange
    severity: Severity = Severity.ERROR
    source: str = "spright"
