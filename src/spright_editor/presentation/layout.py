"""Turn a spright description into a positioned, zoomable layout tree.

The tree keeps every coordinate in source pixels and carries the zoom as a
single ``scale``; drawing multiplies by it. Changing zoom therefore only
swaps ``scale`` on an existing tree.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from spright_editor.models import Description


@dataclass(frozen=True)
class SpriteBox:
    id: str
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class PivotMarker:
    sprite_id: str
    x: float
    y: float


@dataclass(frozen=True)
class SourceBlock:
    filename: str
    show_label: bool
    uri: str
    width: int
    height: int
    sprites: tuple[SpriteBox, ...]
    pivots: tuple[PivotMarker, ...]


@dataclass(frozen=True)
class InputBlock:
    filename: str
    sources: tuple[SourceBlock, ...]


@dataclass(frozen=True)
class LayoutTree:
    scale: float
    inputs: tuple[InputBlock, ...]

    def element_count(self) -> int:
        count = 1
        for input_block in self.inputs:
            count += 1
            for source in input_block.sources:
                count += 1 + len(source.sprites) + len(source.pivots)
        return count


def layout(description: Description, zoom: float) -> LayoutTree:
    inputs: list[InputBlock] = []
    for input_ in description.inputs:
        sources: list[SourceBlock] = []
        for source_index in input_.source_indices:
            source = description.sources[source_index]
            sprites: list[SpriteBox] = []
            pivots: list[PivotMarker] = []
            for sprite_index in source.sprite_indices:
                sprite = description.sprites[sprite_index]
                rect = sprite.trimmed_source_rect
                sprites.append(SpriteBox(sprite.id, rect.x, rect.y, rect.w, rect.h))
                pivots.append(PivotMarker(sprite.id, rect.x + sprite.pivot.x, rect.y + sprite.pivot.y))
            sources.append(
                SourceBlock(
                    filename=source.filename,
                    show_label=source.filename != input_.filename,
                    uri=source.uri,
                    width=source.width,
                    height=source.height,
                    sprites=tuple(sprites),
                    pivots=tuple(pivots),
                )
            )
        inputs.append(InputBlock(input_.filename, tuple(sources)))
    return LayoutTree(scale=zoom, inputs=tuple(inputs))


def with_zoom(tree: LayoutTree, zoom: float) -> LayoutTree:
    return dataclasses.replace(tree, scale=zoom)
