"""Persist node that writes the composed SVG next to its future PNG."""

from __future__ import annotations

from typing import Callable

from banners.state import BannerState
from banners.utils.artifacts import write_document
from rasterizer import RenderedArtifact


def build_persist_node() -> Callable[[BannerState], BannerState]:
    def node(state: BannerState) -> BannerState:
        if state.document is None:
            raise ValueError(f"No document composed for '{state.canvas.name}'")
        write_document(state.svg_path, state.document)
        state.artifact = RenderedArtifact(svg_path=state.svg_path, png_path=state.png_path)
        return state

    return node
