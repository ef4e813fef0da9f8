"""Rasterize node that screenshots the written SVG through the shared renderer."""

from __future__ import annotations

from typing import Awaitable, Callable

from artifact_checks import background_mismatches
from banners.state import BannerState
from compositor import THEME
from rasterizer import Renderer, rasterize


def build_rasterize_node(renderer: Renderer) -> Callable[[BannerState], Awaitable[BannerState]]:
    async def node(state: BannerState) -> BannerState:
        width, height = state.canvas.size
        artifact = await rasterize(renderer, state.svg_path, state.png_path, width, height)

        for problem in background_mismatches(artifact.png_path, THEME["background-color"]):
            print(f"[WARN] {state.canvas.name}: {problem}")

        print(f"[OK] {state.canvas.name} → {artifact.png_path}")
        state.artifact = artifact
        return state

    return node
