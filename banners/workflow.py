"""Workflow orchestration helpers for the banner batch."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from banners.graph import build_workflow
from banners.state import BannerState, RunContext
from banners.utils import StepTimer, ensure_dir
from layout_variants import LayoutVariant
from manifest import CanvasSpec, validate_manifest
from rasterizer import PlaywrightRenderer, RenderedArtifact, Renderer


def initialize_state(canvas: CanvasSpec, out_dir: Path) -> BannerState:
    return BannerState(run=RunContext(out_dir=out_dir), canvas=canvas)


async def _run_manifest(
    app,
    canvases: Sequence[CanvasSpec],
    out_dir: Path,
    timer: StepTimer,
) -> List[RenderedArtifact]:
    artifacts: List[RenderedArtifact] = []
    # One banner at a time: the renderer session is shared and not concurrency safe
    for canvas in canvases:
        print(f"Generating banner {canvas.name} of size {canvas.width}x{canvas.height}")
        with timer.time_step(canvas.name):
            result: Mapping[str, Any] = await app.ainvoke(
                initialize_state(canvas, out_dir)
            )
        artifacts.append(result["artifact"])
    return artifacts


async def run_batch(
    canvases: Iterable[CanvasSpec],
    out_dir: Path,
    *,
    rasterize: bool = True,
    renderer_factory: Callable[[], Renderer] = PlaywrightRenderer,
    variants: Optional[Sequence[LayoutVariant]] = None,
) -> List[RenderedArtifact]:
    """Generate every banner in ``canvases`` in order.

    The renderer is opened once for the whole batch and closed on exit, also
    when a banner fails. Any error aborts the batch; files already written
    for earlier banners are left in place.

    With ``rasterize=False`` no browser is started and only the SVGs are
    written; the returned artifacts still name the PNG path, but that file
    is not created (or is left as it was by an earlier run).
    """
    checked = validate_manifest(canvases)
    ensure_dir(out_dir)
    timer = StepTimer()

    if not rasterize:
        app = build_workflow(variants).compile()
        artifacts = await _run_manifest(app, checked, out_dir, timer)
    else:
        async with renderer_factory() as renderer:
            app = build_workflow(variants, renderer).compile()
            artifacts = await _run_manifest(app, checked, out_dir, timer)

    print("\n=== Timing summary ===")
    for line in timer.to_lines():
        print(f"  {line}")
    return artifacts
