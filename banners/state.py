"""Workflow state definitions for the banner generation graph."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from layout_constraints import PlacementPlan
from manifest import CanvasSpec, output_paths
from rasterizer import RenderedArtifact


@dataclass
class RunContext:
    out_dir: Path


@dataclass
class BannerState:
    """State carried by one banner through select -> compose -> persist -> rasterize."""

    # Immutable input context -------------------------------------------------
    run: RunContext
    canvas: CanvasSpec

    # Selector output ---------------------------------------------------------
    plan: Optional[PlacementPlan] = None

    # Composer output ---------------------------------------------------------
    document: Optional[str] = None

    # Files on disk -----------------------------------------------------------
    artifact: Optional[RenderedArtifact] = None

    @property
    def svg_path(self) -> Path:
        return output_paths(self.canvas, self.run.out_dir)[0]

    @property
    def png_path(self) -> Path:
        return output_paths(self.canvas, self.run.out_dir)[1]
