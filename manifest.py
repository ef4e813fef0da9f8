"""Banners the project ships, and where their files go."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class CanvasSpec:
    name: str
    width: int
    height: int

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


REQUIRED_BANNERS: Tuple[CanvasSpec, ...] = (
    CanvasSpec("github-social-preview", 1280, 640),
    CanvasSpec("chrome-small-promo", 440, 280),
    CanvasSpec("chrome-large-promo", 920, 680),
    CanvasSpec("chrome-marquee-promo", 1400, 560),
)


def validate_canvas(canvas: CanvasSpec) -> None:
    if not canvas.name or canvas.name.strip() != canvas.name or any(sep in canvas.name for sep in "/\\"):
        raise ValueError(f"Invalid banner name {canvas.name!r}")
    for label, value in (("width", canvas.width), ("height", canvas.height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{canvas.name}: {label} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{canvas.name}: {label} must be positive, got {value}")


def validate_manifest(canvases: Iterable[CanvasSpec]) -> List[CanvasSpec]:
    """Validate every entry and reject duplicate names (they would share output files)."""
    checked: List[CanvasSpec] = []
    seen = set()
    for canvas in canvases:
        validate_canvas(canvas)
        if canvas.name in seen:
            raise ValueError(f"Duplicate banner name '{canvas.name}'")
        seen.add(canvas.name)
        checked.append(canvas)
    return checked


def output_paths(canvas: CanvasSpec, out_dir: Path) -> Tuple[Path, Path]:
    """Return (svg_path, png_path); both share the banner name as basename."""
    return out_dir / f"{canvas.name}.svg", out_dir / f"{canvas.name}.png"
