from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

from layout_variants import LayoutVariant, list_variants


# Fraction of the short canvas side reserved as margin on every side
MIN_MARGIN_RATIO: float = 1 / 8


@dataclass(frozen=True)
class PlacementPlan:
    variant: LayoutVariant
    scale: float
    origin_x: float
    origin_y: float
    scaled_width: float
    scaled_height: float
    total_margin: float

    @property
    def box(self) -> Tuple[float, float, float, float]:
        """x1, y1, x2, y2 of the placed variant."""
        return (
            self.origin_x,
            self.origin_y,
            self.origin_x + self.scaled_width,
            self.origin_y + self.scaled_height,
        )


def min_margin(width: float, height: float) -> float:
    return min(width, height) * MIN_MARGIN_RATIO


def available_area(width: float, height: float) -> Tuple[float, float]:
    """Interior rectangle left once the minimum margin is reserved on each side."""
    margin = min_margin(width, height)
    return width - 2 * margin, height - 2 * margin


def compute_placement(variant: LayoutVariant, width: float, height: float) -> PlacementPlan:
    """
    Scale ``variant`` uniformly to the largest size that fits the interior
    rectangle, then center it in the full canvas.

    The non-limiting axis ends up with more than the minimum margin; the
    score is the sum of the margins on all four sides.
    """
    avail_w, avail_h = available_area(width, height)
    scale = min(avail_w / variant.width, avail_h / variant.height)

    scaled_w = variant.width * scale
    scaled_h = variant.height * scale

    origin_x = (width - scaled_w) / 2
    origin_y = (height - scaled_h) / 2

    return PlacementPlan(
        variant=variant,
        scale=scale,
        origin_x=origin_x,
        origin_y=origin_y,
        scaled_width=scaled_w,
        scaled_height=scaled_h,
        total_margin=origin_x * 2 + origin_y * 2,
    )


def select_best_fit(
    width: float,
    height: float,
    variants: Optional[Sequence[LayoutVariant]] = None,
) -> PlacementPlan:
    """Return the placement of the variant that leaves the least total margin.

    Every variant is evaluated; on equal margins the first registered one is kept.
    """
    candidates = list(list_variants() if variants is None else variants)
    if not candidates:
        raise ValueError("At least one layout variant is required")

    best: Optional[PlacementPlan] = None
    for variant in candidates:
        plan = compute_placement(variant, width, height)
        if best is None or plan.total_margin < best.total_margin:
            best = plan
    return best


def check_placement(plan: PlacementPlan, width: float, height: float) -> None:
    """Reject plans produced by canvases too small to hold any content."""
    if not math.isfinite(plan.scale) or plan.scale <= 0:
        avail_w, avail_h = available_area(width, height)
        raise ValueError(
            f"Canvas {width}x{height} leaves no room for layout '{plan.variant.name}' "
            f"(available {avail_w:g}x{avail_h:g}, scale {plan.scale:g})"
        )
