"""Selector node that picks the best-fitting layout variant."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from banners.state import BannerState
from layout_constraints import check_placement, select_best_fit
from layout_variants import LayoutVariant


def build_select_node(
    variants: Optional[Sequence[LayoutVariant]] = None,
) -> Callable[[BannerState], BannerState]:
    def node(state: BannerState) -> BannerState:
        width, height = state.canvas.size
        plan = select_best_fit(width, height, variants)
        check_placement(plan, width, height)
        print(
            f"[select] {state.canvas.name}: {plan.variant.name} "
            f"scale={plan.scale:.4f} margin={plan.total_margin:.2f}"
        )
        state.plan = plan
        return state

    return node
