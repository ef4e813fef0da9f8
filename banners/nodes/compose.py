from __future__ import annotations

from typing import Callable

from banners.state import BannerState
from compositor import compose


def build_compose_node() -> Callable[[BannerState], BannerState]:
    def node(state: BannerState) -> BannerState:
        if state.plan is None:
            raise ValueError(f"No placement selected for '{state.canvas.name}'")
        state.document = compose(state.canvas, state.plan)
        return state

    return node
