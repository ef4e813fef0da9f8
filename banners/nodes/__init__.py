"""Graph node factories for the banner workflow."""

from .select import build_select_node
from .compose import build_compose_node
from .persist import build_persist_node
from .rasterize import build_rasterize_node

__all__ = [
    "build_select_node",
    "build_compose_node",
    "build_persist_node",
    "build_rasterize_node",
]
