"""LangGraph workflow definition for generating one banner."""

from __future__ import annotations

from typing import Optional, Sequence

from langgraph.graph import END, StateGraph

from banners.nodes import (
    build_compose_node,
    build_persist_node,
    build_rasterize_node,
    build_select_node,
)
from banners.state import BannerState
from layout_variants import LayoutVariant
from rasterizer import Renderer


def build_workflow(
    variants: Optional[Sequence[LayoutVariant]] = None,
    renderer: Optional[Renderer] = None,
) -> StateGraph:
    """Wire select → compose → persist, then rasterize when a renderer is given."""
    graph = StateGraph(BannerState)

    graph.add_node("select", build_select_node(variants))
    graph.add_node("compose", build_compose_node())
    graph.add_node("persist", build_persist_node())

    graph.set_entry_point("select")
    graph.add_edge("select", "compose")
    graph.add_edge("compose", "persist")

    if renderer is None:
        graph.add_edge("persist", END)
        return graph

    graph.add_node("rasterize", build_rasterize_node(renderer))
    graph.add_edge("persist", "rasterize")
    graph.add_edge("rasterize", END)

    return graph
