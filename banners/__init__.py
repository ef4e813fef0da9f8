"""Banner generation workflow package.

The code is organized around:

- workflow state definitions (`state.py`)
- graph node logic (`nodes/`)
- graph wiring (`graph.py`) and the batch runner (`workflow.py`)
- utility helpers (`utils/`)

Geometry, composition and rasterization live in the top-level modules
`layout_constraints`, `compositor` and `rasterizer`.
"""

__all__ = [
    "state",
    "graph",
    "workflow",
]
