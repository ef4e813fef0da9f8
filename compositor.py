from typing import Dict

from layout_constraints import PlacementPlan
from layout_variants import fmt
from manifest import CanvasSpec


GENERATOR_NAME = "generate_banners.py"

# Colors are only ever referenced through these custom properties
THEME: Dict[str, str] = {
    "background-color": "#303030",
    "text-color": "#ffffff",
    "icon-color": "#759b23",
    "icon-inner-color": "var(--background-color)",
}


def theme_style(theme: Dict[str, str] = THEME) -> str:
    lines = [f"      --{key}: {value};" for key, value in theme.items()]
    return "  <style>\n    :root {\n" + "\n".join(lines) + "\n    }\n  </style>"


def compose(canvas: CanvasSpec, plan: PlacementPlan) -> str:
    """Wrap the placed variant in a themed root document sized to the canvas.

    Output depends only on the inputs, so repeated calls are byte-identical.
    """
    width, height = canvas.width, canvas.height
    fragment = plan.variant.content(
        plan.origin_x, plan.origin_y, plan.scaled_width, plan.scaled_height
    )
    parts = [
        f"<!-- Generated by '{GENERATOR_NAME}', do not edit manually -->",
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(width)}" height="{fmt(height)}">',
        theme_style(),
        f'  <rect width="{fmt(width)}" height="{fmt(height)}" fill="var(--background-color)" />',
        fragment,
        "</svg>",
    ]
    return "\n".join(parts)
