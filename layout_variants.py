"""Fixed registry of the vector layouts a banner can be built from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple


TITLE_LINES: Tuple[str, str] = ("Competitive", "Companion")

# (x, y, width, height) -> SVG fragment
ContentGenerator = Callable[[float, float, float, float], str]


@dataclass(frozen=True)
class LayoutVariant:
    """One layout template with a known intrinsic size."""

    name: str
    width: int
    height: int
    content: ContentGenerator

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def fmt(value: float) -> str:
    """Format a coordinate with at most four decimals, trailing zeros stripped."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _icon(cx: float) -> str:
    # Plus bar width = circle radius, bar thickness = radius / 4
    return f"""  <g>
    <circle cx="{fmt(cx)}" cy="100" r="100" fill="var(--icon-color)" />
    <rect x="{fmt(cx - 50)}" y="87.5" width="100" height="25" fill="var(--icon-inner-color)" />
    <rect x="{fmt(cx - 12.5)}" y="50" width="25" height="100" fill="var(--icon-inner-color)" />
  </g>"""


def _title(x: str, y: str, font_size: int) -> str:
    # One <text> per line; two tspans inside a single <text> do not center reliably
    first, second = TITLE_LINES
    attrs = (
        'dominant-baseline="middle" text-anchor="middle" fill="var(--text-color)" '
        f'font-family="Ubuntu" font-size="{font_size}px" font-weight="700"'
    )
    return f"""  <g>
    <text {attrs}>
      <tspan x="{x}" y="{y}" dy="-0.6em">{first}</tspan>
    </text>
    <text {attrs}>
      <tspan x="{x}" y="{y}" dy="0.6em">{second}</tspan>
    </text>
  </g>"""


def _nested_svg(view_w: int, view_h: int, x: float, y: float, w: float, h: float, body: str) -> str:
    return (
        f'<svg viewBox="0 0 {view_w} {view_h}" x="{fmt(x)}" y="{fmt(y)}" '
        f'width="{fmt(w)}" height="{fmt(h)}">\n'
        '  <rect width="100%" height="100%" fill="var(--background-color)" />\n'
        f"{body}\n"
        "</svg>"
    )


def horizontal_content(x: float, y: float, width: float, height: float) -> str:
    """Icon on the left, title to its right."""
    body = _icon(100) + "\n" + _title("460", "50%", 85)
    return _nested_svg(716, 200, x, y, width, height, body)


def vertical_content(x: float, y: float, width: float, height: float) -> str:
    """Icon on top, title centered underneath."""
    body = _icon(210) + "\n" + _title("50%", "300", 70)
    return _nested_svg(420, 380, x, y, width, height, body)


HORIZONTAL = LayoutVariant(name="horizontal", width=716, height=200, content=horizontal_content)
VERTICAL = LayoutVariant(name="vertical", width=420, height=380, content=vertical_content)

# Registration order doubles as the tie-break order during selection
VARIANTS: Tuple[LayoutVariant, ...] = (HORIZONTAL, VERTICAL)


def list_variants() -> Tuple[LayoutVariant, ...]:
    return VARIANTS
