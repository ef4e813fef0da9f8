from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
from PIL import Image


RGB = Tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"Expected a #rrggbb color, got '{value}'")
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)


def edge_median_colors(png_path: Path, strip_px: int = 4) -> Dict[str, RGB]:
    """Median color of the left, right, top and bottom edge strips."""
    with Image.open(png_path) as im:
        arr = np.array(im.convert("RGB"))
    h, w = arr.shape[0], arr.shape[1]

    def med_rgb(region: np.ndarray) -> RGB:
        med = np.median(region.reshape(-1, 3), axis=0)
        return tuple(int(x) for x in med.tolist())

    return {
        "left": med_rgb(arr[:, :min(strip_px, w), :]),
        "right": med_rgb(arr[:, max(0, w - strip_px):, :]),
        "top": med_rgb(arr[:min(strip_px, h), :, :]),
        "bottom": med_rgb(arr[max(0, h - strip_px):, :, :]),
    }


def background_mismatches(png_path: Path, expected_hex: str, tolerance: int = 8) -> List[str]:
    """Return the edges whose median color is not the expected background.

    The banner margins are always at least an eighth of the short side, so
    a healthy render shows nothing but background along every edge.
    """
    expected = np.array(hex_to_rgb(expected_hex), dtype=np.int32)
    problems: List[str] = []
    for edge, color in edge_median_colors(png_path).items():
        if int(np.abs(np.array(color, dtype=np.int32) - expected).max()) > tolerance:
            problems.append(f"{edge} edge is rgb{color}, expected {expected_hex}")
    return problems
