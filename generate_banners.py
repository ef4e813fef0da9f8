from __future__ import annotations

import argparse
import asyncio
from functools import partial
from pathlib import Path

from banners.workflow import run_batch
from manifest import REQUIRED_BANNERS
from rasterizer import PlaywrightRenderer


SCRIPT_DIR = Path(__file__).parent.resolve()
DEFAULT_OUT_DIR = SCRIPT_DIR / "media" / "banners"


def main():
    parser = argparse.ArgumentParser(description="Regenerate every promotional banner (SVG + PNG) from the built-in layout variants.")
    parser.add_argument("--out-dir", default=str(DEFAULT_OUT_DIR), help=f"Directory for the generated files (default: {DEFAULT_OUT_DIR})")
    parser.add_argument("--svg-only", action="store_true", help="Write the SVG documents without launching a browser to rasterize them")
    parser.add_argument("--headed", action="store_true", help="Show the Chromium window while rendering")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Default Playwright timeout per browser operation in milliseconds")
    args = parser.parse_args()

    out_dir = Path(args.out_dir).resolve()
    print(f"\n=== Generating {len(REQUIRED_BANNERS)} banners into {out_dir} ===")

    asyncio.run(
        run_batch(
            REQUIRED_BANNERS,
            out_dir,
            rasterize=not args.svg_only,
            renderer_factory=partial(PlaywrightRenderer, headless=not args.headed, timeout_ms=args.timeout_ms),
        )
    )


if __name__ == "__main__":
    main()
