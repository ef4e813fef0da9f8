"""Turn written SVG documents into PNGs through a headless browser.

The driver only talks to the small ``Renderer`` interface; ``PlaywrightRenderer``
is the Chromium-backed implementation used by the CLI. One renderer session
is shared by the whole batch, so its operations must be awaited one at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class RenderedArtifact:
    svg_path: Path
    png_path: Path


class Renderer(ABC):
    """Session that renders a document at a fixed viewport and screenshots it."""

    async def start(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "Renderer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @abstractmethod
    async def load_document(self, path: Path) -> None:
        ...

    @abstractmethod
    async def set_viewport(self, width: int, height: int) -> None:
        ...

    @abstractmethod
    async def capture_screenshot(self, path: Path) -> None:
        ...


class PlaywrightRenderer(Renderer):
    """Chromium page with a 1:1 device scale factor, reused across documents."""

    def __init__(self, headless: bool = True, timeout_ms: Optional[int] = None) -> None:
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._playwright = None
        self._browser = None
        self._page = None

    async def start(self) -> None:
        from playwright.async_api import async_playwright

        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=self.headless)
            context = await self._browser.new_context(device_scale_factor=1)
            self._page = await context.new_page()
            if self.timeout_ms is not None:
                self._page.set_default_timeout(self.timeout_ms)
        except BaseException:
            await self.close()
            raise

    async def close(self) -> None:
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        self._page = None
        try:
            if browser is not None:
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()

    @property
    def page(self):
        if self._page is None:
            raise RuntimeError("Renderer session is not started")
        return self._page

    async def load_document(self, path: Path) -> None:
        await self.page.goto(Path(path).resolve().as_uri(), wait_until="load")

    async def set_viewport(self, width: int, height: int) -> None:
        await self.page.set_viewport_size({"width": int(width), "height": int(height)})

    async def capture_screenshot(self, path: Path) -> None:
        await self.page.screenshot(path=str(path))


def read_png_size(path: Path) -> tuple[int, int]:
    with Image.open(path) as im:
        return im.size


async def rasterize(
    renderer: Renderer,
    svg_path: Path,
    png_path: Path,
    width: int,
    height: int,
) -> RenderedArtifact:
    """Render ``svg_path`` at exactly ``width`` x ``height`` into ``png_path``.

    Each step is awaited before the next; nothing is retried.
    """
    await renderer.load_document(svg_path)
    await renderer.set_viewport(width, height)
    await renderer.capture_screenshot(png_path)

    actual = read_png_size(png_path)
    if actual != (width, height):
        raise RuntimeError(
            f"Rendered {png_path.name} is {actual[0]}x{actual[1]}, expected {width}x{height}"
        )
    return RenderedArtifact(svg_path=svg_path, png_path=png_path)
