import asyncio

import pytest

from fakes import FakeRenderer
from rasterizer import PlaywrightRenderer, RenderedArtifact, rasterize, read_png_size


def _svg(tmp_path, name="banner"):
    path = tmp_path / f"{name}.svg"
    path.write_text('<svg xmlns="http://www.w3.org/2000/svg" width="40" height="20"/>\n', encoding="utf-8")
    return path


def test_rasterize_loads_then_sizes_then_captures(tmp_path):
    renderer = FakeRenderer()
    svg_path = _svg(tmp_path)
    png_path = tmp_path / "banner.png"

    artifact = asyncio.run(rasterize(renderer, svg_path, png_path, 40, 20))

    assert artifact == RenderedArtifact(svg_path=svg_path, png_path=png_path)
    assert renderer.calls == [
        ("load", "banner.svg"),
        ("viewport", 40, 20),
        ("screenshot", "banner.png"),
    ]
    assert read_png_size(png_path) == (40, 20)


def test_rasterize_rejects_wrong_pixel_size(tmp_path):
    renderer = FakeRenderer(size_override=(80, 40))
    with pytest.raises(RuntimeError, match="expected 40x20"):
        asyncio.run(rasterize(renderer, _svg(tmp_path), tmp_path / "banner.png", 40, 20))


def test_missing_document_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(rasterize(FakeRenderer(), tmp_path / "nope.svg", tmp_path / "nope.png", 40, 20))


def test_session_is_released_when_body_fails(tmp_path):
    renderer = FakeRenderer(fail_on="banner")

    async def run():
        async with renderer as session:
            await rasterize(session, _svg(tmp_path), tmp_path / "banner.png", 40, 20)

    with pytest.raises(RuntimeError, match="capture failed"):
        asyncio.run(run())
    assert renderer.calls[0] == ("start",)
    assert renderer.calls[-1] == ("close",)


def test_playwright_renderer_requires_start():
    renderer = PlaywrightRenderer()
    with pytest.raises(RuntimeError, match="not started"):
        renderer.page
    # closing an unstarted session is a no-op
    asyncio.run(renderer.close())
