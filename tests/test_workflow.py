import asyncio

import pytest
from PIL import Image

from banners.graph import build_workflow
from banners.workflow import run_batch
from fakes import FakeRenderer
from manifest import REQUIRED_BANNERS, CanvasSpec
from rasterizer import read_png_size


def _no_browser():
    raise AssertionError("renderer must not be created")


def test_full_manifest_renders_every_banner_in_order(tmp_path, capsys):
    renderer = FakeRenderer()
    artifacts = asyncio.run(run_batch(REQUIRED_BANNERS, tmp_path, renderer_factory=lambda: renderer))

    assert [a.png_path.stem for a in artifacts] == [c.name for c in REQUIRED_BANNERS]
    for canvas, artifact in zip(REQUIRED_BANNERS, artifacts):
        assert artifact.svg_path == tmp_path / f"{canvas.name}.svg"
        assert read_png_size(artifact.png_path) == canvas.size

    # one session for the whole batch, each banner fully rendered before the next
    assert renderer.calls[0] == ("start",)
    assert renderer.calls[-1] == ("close",)
    steps = renderer.calls[1:-1]
    assert [s[0] for s in steps] == ["load", "viewport", "screenshot"] * len(REQUIRED_BANNERS)
    assert steps[0:3] == [
        ("load", "github-social-preview.svg"),
        ("viewport", 1280, 640),
        ("screenshot", "github-social-preview.png"),
    ]

    out = capsys.readouterr().out
    assert "Generating banner chrome-small-promo of size 440x280" in out
    assert "[select] chrome-large-promo: vertical" in out
    assert "[WARN]" not in out


def test_svg_only_skips_the_browser(tmp_path):
    artifacts = asyncio.run(
        run_batch(REQUIRED_BANNERS, tmp_path, rasterize=False, renderer_factory=_no_browser)
    )
    assert len(artifacts) == len(REQUIRED_BANNERS)
    assert not list(tmp_path.glob("*.png"))
    # artifacts still name the PNG location even though nothing was rendered there
    for artifact in artifacts:
        assert artifact.svg_path.exists()
        assert artifact.png_path == artifact.svg_path.with_suffix(".png")
        assert not artifact.png_path.exists()

    large = (tmp_path / "chrome-large-promo.svg").read_text(encoding="utf-8")
    marquee = (tmp_path / "chrome-marquee-promo.svg").read_text(encoding="utf-8")
    assert 'viewBox="0 0 420 380"' in large
    assert 'viewBox="0 0 716 200"' in marquee
    assert marquee.endswith("</svg>\n") and not marquee.endswith("\n\n")


def test_rerun_overwrites_with_identical_documents(tmp_path):
    asyncio.run(run_batch(REQUIRED_BANNERS, tmp_path, rasterize=False))
    first = {p.name: p.read_bytes() for p in tmp_path.glob("*.svg")}
    (tmp_path / "github-social-preview.svg").write_text("stale", encoding="utf-8")
    asyncio.run(run_batch(REQUIRED_BANNERS, tmp_path, rasterize=False))
    second = {p.name: p.read_bytes() for p in tmp_path.glob("*.svg")}
    assert first == second


def test_rendered_rerun_replaces_stale_png(tmp_path):
    stale = tmp_path / "chrome-small-promo.png"
    Image.new("RGB", (10, 10), (255, 0, 0)).save(stale)

    artifacts = asyncio.run(
        run_batch([CanvasSpec("chrome-small-promo", 440, 280)], tmp_path, renderer_factory=FakeRenderer)
    )

    assert artifacts[0].png_path == stale
    assert read_png_size(stale) == (440, 280)
    with Image.open(stale) as image:
        assert image.convert("RGB").getpixel((0, 0)) == (48, 48, 48)


def test_graph_rasterizes_only_with_a_renderer():
    assert set(build_workflow().nodes) == {"select", "compose", "persist"}
    with_renderer = build_workflow(renderer=FakeRenderer())
    assert set(with_renderer.nodes) == {"select", "compose", "persist", "rasterize"}
    assert ("persist", "rasterize") in with_renderer.edges


def test_render_failure_aborts_batch_and_keeps_earlier_files(tmp_path):
    renderer = FakeRenderer(fail_on="chrome-small-promo")
    with pytest.raises(RuntimeError, match="capture failed"):
        asyncio.run(run_batch(REQUIRED_BANNERS, tmp_path, renderer_factory=lambda: renderer))

    assert renderer.closed
    assert (tmp_path / "github-social-preview.png").exists()
    assert (tmp_path / "chrome-small-promo.svg").exists()
    assert not (tmp_path / "chrome-large-promo.svg").exists()


def test_invalid_manifest_fails_before_opening_renderer(tmp_path):
    with pytest.raises(ValueError):
        asyncio.run(run_batch([CanvasSpec("broken", 0, 10)], tmp_path, renderer_factory=_no_browser))


def test_background_mismatch_is_reported(tmp_path, capsys):
    renderer = FakeRenderer(fill="#ffffff")
    asyncio.run(run_batch(REQUIRED_BANNERS[:1], tmp_path, renderer_factory=lambda: renderer))
    assert "[WARN] github-social-preview: left edge" in capsys.readouterr().out
