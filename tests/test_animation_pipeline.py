"""Tests for the end-to-end rendering pipeline."""

import dataclasses
import xml.etree.ElementTree as ET

from gh_breakout.animation_pipeline import generate_svg, generate_svgs, run_simulation
from gh_breakout.config import DEFAULT_CONFIG
from gh_breakout.game import RenderContext

SVG_NS = "{http://www.w3.org/2000/svg}"


def _brick_rects(markup: str) -> list[ET.Element]:
    root = ET.fromstring(markup)
    # The paddle is the last rect
    return root.findall(f"{SVG_NS}rect")[:-1]


def test_single_brick_document_animates_its_destruction(single_brick_grid):
    markup = generate_svg(single_brick_grid)
    bricks = _brick_rects(markup)

    assert len(bricks) == 1
    animate = bricks[0].find(f"{SVG_NS}animate")
    assert animate is not None
    assert animate.attrib["values"] == "1;1;0;0"


def test_empty_grid_renders_valid_document_without_bricks(empty_grid):
    markup = generate_svg(empty_grid)
    root = ET.fromstring(markup)

    assert _brick_rects(markup) == []
    assert root.find(f"{SVG_NS}circle") is not None
    assert root.find(f".//{SVG_NS}animate") is None


def test_generate_svgs_returns_both_palette_modes(single_brick_grid):
    documents = generate_svgs(single_brick_grid)

    assert set(documents) == {"light", "dark"}
    assert 'fill="#40c463"' in documents["light"]
    assert 'fill="#196C2E"' in documents["dark"]


def test_palette_modes_share_the_same_simulation(multi_week_grid):
    config = dataclasses.replace(DEFAULT_CONFIG, max_frames=500)

    light = run_simulation(multi_week_grid, RenderContext.lightmode(), config)
    dark = run_simulation(multi_week_grid, RenderContext.darkmode(), config)

    assert light.history == dark.history
    assert [(b.x, b.y) for b in light.bricks] == [(b.x, b.y) for b in dark.bricks]


def test_generate_svg_is_deterministic_and_leaves_grid_untouched(multi_week_grid):
    config = dataclasses.replace(DEFAULT_CONFIG, max_frames=500)
    snapshot = [list(week) for week in multi_week_grid]

    first = generate_svg(multi_week_grid, dark_mode=True, config=config)
    second = generate_svg(multi_week_grid, dark_mode=True, config=config)

    assert first == second
    assert multi_week_grid == snapshot


def test_frame_cap_leaves_remaining_bricks_static(multi_week_grid):
    config = dataclasses.replace(DEFAULT_CONFIG, max_frames=2)
    markup = generate_svg(multi_week_grid, config=config)

    static = [rect for rect in _brick_rects(markup) if rect.find(f"{SVG_NS}animate") is None]
    assert static
    assert all(rect.attrib["opacity"] == "1" for rect in static)
