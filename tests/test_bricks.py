"""Tests for building bricks from contribution grids."""

import pytest

from gh_breakout.config import BreakoutConfig, CanvasGeometry
from gh_breakout.constants import GITHUB_GREENS_DARK, LIGHT_TO_DARK_COLOR_MAP
from gh_breakout.game.bricks import Brick, build_bricks, validate_grid
from gh_breakout.game.render_context import RenderContext


def test_build_bricks_positions_and_skips_missing_days():
    """Bricks are laid out column-major on the cell pitch, skipping empty days."""
    grid = [
        ["#ebedf0", None, "#9be9a8", None, None, None, None],
        [None, None, "#216e39"],
    ]

    bricks = build_bricks(grid, RenderContext.lightmode())

    assert bricks == [
        Brick(x=15, y=15, color="#ebedf0"),
        Brick(x=15, y=45, color="#9be9a8"),
        Brick(x=30, y=45, color="#216e39"),
    ]


def test_build_bricks_ignores_days_beyond_row_count():
    grid = [["#9be9a8"] * 9]

    bricks = build_bricks(grid, RenderContext.lightmode())

    assert len(bricks) == 7
    assert bricks[-1].y == 6 * 15 + 15


def test_build_bricks_uses_config_geometry():
    config = BreakoutConfig(padding=5, brick_size=10, brick_gap=2)
    grid = [[None, "#9be9a8"], [None, "#9be9a8"]]

    bricks = build_bricks(grid, RenderContext.lightmode(), config)

    assert [(brick.x, brick.y) for brick in bricks] == [(5, 17), (17, 17)]


def test_build_bricks_empty_grid():
    assert build_bricks([], RenderContext.lightmode()) == []
    assert build_bricks([[None] * 7], RenderContext.darkmode()) == []


def test_dark_mode_maps_every_known_color():
    """Every known light color resolves to its documented dark counterpart."""
    context = RenderContext.darkmode()

    for light, dark in LIGHT_TO_DARK_COLOR_MAP.items():
        assert context.resolve_brick_color(light) == dark
        assert context.resolve_brick_color(light.upper()) == dark


def test_dark_mode_falls_back_to_darkest_shade():
    context = RenderContext.darkmode()

    assert context.resolve_brick_color("#123456") == GITHUB_GREENS_DARK[0]
    assert context.resolve_brick_color("red") == GITHUB_GREENS_DARK[0]


def test_light_mode_keeps_source_colors():
    context = RenderContext.lightmode()

    assert context.resolve_brick_color("#9BE9A8") == "#9BE9A8"
    assert context.resolve_brick_color("#123456") == "#123456"


def test_dark_mode_bricks_carry_mapped_colors():
    bricks = build_bricks([["#9be9a8", "#ABCDEF"]], RenderContext.darkmode())

    assert [brick.color for brick in bricks] == ["#033A16", "#151B23"]


def test_canvas_geometry_from_week_count():
    geometry = CanvasGeometry.from_week_count(53)

    assert geometry.width == 53 * 15 + 30 - 3
    assert geometry.paddle_y == 15 + (7 * 15 - 3) + 100
    assert geometry.height == geometry.paddle_y + 10 + 15


def test_validate_grid_accepts_colors_and_nulls():
    assert validate_grid([["#fff", None], []]) == [["#fff", None], []]


@pytest.mark.parametrize(
    "data, message",
    [
        ({"weeks": []}, "list of weeks"),
        ([["#fff"], "#fff"], "Week 1"),
        ([["#fff", 3]], "Day 1 of week 0"),
    ],
)
def test_validate_grid_rejects_malformed_data(data, message):
    with pytest.raises(ValueError, match=message):
        validate_grid(data)
