"""Build bricks from a contribution color grid."""

from dataclasses import dataclass
from typing import Literal, Sequence

from ..config import DEFAULT_CONFIG, BreakoutConfig
from .render_context import RenderContext

BrickStatus = Literal["visible", "hidden"]
ContributionGrid = Sequence[Sequence[str | None]]


@dataclass(frozen=True)
class Brick:
    """A destructible cell; its index in the brick list is its identity."""

    x: int
    y: int
    color: str


def build_bricks(
    grid: ContributionGrid,
    context: RenderContext,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> list[Brick]:
    """
    Create bricks column by column, skipping days without a color.

    Args:
        grid: Colors indexed as ``grid[week][day]``; ``None`` means no tile
        context: Palette mode used to resolve each brick's color
        config: Geometry settings

    Returns:
        Bricks in column-major order
    """
    bricks: list[Brick] = []
    for column, days in enumerate(grid):
        for row in range(config.rows):
            color = days[row] if row < len(days) else None
            if not color:
                continue
            bricks.append(
                Brick(
                    x=column * config.cell_pitch + config.padding,
                    y=row * config.cell_pitch + config.padding,
                    color=context.resolve_brick_color(color),
                )
            )
    return bricks


def validate_grid(data: object) -> list[list[str | None]]:
    """Check that loaded JSON is a ``[week][day]`` grid of colors or nulls."""
    if not isinstance(data, list):
        raise ValueError("Contribution grid must be a list of weeks")
    grid: list[list[str | None]] = []
    for week_idx, week in enumerate(data):
        if not isinstance(week, list):
            raise ValueError(f"Week {week_idx} must be a list of day colors")
        for day_idx, color in enumerate(week):
            if color is not None and not isinstance(color, str):
                raise ValueError(
                    f"Day {day_idx} of week {week_idx} must be a color string or null"
                )
        grid.append(list(week))
    return grid
