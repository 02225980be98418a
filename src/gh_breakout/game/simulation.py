"""Deterministic ball, paddle and brick simulation."""

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from ..config import DEFAULT_CONFIG, BreakoutConfig, CanvasGeometry
from .bricks import Brick, BrickStatus
from .timeline import Ball, SimulationHistory, snapshot_frame


@dataclass(frozen=True)
class SimulationState:
    """Everything that changes between frames."""

    ball: Ball
    paddle_x: float
    brick_statuses: tuple[BrickStatus, ...]
    frame: int = 0

    def has_visible_bricks(self) -> bool:
        return "visible" in self.brick_statuses


def circle_rect_collision(
    circle_x: float,
    circle_y: float,
    radius: float,
    rect_x: float,
    rect_y: float,
    rect_width: float,
    rect_height: float,
) -> bool:
    """Check whether a circle overlaps a rectangle using the closest point test."""
    closest_x = _clamp(circle_x, rect_x, rect_x + rect_width)
    closest_y = _clamp(circle_y, rect_y, rect_y + rect_height)
    dx = circle_x - closest_x
    dy = circle_y - closest_y
    return dx * dx + dy * dy <= radius * radius


def initial_state(
    bricks: Sequence[Brick],
    geometry: CanvasGeometry,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> SimulationState:
    """Center the ball and paddle and launch the ball at the configured angle."""
    ball = Ball(
        x=geometry.width / 2,
        y=geometry.height - config.ball_start_offset,
        vx=config.ball_speed * math.cos(config.launch_angle),
        vy=config.ball_speed * math.sin(config.launch_angle),
    )
    return SimulationState(
        ball=ball,
        paddle_x=(geometry.width - config.paddle_width) / 2,
        brick_statuses=tuple("visible" for _ in bricks),
    )


def step_frame(
    state: SimulationState,
    bricks: Sequence[Brick],
    geometry: CanvasGeometry,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> SimulationState:
    """
    Advance the simulation by one frame.

    The paddle follows the ball's position from before the move. At most one
    brick is destroyed per frame: the first visible brick in list order that
    overlaps the ball.

    Args:
        state: State at the end of the previous frame
        bricks: Static brick layout, aligned with ``state.brick_statuses``
        geometry: Canvas dimensions and paddle height
        config: Geometry and speed settings

    Returns:
        The state at the end of this frame
    """
    radius = config.ball_radius
    min_x = config.padding + radius
    max_x = geometry.width - config.padding - radius
    min_y = config.padding + radius
    max_y = geometry.height - config.padding - radius

    ball = state.ball
    paddle_x = _clamp(
        ball.x - config.paddle_width / 2,
        config.padding,
        geometry.width - config.padding - config.paddle_width,
    )

    x = ball.x + ball.vx
    y = ball.y + ball.vy
    vx, vy = ball.vx, ball.vy

    # Walls are tested against the position one step ahead
    if x + vx > max_x or x + vx < min_x:
        vx = -vx
    if y + vy < min_y:
        vy = -vy

    # No bottom wall: only the paddle sends the ball back up
    if vy > 0 and y + vy + radius >= geometry.paddle_y and y + radius <= geometry.paddle_y:
        vy = -abs(vy)
        y = geometry.paddle_y - radius

    statuses = state.brick_statuses
    hit = _first_hit_brick(x, y, bricks, statuses, config)
    if hit is not None:
        vy = -vy
        statuses = statuses[:hit] + ("hidden",) + statuses[hit + 1:]

    return SimulationState(
        ball=Ball(x=_clamp(x, min_x, max_x), y=_clamp(y, min_y, max_y), vx=vx, vy=vy),
        paddle_x=paddle_x,
        brick_statuses=statuses,
        frame=state.frame + 1,
    )


def iter_states(
    bricks: Sequence[Brick],
    geometry: CanvasGeometry,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> Iterator[SimulationState]:
    """Yield the state after each frame until all bricks are gone or the frame cap is hit."""
    state = initial_state(bricks, geometry, config)
    while state.has_visible_bricks() and state.frame < config.max_frames:
        state = step_frame(state, bricks, geometry, config)
        yield state


def simulate(
    bricks: Sequence[Brick],
    canvas_width: float,
    canvas_height: float,
    paddle_y: float,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> SimulationHistory:
    """
    Run the simulation to completion and capture frame snapshots.

    A snapshot is captured on every frame whose index is a multiple of
    ``config.capture_stride``. When no frame runs at all (no bricks), the
    initial state is captured so the history is never empty.
    """
    geometry = CanvasGeometry(width=canvas_width, height=canvas_height, paddle_y=paddle_y)
    stride = max(1, config.capture_stride)
    history = [
        snapshot_frame(state)
        for state in iter_states(bricks, geometry, config)
        if (state.frame - 1) % stride == 0
    ]
    if not history:
        history.append(snapshot_frame(initial_state(bricks, geometry, config)))
    return tuple(history)


def _first_hit_brick(
    x: float,
    y: float,
    bricks: Sequence[Brick],
    statuses: tuple[BrickStatus, ...],
    config: BreakoutConfig,
) -> int | None:
    for index, brick in enumerate(bricks):
        if statuses[index] != "visible":
            continue
        if circle_rect_collision(
            x, y, config.ball_radius, brick.x, brick.y, config.brick_size, config.brick_size
        ):
            return index
    return None


def _clamp(value: float, low: float, high: float) -> float:
    # low wins when the range is inverted (canvas narrower than the ball's travel)
    return max(low, min(high, value))
