"""Frame payloads recorded by the simulation and consumed by the encoder."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import CanvasGeometry
from .bricks import Brick, BrickStatus
from .render_context import RenderContext

if TYPE_CHECKING:
    from .simulation import SimulationState


@dataclass(frozen=True)
class Ball:
    x: float
    y: float
    vx: float
    vy: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Ball, paddle and brick visibility at one captured frame."""

    ball_x: float
    ball_y: float
    paddle_x: float
    brick_statuses: tuple[BrickStatus, ...]

    def visible_count(self) -> int:
        return sum(1 for status in self.brick_statuses if status == "visible")


SimulationHistory = tuple[FrameSnapshot, ...]


@dataclass(frozen=True)
class SimulationRun:
    """A finished simulation together with the static scene it ran on."""

    geometry: CanvasGeometry
    bricks: tuple[Brick, ...]
    history: SimulationHistory
    context: RenderContext


def snapshot_frame(state: "SimulationState") -> FrameSnapshot:
    """Build an immutable snapshot from the current simulation state."""
    return FrameSnapshot(
        ball_x=state.ball.x,
        ball_y=state.ball.y,
        paddle_x=state.paddle_x,
        brick_statuses=state.brick_statuses,
    )
