"""Breakout simulation for GitHub contribution visualization."""

from .bricks import Brick, BrickStatus, ContributionGrid, build_bricks, validate_grid
from .render_context import RenderContext
from .simulation import (
    SimulationState,
    circle_rect_collision,
    initial_state,
    iter_states,
    simulate,
    step_frame,
)
from .timeline import Ball, FrameSnapshot, SimulationHistory, SimulationRun, snapshot_frame

__all__ = [
    "Ball",
    "Brick",
    "BrickStatus",
    "ContributionGrid",
    "FrameSnapshot",
    "RenderContext",
    "SimulationHistory",
    "SimulationRun",
    "SimulationState",
    "build_bricks",
    "circle_rect_collision",
    "initial_state",
    "iter_states",
    "simulate",
    "snapshot_frame",
    "step_frame",
    "validate_grid",
]
