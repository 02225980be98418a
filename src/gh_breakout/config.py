"""Simulation and encoding configuration."""

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class BreakoutConfig:
    """Geometry, speed and playback settings shared by every pipeline stage."""

    padding: int = constants.PADDING
    rows: int = constants.NUM_DAYS
    brick_size: int = constants.BRICK_SIZE
    brick_gap: int = constants.BRICK_GAP
    brick_radius: int = constants.BRICK_RADIUS
    paddle_width: int = constants.PADDLE_WIDTH
    paddle_height: int = constants.PADDLE_HEIGHT
    paddle_radius: int = constants.PADDLE_RADIUS
    paddle_brick_gap: int = constants.PADDLE_BRICK_GAP
    ball_radius: int = constants.BALL_RADIUS
    ball_speed: float = constants.BALL_SPEED
    launch_angle: float = constants.BALL_LAUNCH_ANGLE
    ball_start_offset: float = constants.BALL_START_OFFSET
    capture_stride: int = constants.CAPTURE_STRIDE
    seconds_per_frame: float = constants.SECONDS_PER_FRAME
    max_frames: int = constants.MAX_FRAMES
    value_precision: int = constants.VALUE_PRECISION
    key_time_precision: int = constants.KEY_TIME_PRECISION

    @property
    def cell_pitch(self) -> int:
        """Distance between the top-left corners of adjacent bricks."""
        return self.brick_size + self.brick_gap


DEFAULT_CONFIG = BreakoutConfig()


@dataclass(frozen=True)
class CanvasGeometry:
    width: float
    height: float
    paddle_y: float

    @classmethod
    def from_week_count(cls, weeks: int, config: BreakoutConfig = DEFAULT_CONFIG) -> "CanvasGeometry":
        """
        Derive canvas dimensions for a contribution grid.

        The right edge sits flush with the last brick column plus padding, and
        the paddle sits a fixed gap below the last brick row.

        Args:
            weeks: Number of week columns in the grid
            config: Geometry settings

        Returns:
            The canvas geometry
        """
        width = weeks * config.cell_pitch + config.padding * 2 - config.brick_gap
        bricks_height = config.rows * config.cell_pitch - config.brick_gap
        paddle_y = config.padding + bricks_height + config.paddle_brick_gap
        height = paddle_y + config.paddle_height + config.padding
        return cls(width=width, height=height, paddle_y=paddle_y)
