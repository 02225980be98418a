"""Keyframe track encoding for SVG output."""

from dataclasses import dataclass

from ..config import DEFAULT_CONFIG, BreakoutConfig
from ..game.timeline import SimulationHistory

OPAQUE = 1.0
TRANSPARENT = 0.0


@dataclass(frozen=True)
class KeyframeTrack:
    """Values at normalized times in ``[0, 1]``; a single value means static."""

    key_times: tuple[float, ...]
    values: tuple[float, ...]

    @classmethod
    def static(cls, value: float) -> "KeyframeTrack":
        return cls(key_times=(0.0,), values=(value,))

    @property
    def is_static(self) -> bool:
        return len(self.values) <= 1

    def points(self) -> tuple[tuple[float, float], ...]:
        return tuple(zip(self.key_times, self.values))


@dataclass(frozen=True)
class AnimationTracks:
    """Encoded timelines for every animated element of one document."""

    frame_count: int
    duration_seconds: float
    key_times: tuple[float, ...]
    ball_x: KeyframeTrack
    ball_y: KeyframeTrack
    paddle_x: KeyframeTrack
    bricks: tuple[KeyframeTrack, ...]


def encode_animation_tracks(
    history: SimulationHistory,
    brick_count: int,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> AnimationTracks:
    """
    Reduce a simulation history to keyframe tracks.

    Ball and paddle keep one value per captured frame on a shared time axis.
    Each brick is visible until at most one instant, so its whole history
    collapses to either a static value or a four point step.

    Args:
        history: Captured frames, at least one
        brick_count: Number of bricks the history was simulated with
        config: Precision and playback settings

    Returns:
        The encoded tracks
    """
    if not history:
        raise ValueError("Simulation history must contain at least one frame")

    frame_count = len(history)
    key_times = _tl_key_times(frame_count)
    precision = config.value_precision

    def _track(values: list[float]) -> KeyframeTrack:
        rounded = tuple(round(value, precision) for value in values)
        if frame_count == 1:
            return KeyframeTrack.static(rounded[0])
        return KeyframeTrack(key_times=key_times, values=rounded)

    return AnimationTracks(
        frame_count=frame_count,
        duration_seconds=frame_count * config.seconds_per_frame * max(1, config.capture_stride),
        key_times=key_times,
        ball_x=_track([frame.ball_x for frame in history]),
        ball_y=_track([frame.ball_y for frame in history]),
        paddle_x=_track([frame.paddle_x for frame in history]),
        bricks=tuple(_tl_brick_track(history, index) for index in range(brick_count)),
    )


def _tl_key_times(frame_count: int) -> tuple[float, ...]:
    if frame_count <= 1:
        return (0.0,)
    last = frame_count - 1
    return tuple(index / last for index in range(frame_count))


def _tl_first_hidden_frame(history: SimulationHistory, brick_index: int) -> int | None:
    for frame_index, frame in enumerate(history):
        if frame.brick_statuses[brick_index] != "visible":
            return frame_index
    return None


def _tl_brick_track(history: SimulationHistory, brick_index: int) -> KeyframeTrack:
    first_hidden = _tl_first_hidden_frame(history, brick_index)
    if first_hidden is None:
        return KeyframeTrack.static(OPAQUE)

    # Two coincident key times make a hard step without interpolation
    t = first_hidden / (len(history) - 1) if len(history) > 1 else 0.0
    return KeyframeTrack(
        key_times=(0.0, t, t, 1.0),
        values=(OPAQUE, OPAQUE, TRANSPARENT, TRANSPARENT),
    )
