"""SVG document assembly from static geometry and encoded tracks."""

from typing import Sequence

from ..config import DEFAULT_CONFIG, BreakoutConfig, CanvasGeometry
from ..game.bricks import Brick
from ..game.render_context import RenderContext
from ._svg_shared import _tl_fixed, _tl_join, _tl_minify, _tl_num
from ._svg_tracks import AnimationTracks, KeyframeTrack


def render_svg_document(
    geometry: CanvasGeometry,
    bricks: Sequence[Brick],
    tracks: AnimationTracks,
    context: RenderContext,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> str:
    """Assemble the animated SVG markup and compact its whitespace.

    All timelines loop indefinitely with the same duration, so ball, paddle and
    bricks stay in sync.
    """
    if len(bricks) != len(tracks.bricks):
        raise ValueError("Every brick needs exactly one encoded track")

    width = _tl_num(geometry.width)
    height = _tl_num(geometry.height)
    dur = f"{_tl_num(tracks.duration_seconds)}s"

    parts: list[str] = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        'xmlns="http://www.w3.org/2000/svg">'
    ]
    parts.extend(
        _tl_brick_element(brick, track, dur, config)
        for brick, track in zip(bricks, tracks.bricks)
    )
    parts.append(_tl_paddle_element(geometry, tracks, context, dur, config))
    parts.append(_tl_ball_element(tracks, context, dur, config))
    parts.append("</svg>")
    return _tl_minify("\n".join(parts))


def _tl_brick_element(
    brick: Brick, track: KeyframeTrack, dur: str, config: BreakoutConfig
) -> str:
    rect = (
        f'<rect x="{brick.x}" y="{brick.y}" width="{config.brick_size}" '
        f'height="{config.brick_size}" rx="{config.brick_radius}" fill="{brick.color}"'
    )
    if track.is_static:
        return f'{rect} opacity="{_tl_num(track.values[0])}"/>'
    return (
        f"{rect}>"
        f'<animate attributeName="opacity" values="{_tl_values(track.values)}" '
        f'keyTimes="{_tl_join(track.key_times, config.key_time_precision)}" '
        f'dur="{dur}" fill="freeze" repeatCount="indefinite"/>'
        "</rect>"
    )


def _tl_paddle_element(
    geometry: CanvasGeometry,
    tracks: AnimationTracks,
    context: RenderContext,
    dur: str,
    config: BreakoutConfig,
) -> str:
    shape = (
        f'y="{_tl_num(geometry.paddle_y)}" width="{config.paddle_width}" '
        f'height="{config.paddle_height}" rx="{config.paddle_radius}" fill="{context.paddle_color}"'
    )
    if tracks.paddle_x.is_static:
        return f'<rect x="{_tl_fixed(tracks.paddle_x.values[0], config.value_precision)}" {shape}/>'
    return (
        f"<rect {shape}>"
        f"{_tl_position_animate('x', tracks.paddle_x, dur, config)}"
        "</rect>"
    )


def _tl_ball_element(
    tracks: AnimationTracks,
    context: RenderContext,
    dur: str,
    config: BreakoutConfig,
) -> str:
    shape = f'r="{config.ball_radius}" fill="{context.ball_color}"'
    if tracks.ball_x.is_static and tracks.ball_y.is_static:
        cx = _tl_fixed(tracks.ball_x.values[0], config.value_precision)
        cy = _tl_fixed(tracks.ball_y.values[0], config.value_precision)
        return f'<circle cx="{cx}" cy="{cy}" {shape}/>'
    return (
        f"<circle {shape}>"
        f"{_tl_position_animate('cx', tracks.ball_x, dur, config)}"
        f"{_tl_position_animate('cy', tracks.ball_y, dur, config)}"
        "</circle>"
    )


def _tl_position_animate(
    attribute: str, track: KeyframeTrack, dur: str, config: BreakoutConfig
) -> str:
    return (
        f'<animate attributeName="{attribute}" '
        f'values="{_tl_join(track.values, config.value_precision)}" '
        f'keyTimes="{_tl_join(track.key_times, config.key_time_precision)}" '
        f'dur="{dur}" repeatCount="indefinite"/>'
    )


def _tl_values(values: tuple[float, ...]) -> str:
    return ";".join(_tl_num(value) for value in values)
