"""Output providers and SVG encoding."""

from ._svg_document import render_svg_document
from ._svg_tracks import AnimationTracks, KeyframeTrack, encode_animation_tracks
from .base import OutputProvider
from .svg_provider import SvgOutputProvider

__all__ = [
    "AnimationTracks",
    "KeyframeTrack",
    "OutputProvider",
    "SvgOutputProvider",
    "encode_animation_tracks",
    "render_svg_document",
]
