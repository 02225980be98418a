"""SVG output provider."""

from ..game.timeline import SimulationRun
from ._svg_document import render_svg_document
from ._svg_tracks import encode_animation_tracks
from .base import OutputProvider


class SvgOutputProvider(OutputProvider):
    """Output provider for animated SVG format."""

    def encode(self, run: SimulationRun) -> bytes:
        if not run.history:
            return b""

        brick_count = len(run.bricks)
        for index, frame in enumerate(run.history):
            if len(frame.brick_statuses) == brick_count:
                continue
            raise ValueError(
                "Frame brick statuses must match the brick list "
                f"(got {len(frame.brick_statuses)} at index {index}, expected {brick_count})"
            )

        tracks = encode_animation_tracks(run.history, brick_count, self.config)
        markup = render_svg_document(run.geometry, run.bricks, tracks, run.context, self.config)
        return markup.encode("utf-8")
