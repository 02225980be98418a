"""Palette mode and theme colors used when building and drawing bricks."""

from dataclasses import dataclass

from ..constants import BALL_COLOR, GITHUB_GREENS_DARK, LIGHT_TO_DARK_COLOR_MAP, PADDLE_COLOR


@dataclass(frozen=True)
class RenderContext:
    """Theme for one rendered document."""

    dark_mode: bool
    ball_color: str = BALL_COLOR
    paddle_color: str = PADDLE_COLOR

    @classmethod
    def lightmode(cls) -> "RenderContext":
        return cls(dark_mode=False)

    @classmethod
    def darkmode(cls) -> "RenderContext":
        return cls(dark_mode=True)

    @property
    def name(self) -> str:
        return "dark" if self.dark_mode else "light"

    def resolve_brick_color(self, color: str) -> str:
        """Map a source (light theme) color into this context's palette."""
        if not self.dark_mode:
            return color
        return LIGHT_TO_DARK_COLOR_MAP.get(color.lower(), GITHUB_GREENS_DARK[0])
