"""Shared animation orchestration used by the CLI."""

from .config import DEFAULT_CONFIG, BreakoutConfig, CanvasGeometry
from .game.bricks import ContributionGrid, build_bricks
from .game.render_context import RenderContext
from .game.simulation import simulate
from .game.timeline import SimulationRun
from .output import OutputProvider, SvgOutputProvider


def run_simulation(
    grid: ContributionGrid,
    context: RenderContext,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> SimulationRun:
    """Build bricks for the palette mode and simulate the game on them."""
    geometry = CanvasGeometry.from_week_count(len(grid), config)
    bricks = tuple(build_bricks(grid, context, config))
    history = simulate(bricks, geometry.width, geometry.height, geometry.paddle_y, config)
    return SimulationRun(geometry=geometry, bricks=bricks, history=history, context=context)


def encode_animation(
    grid: ContributionGrid,
    context: RenderContext,
    config: BreakoutConfig = DEFAULT_CONFIG,
    provider: OutputProvider | None = None,
) -> bytes:
    """Encode animation bytes for one palette mode."""
    target_provider = provider or SvgOutputProvider(config=config)
    return target_provider.encode(run_simulation(grid, context, config))


def generate_svg(
    grid: ContributionGrid,
    dark_mode: bool = False,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> str:
    """Render the animated SVG document for one palette mode."""
    context = RenderContext.darkmode() if dark_mode else RenderContext.lightmode()
    return encode_animation(grid, context, config).decode("utf-8")


def generate_svgs(
    grid: ContributionGrid,
    config: BreakoutConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Render both palette modes from the same grid, keyed by mode name."""
    return {
        context.name: encode_animation(grid, context, config).decode("utf-8")
        for context in (RenderContext.lightmode(), RenderContext.darkmode())
    }
