"""CLI interface for gh-breakout."""

import dataclasses
import json
import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import run_simulation
from .config import DEFAULT_CONFIG, BreakoutConfig
from .game.bricks import ContributionGrid, validate_grid
from .game.render_context import RenderContext
from .github_client import GitHubAPIError, fetch_contribution_colors
from .output import SvgOutputProvider

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)

USERNAME_ENV_VARS = ("INPUT_GITHUB_USERNAME", "GITHUB_USERNAME")
TOKEN_ENV_VARS = ("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    username: str = typer.Argument(None, help="GitHub username to fetch data for"),
    token: str = typer.Option(
        None,
        "--token",
        "-t",
        help="GitHub token (defaults to INPUT_GITHUB_TOKEN, GITHUB_TOKEN or GH_TOKEN)",
    ),
    raw_input: str = typer.Option(
        None,
        "--raw-input",
        "--raw-in",
        "-ri",
        help="Load contribution colors from JSON file (skips GitHub API call)",
    ),
    raw_output: str = typer.Option(
        None,
        "--raw-output",
        "--raw-out",
        "-ro",
        help="Save contribution colors to JSON file",
    ),
    output_dir: str = typer.Option(
        "output",
        "--output-dir",
        "-o",
        help="Directory receiving light.svg and dark.svg",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to simulate",
    ),
) -> None:
    """
    Render a GitHub contribution graph as an animated Breakout game.

    Both a light and a dark SVG are written to the output directory.

    Examples:
      # Fetch from GitHub and save the raw colors
      gh-breakout octocat --raw-output colors.json

      # Render from saved colors
      gh-breakout --raw-input colors.json
    """
    try:
        if raw_input:
            grid = _load_grid_from_file(raw_input)
        else:
            username = username or _first_env(USERNAME_ENV_VARS)
            if not username:
                raise CLIError("Username is required")
            grid = _load_grid_from_github(username, token or _first_env(TOKEN_ENV_VARS))

        if raw_output:
            _save_grid_to_file(grid, raw_output)

        config = DEFAULT_CONFIG
        if max_frames is not None:
            config = dataclasses.replace(config, max_frames=max_frames)

        _generate_outputs(grid, Path(output_dir), config)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _first_env(names: tuple[str, ...]) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def _load_grid_from_file(file_path: str) -> ContributionGrid:
    """Load a contribution color grid from a JSON file."""
    console.print(f"[bold blue]Loading data from {file_path}...[/bold blue]")
    try:
        with open(file_path, "r") as f:
            return validate_grid(json.load(f))
    except FileNotFoundError:
        raise CLIError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in '{file_path}': {e}")
    except ValueError as e:
        raise CLIError(f"Invalid contribution grid in '{file_path}': {e}")


def _load_grid_from_github(username: str, token: str | None) -> ContributionGrid:
    """Fetch the contribution color grid from the GitHub API."""
    if not token:
        raise CLIError(
            "GitHub token not found. "
            "Pass --token or set GITHUB_TOKEN (or GH_TOKEN) in the environment."
        )

    console.print(f"[bold blue]Fetching contribution data for {username}...[/bold blue]")
    try:
        return fetch_contribution_colors(username, token)
    except GitHubAPIError as e:
        raise CLIError(str(e))


def _save_grid_to_file(grid: ContributionGrid, file_path: str) -> None:
    """Save the contribution color grid to a JSON file."""
    try:
        with open(file_path, "w") as f:
            json.dump(grid, f, indent=2)
        console.print(f"[green]✓[/green] Data saved to {file_path}")
    except IOError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


def _generate_outputs(grid: ContributionGrid, output_dir: Path, config: BreakoutConfig) -> None:
    """Simulate and write one SVG per palette mode."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CLIError(f"Failed to create output directory '{output_dir}': {e}")

    written: list[str] = []
    for context in (RenderContext.lightmode(), RenderContext.darkmode()):
        output_path = output_dir / f"{context.name}.svg"
        console.print(f"[bold blue]Generating {context.name} SVG...[/bold blue]")
        run = run_simulation(grid, context, config)
        provider = SvgOutputProvider(str(output_path), config)
        try:
            provider.write(provider.encode(run))
        except OSError as e:
            raise CLIError(f"Failed to write '{output_path}': {e}")
        written.append(str(output_path))

    console.print(f"[green]✓[/green] SVGs generated: {', '.join(written)}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
