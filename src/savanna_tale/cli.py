"""CLI interface for savanna-tale."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .animation_pipeline import encode_animation
from .config import RenderSettings
from .constants import TOTAL_DURATION
from .output import resolve_output_provider, supported_output_formats
from .story.raster_animation import frames_per_loop, render_still
from .story.scenes import SCENES, SceneInterval

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="Render the Savanna Tale lion and monkey vignette.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def render(
    out: str = typer.Option(
        "savanna-tale.gif",
        "--output",
        "-out",
        "-o",
        help=f"Animation file to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    fps: int | None = typer.Option(None, "--fps", help="Frames per second"),
    scale: float | None = typer.Option(
        None, "--scale", help="Output pixels per logical unit (1.0 = 960x540)"
    ),
    captions: bool | None = typer.Option(
        None, "--captions/--no-captions", help="Burn the active scene caption into frames"
    ),
    loops: int | None = typer.Option(None, "--loops", help="Number of story loops to render"),
    max_frames: int | None = typer.Option(
        None, "--max-frame", help="Maximum number of frames to generate"
    ),
) -> None:
    """
    Render the looping story to an animated GIF, WebP or PNG.

    Defaults come from SAVANNA_TALE_* environment variables (a .env file is
    honoured); command-line options take precedence.

    Examples:
      savanna-tale render -o tale.webp --fps 24 --scale 0.5
    """
    try:
        settings = _resolve_settings(fps=fps, scale=scale, captions=captions, loops=loops)
        if max_frames is not None and max_frames <= 0:
            raise CLIError("--max-frame must be positive")

        try:
            provider = resolve_output_provider(out)
        except ValueError as e:
            raise CLIError(str(e))

        frame_count = frames_per_loop(settings.fps) * settings.loops
        if max_frames is not None:
            frame_count = min(frame_count, max_frames)
        ext = Path(out).suffix[1:].upper()
        console.print(
            f"[bold blue]Rendering {frame_count} frames at {settings.fps} fps "
            f"into {ext or out}...[/bold blue]"
        )

        try:
            encoded = encode_animation(
                out,
                settings,
                max_frames=max_frames,
                provider=provider,
                on_scene_change=_print_caption,
            )
        except ValueError as e:
            raise CLIError(f"Failed to generate output: {e}")

        _write_output(out, encoded)
        console.print(f"[green]✓[/green] {ext} saved to {out}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def frame(
    at: float = typer.Option(..., "--at", help="Seconds into the story (wraps past the loop)"),
    out: str = typer.Option("savanna-tale-frame.png", "--output", "-out", "-o", help="PNG file to write"),
    scale: float | None = typer.Option(None, "--scale", help="Output pixels per logical unit"),
    captions: bool | None = typer.Option(
        None, "--captions/--no-captions", help="Burn the active scene caption into the frame"
    ),
) -> None:
    """Render a single still frame."""
    try:
        if at < 0:
            raise CLIError("--at must not be negative")
        settings = _resolve_settings(scale=scale, captions=captions)

        try:
            image = render_still(at, settings)
        except ValueError as e:
            raise CLIError(str(e))
        try:
            image.save(out, format="PNG")
        except OSError as e:
            raise CLIError(f"Failed to save file '{out}': {e}")
        console.print(f"[green]✓[/green] Frame at {at % TOTAL_DURATION:.2f}s saved to {out}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


def scenes() -> None:
    """Print the story timetable."""
    table = Table(title="Savanna Tale")
    table.add_column("Id", style="cyan")
    table.add_column("Scene", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Description")
    for scene in SCENES:
        table.add_row(
            scene.id,
            scene.label,
            f"{scene.start:g}s",
            f"{scene.end:g}s",
            scene.description,
        )
    console.print(table)


def _resolve_settings(**overrides: object) -> RenderSettings:
    try:
        return RenderSettings.from_env().with_overrides(**overrides)
    except ValueError as e:
        raise CLIError(str(e))


def _print_caption(scene: SceneInterval) -> None:
    console.print(f"  [bold]{scene.label}[/bold] [dim]({scene.start:g}s)[/dim] {scene.description}")


def _write_output(output_path: str, encoded: bytes) -> None:
    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        with open(output_path, "wb") as f:
            f.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")


app.command("render")(render)
app.command("frame")(frame)
app.command("scenes")(scenes)

if __name__ == "__main__":
    app()
