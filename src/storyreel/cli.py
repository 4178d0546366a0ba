"""CLI entry point for storyreel."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .models import ExportConfig, ExportFormat, Quality, Resolution, Storyboard, Watermark

app = typer.Typer(
    name="storyreel",
    help="Compose short videos from a timeline of scenes",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"storyreel version {__version__}")
        raise typer.Exit()


def load_storyboard(path: Path) -> Storyboard:
    """Load a storyboard or exit with an error message."""
    if not path.exists():
        typer.echo(f"❌ No storyboard found at {path}")
        raise typer.Exit(1)
    try:
        return Storyboard.from_yaml(path)
    except Exception as e:
        typer.echo(f"❌ Error loading storyboard: {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """storyreel - assemble a short video scene by scene."""
    pass


@app.command()
def status(
    storyboard: Path = typer.Option(
        Path("storyboard.yaml"),
        "--storyboard",
        "-s",
        help="Path to storyboard YAML file",
        file_okay=True,
        dir_okay=False
    )
) -> None:
    """Show the scenes of a storyboard."""
    from .editor import Studio

    board = load_storyboard(storyboard)
    studio = Studio.from_storyboard(board)

    typer.echo(f"📁 Project: {board.title}")
    typer.echo(f"   Scenes: {len(studio.scenes)}")
    typer.echo(f"   Total duration: {studio.scenes.total_duration}s")

    typer.echo("\n📽️  Scenes:")
    for position, scene in enumerate(studio.scenes, start=1):
        typer.echo(f"   {position}. {scene.duration}s, {scene.transition.value}")
        if scene.script:
            preview = scene.script[:60] + "..." if len(scene.script) > 60 else scene.script
            typer.echo(f"      → {preview}")


@app.command()
def suggest(
    script: str = typer.Argument(
        "",
        help="Scene script to get a suggestion for"
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Use stock suggestions instead of Claude"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Suggest an improvement for a scene script."""
    from .services import CannedSuggestions, default_suggestion_service, request_suggestion

    setup_logging(verbose)
    if offline:
        service = CannedSuggestions()
    else:
        try:
            config.validate_required()
        except ValueError as e:
            typer.echo(f"❌ Configuration error: {e}")
            typer.echo("   Use --offline for stock suggestions")
            raise typer.Exit(1)
        service = default_suggestion_service()

    suggestion = request_suggestion(service, script)
    if suggestion is None:
        typer.echo("⚠️  No suggestion available right now")
        raise typer.Exit(1)

    typer.echo(f"✨ {suggestion}")


@app.command()
def export(
    storyboard: Path = typer.Option(
        Path("storyboard.yaml"),
        "--storyboard",
        "-s",
        help="Path to storyboard YAML file",
        file_okay=True,
        dir_okay=False
    ),
    resolution: Resolution = typer.Option(
        Resolution.P1080,
        "--resolution",
        "-r",
        help="Output resolution"
    ),
    output_format: ExportFormat = typer.Option(
        ExportFormat.MP4,
        "--format",
        "-f",
        help="Output video format"
    ),
    quality: Quality = typer.Option(
        Quality.HIGH,
        "--quality",
        "-q",
        help="Output quality preset"
    ),
    watermark: Optional[str] = typer.Option(
        None,
        "--watermark",
        "-w",
        help="Burn this watermark text into the video"
    ),
    branding: bool = typer.Option(
        False,
        "--branding",
        help="Include the branding logo"
    ),
    timeout: float = typer.Option(
        60.0,
        "--timeout",
        help="Give up after this many seconds"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Run a simulated export of a storyboard."""
    from .editor import Studio

    setup_logging(verbose)
    board = load_storyboard(storyboard)
    studio = Studio.from_storyboard(board)

    settings = ExportConfig(
        resolution=resolution,
        format=output_format,
        quality=quality,
        watermark=Watermark(enabled=bool(watermark), text=watermark or ""),
        branding=branding,
    )
    width, height = settings.dimensions

    typer.echo(f"📼 Exporting {board.title}")
    typer.echo(f"   Scenes: {len(studio.scenes)}")
    typer.echo(f"   Duration: {studio.scenes.total_duration}s")
    typer.echo(f"   Output: {output_format.value.upper()} {width}x{height} ({quality.value} quality)")

    pipeline = studio.open_export()

    def on_progress(event) -> None:
        if event.event_type in ("progress", "completed"):
            typer.echo(f"   {event.payload['percent']:>3}%")

    pipeline.subscribe(on_progress)
    pipeline.start(settings)

    try:
        completed = pipeline.wait(timeout)
    finally:
        studio.close_export()

    if not completed:
        typer.echo(f"❌ Export did not finish within {timeout:.0f}s")
        raise typer.Exit(1)

    typer.echo(f"✅ Export complete")
    typer.echo(f"   Size: ~{pipeline.estimated_size_mb:.1f} MB")


if __name__ == "__main__":
    app()
