"""Command-line interface for Hoops Digest."""

import typer

from hoops_digest.utils.config import ensure_directories
from hoops_digest.utils.logging import setup_logging

from .games import facts, game, scoreboard, story

ensure_directories()
setup_logging()

app = typer.Typer(
    name="hoops-digest",
    help="Hoops Digest - NBA scoreboard, boxscore and game story transforms",
    add_completion=False,
)

app.command()(scoreboard)
app.command()(game)
app.command()(facts)
app.command()(story)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
