"""
Ticket office console entry point.

Usage:
    golondrina                  # Start the interactive ticket office
    golondrina --seed 42        # Reproducible seat draws
    golondrina --log-level DEBUG
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from ..services.registry import PassengerRegistry
from ..utils.config import TicketOfficeConfig, load_config
from .menu import TicketOfficeMenu
from .prompts import ConsolePrompter

# Initialize typer app and rich console
app = typer.Typer(
    help="Golondrina Veloz ticket office",
    add_completion=False,
)
console = Console()


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the random seat allocator",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override the configured log level",
    ),
    env_file: Optional[str] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file (default: ./.env)",
    ),
):
    """Run the interactive ticket office."""
    try:
        config = load_config(env_file)
        overrides = {}
        if seed is not None:
            overrides["random_seed"] = seed
        if log_level is not None:
            overrides["log_level"] = log_level
        if overrides:
            config = TicketOfficeConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        console.print(f"[red]❌ Failed to start ticket office: {e}[/red]")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = PassengerRegistry.from_config(config)
    menu = TicketOfficeMenu(registry, console, ConsolePrompter(console))
    raise typer.Exit(code=menu.run())


if __name__ == "__main__":
    app()
