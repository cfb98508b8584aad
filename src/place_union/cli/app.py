"""Typer CLI root application."""

import typer

from place_union.core.config import get_settings
from place_union.core.logging import setup_logging

app = typer.Typer(name="place-union", help="City-or-Country places stored as nullable foreign keys")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from place_union.cli.db_cmd import db_app
    from place_union.cli.place_cmd import place_app
    from place_union.cli.seed_cmd import seed

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(place_app, name="place", help="Place lookup and creation commands")
    app.command("seed")(seed)


_register_subcommands()


def main() -> None:
    """Console script entry point."""
    app()
