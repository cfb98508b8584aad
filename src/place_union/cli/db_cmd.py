"""Database migration CLI commands using Alembic programmatically.

The ini file's ``script_location`` is resolved against the directory of the
ini file, so the commands work from any working directory when ``--config``
points at the project's ``alembic.ini``.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import typer
from alembic.config import Config
from alembic.util import CommandError
from loguru import logger

db_app = typer.Typer()

_DEFAULT_CONFIG = Path("alembic.ini")


def alembic_config(ini_path: Path) -> Config:
    """Build an Alembic config whose script location is anchored to the ini file.

    Raises:
        FileNotFoundError: If the ini file does not exist.
    """
    ini_path = ini_path.resolve()
    if not ini_path.is_file():
        msg = f"Alembic config not found: {ini_path}"
        raise FileNotFoundError(msg)

    config = Config(str(ini_path), stdout=sys.stdout)
    script_location = Path(config.get_main_option("script_location", "alembic"))
    if not script_location.is_absolute():
        config.set_main_option("script_location", str(ini_path.parent / script_location))
    return config


def _load_config(ini_path: Path) -> Config:
    try:
        return alembic_config(ini_path)
    except FileNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e


def _run(action: str, fn: Callable[..., object], *args: object, **kwargs: object) -> None:
    try:
        fn(*args, **kwargs)
    except CommandError as e:
        logger.error(f"Database {action} failed: {e}")
        raise typer.Exit(code=1) from e


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    sql: bool = typer.Option(False, "--sql", help="Print the migration SQL instead of running it"),
    config_path: Path = typer.Option(_DEFAULT_CONFIG, "--config", "-c", help="Path to alembic.ini"),
) -> None:
    """Run database migrations up to the target revision."""
    from alembic import command

    config = _load_config(config_path)
    if sql:
        _run("upgrade", command.upgrade, config, revision, sql=True)
        return

    logger.info(f"Upgrading database to {revision}")
    _run("upgrade", command.upgrade, config, revision)
    logger.info("Database upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: Path = typer.Option(_DEFAULT_CONFIG, "--config", "-c", help="Path to alembic.ini"),
) -> None:
    """Roll the database back to the target revision."""
    from alembic import command

    config = _load_config(config_path)
    logger.info(f"Downgrading database to {revision}")
    _run("downgrade", command.downgrade, config, revision)
    logger.info("Database downgrade complete")


@db_app.command()
def current(
    config_path: Path = typer.Option(_DEFAULT_CONFIG, "--config", "-c", help="Path to alembic.ini"),
) -> None:
    """Show the current database migration revision."""
    from alembic import command

    _run("lookup", command.current, _load_config(config_path), verbose=True)


@db_app.command()
def history(
    config_path: Path = typer.Option(_DEFAULT_CONFIG, "--config", "-c", help="Path to alembic.ini"),
) -> None:
    """List the migration revisions."""
    from alembic import command

    _run("history lookup", command.history, _load_config(config_path))
