"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..errors import TrackerError, ValidationError


def async_command(f):
    """Decorator to run async Click commands.

    Invalid input is a usage error (exit status 2). Other domain errors
    are reported on the console and exit with status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except ValidationError as e:
            raise click.UsageError(str(e), ctx=click.get_current_context(silent=True))
        except TrackerError as e:
            echo_error(str(e))
            raise click.exceptions.Exit(1)

    return wrapper


def get_db_path(ctx: click.Context) -> Path:
    """Get the database path chosen by the top-level command."""
    return ctx.obj["db_path"]


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    if not get_db_path(ctx).exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'workout-tracker init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
