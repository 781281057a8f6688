"""Web server command."""

import click

from .base import ensure_initialized, get_db_path


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int):
    """Start the web server.

    Examples:

        # Start on default port (8000)
        workout-tracker serve

        # Expose to network (all interfaces)
        workout-tracker serve --host 0.0.0.0 --port 3000
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..logging_config import enable_request_logging
    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting workout-tracker web server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    enable_request_logging()
    app = create_app(get_db_path(ctx))
    uvicorn.run(app, host=host, port=port, log_config=None)
