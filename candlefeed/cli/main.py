"""Main entry point for the candlefeed command line interface."""

from __future__ import annotations

import typer

from candlefeed.core.logging import configure_logging

from .candles import candles_command
from .formatters import create_formatter


def create_app() -> typer.Typer:
    """Create a Typer application instance for candlefeed."""

    app = typer.Typer(add_completion=False, help="candlefeed command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option("table", "--format", "-f", help="Output format (table or jsonl).", show_default=True),
        log_level: str = typer.Option("WARNING", "--log-level", help="Logging level.", show_default=True),
        no_color: bool = typer.Option(False, "--no-color", help="Disable colorized table output."),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        configure_logging(level=log_level)
        ctx.obj.update({"format": normalized_format, "no_color": no_color})

    app.command("candles")(candles_command)

    @app.command("serve")
    def serve() -> None:
        """Run the HTTP service."""
        from candlefeed.web.main import main as run_web

        run_web()

    return app


app = create_app()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
