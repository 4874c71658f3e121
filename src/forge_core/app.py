"""Typer application and CLI entry point for forge-core.

This module wires together the top-level Typer application and registers
the built-in sub-commands (``token``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer
app. A :class:`~forge_core.exceptions.ForgeError` escaping a command exits
with the error's ``exit_code``.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import typer

from forge_core import __version__
from forge_core.commands.config import config_app
from forge_core.commands.token import token_app
from forge_core.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="forge-core",
    help="Request OAuth2 tokens from the Forge authorization host.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(token_app, name="token", help="Access token requests.")
app.add_typer(config_app, name="config", help="Configuration inspection.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"forge-core {__version__}")
        raise typer.Exit()


_LOG_HANDLER_NAME = "forge_core.cli"


def _configure_logging(verbose: bool) -> None:
    """Route ``forge_core`` log records to the current stderr; DEBUG when verbose.

    A handler installed by an earlier invocation is replaced, since it may
    hold a stream that has since been closed.
    """
    logger = logging.getLogger("forge_core")
    for existing in list(logger.handlers):
        if existing.get_name() == _LOG_HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~forge_core.output.OutputManager` from the
    CLI flags and configures logging.
    """
    from forge_core.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    )
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``forge-core`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        from forge_core.exceptions import ForgeError
        from forge_core.output import error

        if isinstance(exc, ForgeError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
