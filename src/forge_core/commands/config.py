"""Config commands -- inspect the effective configuration.

Provides the ``forge-core config`` sub-command group. The client secret
is never printed in full.
"""

from __future__ import annotations

import typer

from forge_core.exceptions import ForgeError
from forge_core.output import error, format_response, info, warning


config_app = typer.Typer(no_args_is_help=True)


def mask_secret(secret: str) -> str:
    """Mask all but the last four characters of *secret*."""
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * (len(secret) - 4) + secret[-4:]


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration after precedence resolution.

    Example::

        forge-core config show
        forge-core --json config show
    """
    from forge_core.config import get_config_dir, load_configuration

    try:
        config = load_configuration(require_credentials=False)
    except ForgeError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config directory: {get_config_dir()}")
    missing = [
        name
        for name, value in (
            ("client_id", config.client_id),
            ("client_secret", config.client_secret),
        )
        if not value
    ]
    if missing:
        warning(f"Missing client credentials: {', '.join(missing)}")
    data = config.model_dump(mode="json")
    data["client_secret"] = mask_secret(config.client_secret)
    format_response(data)
