"""Token commands -- request access tokens from the authorization host.

Provides the ``forge-core token`` sub-command group. Useful for checking
that a client id/secret pair and a set of scopes are accepted before
wiring them into an application.

Typical workflow::

    export FORGE_CLIENT_ID=... FORGE_CLIENT_SECRET=...
    forge-core token fetch --scope data:read --scope bucket:read
    forge-core --json token fetch --scope data:read --param audience=viewer
"""

from __future__ import annotations

from typing import Optional

import typer

from forge_core.exceptions import ForgeError, InvalidUsageError
from forge_core.output import debug, error, format_response, suggest


token_app = typer.Typer(no_args_is_help=True)


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` strings into a dict. Later keys win.

    Raises:
        InvalidUsageError: If an entry has no ``=`` or an empty key.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise InvalidUsageError(f"Invalid --param '{pair}': expected key=value")
        params[key] = value
    return params


@token_app.command("fetch")
def token_fetch(
    scope: list[str] = typer.Option(
        [], "--scope", "-s", help="Scope to request (repeatable)."
    ),
    grant_type: str = typer.Option(
        "client_credentials", "--grant-type", "-g", help="OAuth2 grant type."
    ),
    path: str = typer.Option(
        "authentication/v1/authenticate", "--path", help="Token endpoint path on the host."
    ),
    param: list[str] = typer.Option(
        [], "--param", help="Extra form field as key=value (repeatable)."
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="Authorization host (overrides FORGE_HOST)."
    ),
) -> None:
    """Fetch an access token and print the token response.

    Credentials come from ``FORGE_CLIENT_ID`` / ``FORGE_CLIENT_SECRET`` or
    the config file. See :func:`~forge_core.config.load_configuration`.

    Example::

        forge-core token fetch --scope data:read
    """
    from forge_core.auth import TokenFetcher
    from forge_core.client import HttpxTransport
    from forge_core.config import load_configuration

    try:
        additional = parse_params(param)
        config = load_configuration(host=host)
        debug(f"Requesting token from {config.host} as {config.client_id}")
        with HttpxTransport(config.request) as transport:
            token = TokenFetcher(config, transport).fetch(
                path, grant_type, scope, additional
            )
    except ForgeError as exc:
        error(str(exc))
        if not scope:
            suggest("Pass at least one --scope")
        raise typer.Exit(code=exc.exit_code) from None

    format_response(token)
