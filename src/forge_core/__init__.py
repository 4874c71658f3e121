"""forge-core -- OAuth2 token exchange core for the Forge API SDK.

This package holds the pieces every Forge API client builds on: the
authorization host and client credentials, an HTTP transport, and the
:class:`~forge_core.auth.TokenFetcher` that turns client credentials into
an access token.

Typical usage::

    from forge_core.auth import AUTHENTICATE_PATH, GRANT_CLIENT_CREDENTIALS, TokenFetcher
    from forge_core.client import HttpxTransport
    from forge_core.config import load_configuration

    config = load_configuration()
    with HttpxTransport(config.request) as transport:
        token = TokenFetcher(config, transport).fetch(
            AUTHENTICATE_PATH, GRANT_CLIENT_CREDENTIALS, ["data:read"]
        )

Modules:
    app: Typer CLI entry point (``forge-core``).
    models: Pydantic models shared across the package.
    config: Configuration loading and credential resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes for the CLI.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
