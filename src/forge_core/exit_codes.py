"""Numeric process exit codes for the ``forge-core`` CLI.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~forge_core.exceptions.ForgeError` subclass.
Shell wrappers and CI scripts can inspect the exit code to tell a
misconfigured client apart from a rejected token request without parsing
stderr.

Example::

    $ forge-core token fetch --scope data:read
    $ echo $?
    3   # EXIT_TOKEN_FAILURE -- the authorization server refused the request
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred (including configuration problems)."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_TOKEN_FAILURE = 3
"""The token request failed at the transport or authorization server."""
