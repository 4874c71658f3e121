"""Exception hierarchy for forge-core.

All exceptions inherit from :class:`ForgeError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`forge_core.exit_codes` and a ``kind`` drawn from the closed
:class:`ErrorKind` enumeration. Library callers branch on the exception
type (or ``kind``); the CLI entry point catches ``ForgeError`` and exits
with ``exc.exit_code``.

Subclass hierarchy::

    ForgeError (exit 1)
    +-- LogicError          (exit 2, PRECONDITION)
    +-- InvalidUsageError   (exit 2)
    +-- RuntimeError_       (exit 3, SERVER_DIAGNOSTIC or TRANSPORT)
    +-- ConfigError         (exit 1, CONFIGURATION)
"""

from __future__ import annotations

import enum
from typing import Optional

from forge_core.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_TOKEN_FAILURE,
)


class ErrorKind(str, enum.Enum):
    """Closed set of failure categories surfaced by forge-core."""

    PRECONDITION = "precondition"
    """The caller misused the API; detected before any I/O."""

    SERVER_DIAGNOSTIC = "server_diagnostic"
    """The server answered with an error carrying its own diagnostic message."""

    TRANSPORT = "transport"
    """Any other failure of the HTTP exchange."""

    CONFIGURATION = "configuration"
    """Configuration could not be loaded or is incomplete."""


class ForgeError(Exception):
    """Base exception for all forge-core errors.

    Every subclass sets a class-level ``exit_code`` and ``kind``.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class LogicError(ForgeError):
    """Raised when the caller violates a precondition (a bug in the calling code).

    Never retryable: the same call will fail the same way.
    """

    exit_code = EXIT_INVALID_USAGE
    kind = ErrorKind.PRECONDITION


class InvalidUsageError(ForgeError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class RuntimeError_(ForgeError, RuntimeError):
    """Raised when a token request fails at runtime.

    Named with a trailing underscore to avoid shadowing the built-in
    ``RuntimeError``, which it also subclasses so callers catching the
    built-in still see it.

    Args:
        message: The server's diagnostic message, or a fixed generic text
            for transport failures.
        kind: :attr:`ErrorKind.SERVER_DIAGNOSTIC` or
            :attr:`ErrorKind.TRANSPORT`.
        status_code: HTTP status of the error response, when one was
            received.
    """

    exit_code = EXIT_TOKEN_FAILURE

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.TRANSPORT,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class ConfigError(ForgeError):
    """Raised for configuration problems (invalid JSON, missing credentials, bad sources)."""

    exit_code = EXIT_GENERIC_FAILURE
    kind = ErrorKind.CONFIGURATION
