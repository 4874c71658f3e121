"""HTTP transport layer for forge-core.

Classes:
    :class:`Transport` -- interface for a form-encoded POST.
    :class:`HttpxTransport` -- implementation backed by :class:`httpx.Client`.
"""

from forge_core.client.transport import HttpxTransport, Transport

__all__ = ["Transport", "HttpxTransport"]
