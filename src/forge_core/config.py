"""Configuration loading with XDG paths and precedence resolution.

This module builds the :class:`~forge_core.models.Configuration` that
supplies the authorization host and client credentials:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.forge-core/`` on macOS and Windows. See :func:`get_config_dir`.
* **Config file** -- an optional JSON document with ``host``,
  ``client_id``, ``client_secret`` and ``request`` keys.
* **Precedence resolution** -- :func:`load_configuration` merges explicit
  arguments, environment variables, the config file, and defaults.
* **Credential resolution** -- :func:`resolve_credential` reads secrets
  referenced from the config file via ``env:`` or ``file:`` sources.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from forge_core.exceptions import ConfigError
from forge_core.models import Configuration

_APP_NAME = "forge-core"
_CONFIG_FILENAME = "config.json"

ENV_HOST = "FORGE_HOST"
ENV_CLIENT_ID = "FORGE_CLIENT_ID"
ENV_CLIENT_SECRET = "FORGE_CLIENT_SECRET"
ENV_CONFIG = "FORGE_CONFIG"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory. The directory is not created.

    On Linux/BSD: ``$XDG_CONFIG_HOME/forge-core/`` (default ``~/.config/forge-core/``).
    On macOS/Windows: ``~/.forge-core/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".config"
        return base / _APP_NAME
    return Path.home() / f".{_APP_NAME}"


def default_config_path() -> Path:
    """Path to the user-wide config file inside :func:`get_config_dir`."""
    return get_config_dir() / _CONFIG_FILENAME


# --- Config file ---


def load_config_file(path: Path) -> dict[str, Any]:
    """Read and parse a JSON config file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON,
            or not a JSON object.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid config file at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file at {path}: expected a JSON object")
    return data


def _locate_config_file(config_file: Optional[Path]) -> Optional[Path]:
    """Pick the config file: explicit > ``$FORGE_CONFIG`` > default (only if present)."""
    if config_file is not None:
        return Path(config_file).expanduser()
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        return Path(env_path).expanduser()
    default = default_config_path()
    return default if default.is_file() else None


# --- Precedence resolution ---


def load_configuration(
    host: Optional[str] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    config_file: Optional[Path] = None,
    require_credentials: bool = True,
) -> Configuration:
    """Resolve the effective configuration.

    Precedence (high to low):
        1. Explicit arguments
        2. Environment variables (``FORGE_HOST``, ``FORGE_CLIENT_ID``,
           ``FORGE_CLIENT_SECRET``)
        3. Config file (*config_file*, else ``$FORGE_CONFIG``, else
           ``<config_dir>/config.json`` when it exists)
        4. Defaults

    ``client_id`` and ``client_secret`` read from the config file may be
    credential sources (see :func:`resolve_credential`).

    Args:
        host: Authorization host override.
        client_id: Client id override.
        client_secret: Client secret override.
        config_file: Explicit config file path.
        require_credentials: Fail when client id or secret end up empty.

    Returns:
        The validated :class:`~forge_core.models.Configuration`.

    Raises:
        ConfigError: If the config file is invalid, a credential source
            cannot be resolved, or required credentials are missing.
    """
    data: dict[str, Any] = {}

    # 3. Config file
    path = _locate_config_file(config_file)
    if path is not None:
        data.update(load_config_file(path))
    overridden: set[str] = set()

    # 2. Environment variables
    for key, env_var in (
        ("host", ENV_HOST),
        ("client_id", ENV_CLIENT_ID),
        ("client_secret", ENV_CLIENT_SECRET),
    ):
        env_value = os.environ.get(env_var)
        if env_value:
            data[key] = env_value
            overridden.add(key)

    # 1. Explicit arguments
    for key, value in (
        ("host", host),
        ("client_id", client_id),
        ("client_secret", client_secret),
    ):
        if value is not None:
            data[key] = value
            overridden.add(key)

    # Credential sources only apply to values still taken from the file
    for key in ("client_id", "client_secret"):
        value = data.get(key)
        if key not in overridden and isinstance(value, str) and value:
            data[key] = resolve_credential(value)

    try:
        configuration = Configuration.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

    if require_credentials:
        missing = [
            name
            for name, value in (
                ("client_id", configuration.client_id),
                ("client_secret", configuration.client_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigError(
                f"Missing client credentials: {', '.join(missing)} "
                f"(set {ENV_CLIENT_ID}/{ENV_CLIENT_SECRET} or add them to the config file)"
            )

    return configuration


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - anything else -- returned as the literal credential

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigError: If the referenced variable or file is missing.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    return source
