"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for justcomplete:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.justcomplete/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~justcomplete.models.GlobalConfig`
  JSON file storing the completer defaults (root command, column width,
  path separator) and the output format.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, and the global config into the effective
  configuration.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`) so a shell startup never reads a half-written
config or completion script.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from justcomplete.exceptions import ConfigError
from justcomplete.models import GlobalConfig

_APP_NAME = "justcomplete"
_CONFIG_FILENAME = "config.json"

ENV_COMMAND = "JUSTCOMPLETE_COMMAND"
ENV_COLUMN_WIDTH = "JUSTCOMPLETE_COLUMN_WIDTH"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir(create: bool = True) -> Path:
    """Return the configuration directory, creating it unless *create* is False.

    On Linux/BSD: ``$XDG_CONFIG_HOME/justcomplete/`` (default
    ``~/.config/justcomplete/``). On macOS/Windows: ``~/.justcomplete/``.

    Returns:
        Absolute path to the configuration directory. Reads pass
        ``create=False`` so that looking up completions never touches disk.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CONFIG_HOME", (".config",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/justcomplete/`` (default
    ``~/.local/share/justcomplete/``). On macOS/Windows:
    ``~/.justcomplete/logs/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def _global_config_path() -> Path:
    """Path to the global config file; its directory may not exist yet."""
    return get_config_dir(create=False) / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the XDG config directory.

    Returns:
        The deserialised :class:`~justcomplete.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk.

    Args:
        config: The configuration to save.
    """
    data = config.model_dump(mode="json")
    atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Precedence resolution ---


def resolve_config(
    cli_command: Optional[str] = None,
    cli_width: Optional[int] = None,
    cli_format: Optional[str] = None,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_command``, ``cli_width``, ``cli_format``)
        2. Environment variables (``JUSTCOMPLETE_COMMAND``,
           ``JUSTCOMPLETE_COLUMN_WIDTH``)
        3. User config (``~/.config/justcomplete/config.json``)
        4. Defaults

    Returns:
        The effective :class:`~justcomplete.models.GlobalConfig`. The file
        on disk is never modified.

    Raises:
        ConfigError: If the config file is invalid or an override does not
            validate (e.g. a non-integer or zero column width).
    """
    # 4 + 3. Load base global config (fills in defaults automatically)
    global_cfg = load_global_config()
    data = global_cfg.model_dump()
    completer = data["completer"]

    # 2. Environment variables
    env_command = os.environ.get(ENV_COMMAND)
    if env_command:
        completer["command"] = env_command
    env_width = os.environ.get(ENV_COLUMN_WIDTH)
    if env_width:
        try:
            completer["column_width"] = int(env_width)
        except ValueError:
            raise ConfigError(
                f"{ENV_COLUMN_WIDTH} must be an integer, got: {env_width}"
            ) from None

    # 1. CLI flags (highest precedence)
    if cli_command is not None:
        completer["command"] = cli_command
    if cli_width is not None:
        completer["column_width"] = cli_width
    if cli_format is not None:
        data["output"]["format"] = cli_format

    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration override: {exc}") from exc
