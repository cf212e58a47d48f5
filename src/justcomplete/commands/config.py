"""Config commands -- view and modify global configuration.

Provides the ``justcomplete config`` sub-command group for reading,
updating, and resetting the user's global configuration file
(:class:`~justcomplete.models.GlobalConfig`). Settings are persisted in
the justcomplete config directory and control the completer defaults
(root command, column width, path separator) and the output format.
"""

from __future__ import annotations

import typer

from justcomplete.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration.

    Loads the global config from disk and prints the config directory
    path followed by the full configuration.

    Example::

        justcomplete config show
        justcomplete --json config show
    """
    from justcomplete.config import get_config_dir, load_global_config
    from justcomplete.exceptions import JustCompleteError

    try:
        config = load_global_config()
    except JustCompleteError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config directory: {get_config_dir(create=False)}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'completer.column_width')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is coerced to match the
    existing field's type (int or str) and the updated config is validated
    against :class:`~justcomplete.models.GlobalConfig` before saving.

    Raises:
        typer.Exit: With code 2 if the key path is invalid, the value
            cannot be coerced, or Pydantic validation fails.

    Example::

        justcomplete config set completer.command j
        justcomplete config set completer.column_width 20
    """
    from pydantic import ValidationError

    from justcomplete.config import load_global_config, save_global_config
    from justcomplete.exceptions import JustCompleteError
    from justcomplete.models import GlobalConfig

    try:
        config = load_global_config()
    except JustCompleteError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    data = config.model_dump(mode="json")

    # Navigate the dot-separated key path.
    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    current = target[final_key]
    if isinstance(current, int):
        try:
            coerced: object = int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    else:
        coerced = value

    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Reset configuration to defaults.

    Asks for confirmation unless ``--force`` is active.

    Example::

        justcomplete config reset
        justcomplete --force config reset
    """
    from justcomplete.config import save_global_config
    from justcomplete.models import GlobalConfig

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
