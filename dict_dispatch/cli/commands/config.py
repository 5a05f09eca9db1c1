"""CLI command for managing saved settings."""

import json

from dict_dispatch.config import ConfigManager
from dict_dispatch.presenters import ConsolePresenter


def config_command(args) -> int:
    """Execute the config subcommand (show / set / unset / reset)."""
    presenter = ConsolePresenter()

    if args.action == "show":
        overrides = ConfigManager.load_overrides()
        if not overrides:
            presenter.show_info("No saved settings (using detected defaults)")
        else:
            presenter.show_info(json.dumps(overrides, indent=2, ensure_ascii=False))
        return 0

    if args.action == "set":
        try:
            value = ConfigManager.set_value(args.key, args.value)
        except KeyError:
            keys = ", ".join(ConfigManager.settable_keys())
            presenter.show_error(f"Unknown setting '{args.key}'. Available: {keys}")
            return 1
        except ValueError as e:
            presenter.show_error(f"Invalid value for {args.key}: {e}")
            return 1
        presenter.show_success(f"{args.key} = {value}")
        return 0

    if args.action == "unset":
        if ConfigManager.unset_value(args.key):
            presenter.show_success(f"{args.key} reset to detected default")
        else:
            presenter.show_info(f"{args.key} was not set")
        return 0

    if args.action == "reset":
        ConfigManager.delete_config()
        presenter.show_success("Saved settings removed")
        return 0

    presenter.show_error(f"Unknown action: {args.action}")
    return 1
