"""CLI command for showing the detected configuration."""

from dict_dispatch.presenters import ConsolePresenter

from .common import load_config


def detect_command(args) -> int:
    """Execute the detect subcommand."""
    presenter = ConsolePresenter()
    config = load_config(args)
    presenter.show_config(config)

    if not config.has_backend:
        presenter.show_warning("No dictionary application detected")
        return 1
    return 0
