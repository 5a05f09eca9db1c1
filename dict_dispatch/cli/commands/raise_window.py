"""CLI command for raising the dictionary's main window."""

from dict_dispatch.editors import CommandLineContext, StaticInputSource
from dict_dispatch.exceptions import DictDispatchException
from dict_dispatch.orchestration import create_dispatcher
from dict_dispatch.presenters import ConsolePresenter

from .common import load_config


def raise_command(args) -> int:
    """Execute the raise subcommand."""
    presenter = ConsolePresenter()
    config = load_config(args)
    dispatcher = create_dispatcher(config, CommandLineContext(), presenter, StaticInputSource())

    try:
        raised = dispatcher.raise_main_window()
    except DictDispatchException as e:
        presenter.show_error(str(e))
        return 1

    if not raised:
        presenter.show_warning(f"{config.backend.value} has no main window to raise")
        return 1
    return 0
