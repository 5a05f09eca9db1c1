"""CLI command for looking up the word or selection at point."""

import sys

from dict_dispatch.editors import CommandLineContext, StaticInputSource
from dict_dispatch.exceptions import DictDispatchException
from dict_dispatch.orchestration import create_dispatcher
from dict_dispatch.presenters import ConsolePresenter

from .common import load_config, make_input_source


def build_context(args) -> CommandLineContext:
    """Build the editor context from the lookup arguments."""
    if args.stdin:
        return CommandLineContext(selection=sys.stdin.read())

    context = CommandLineContext.from_words(args.text)
    if args.line is not None:
        context.line = args.line
        context.column = args.column if args.column is not None else 0
    return context


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    if args.stdin and args.text:
        presenter.show_error("--stdin cannot be combined with text arguments")
        return 1

    config = load_config(args)
    context = build_context(args)

    # stdin carries the selection, so it cannot also answer prompts
    input_source = StaticInputSource() if args.stdin else make_input_source(args)
    dispatcher = create_dispatcher(config, context, presenter, input_source)

    try:
        query = dispatcher.dwim()
    except DictDispatchException as e:
        presenter.show_error(str(e))
        return 1

    if query is None:
        presenter.show_warning("Nothing to look up")
        return 1
    return 0
