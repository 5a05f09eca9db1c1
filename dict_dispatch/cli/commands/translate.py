"""CLI command for translating text with Easydict's HTTP API."""

import sys
from dataclasses import replace

from dict_dispatch.editors import StaticInputSource
from dict_dispatch.exceptions import DictDispatchException
from dict_dispatch.presenters import ConsolePresenter
from dict_dispatch.services import EasydictHandler

from .common import load_config, make_input_source


def translate_command(args) -> int:
    """Execute the translate subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    config = load_config(args)
    if args.port:
        config = replace(config, easydict_port=args.port)

    from_stdin = not args.text
    text = sys.stdin.read() if from_stdin else " ".join(args.text)
    if not text.strip():
        presenter.show_error("No text to translate")
        return 1

    input_source = StaticInputSource() if from_stdin else make_input_source(args)
    handler = EasydictHandler(config, presenter, input_source)
    text = text.strip()

    try:
        if not handler.is_server_available():
            handler.fall_back(text)
            presenter.show_info(f"{handler.name} server not reachable, opened via URL scheme")
            return 0

        options = handler.choose_options(args.to, args.service)
        if options is None:
            presenter.show_warning("No target language or service chosen (use --to and --service)")
            return 1

        handler.request_translation(text, *options)
    except DictDispatchException as e:
        presenter.show_error(str(e))
        return 1

    return 0
