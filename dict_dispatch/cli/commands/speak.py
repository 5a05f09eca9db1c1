"""CLI command for reading text aloud."""

from dict_dispatch.presenters import ConsolePresenter
from dict_dispatch.services import SpeechService

from .common import load_config


def speak_command(args) -> int:
    """Execute the speak subcommand."""
    presenter = ConsolePresenter()
    config = load_config(args)
    speech = SpeechService(config)

    if not speech.enabled:
        presenter.show_error("No speech command found. Install espeak or festival.")
        return 1

    speech.speak(" ".join(args.text))
    return 0
