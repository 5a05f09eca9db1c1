"""Console presenter for CLI output."""

import sys

from dict_dispatch.config import DispatchConfig
from dict_dispatch.models import TranslationResult


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Errors and warnings go to stderr so editors that capture stdout only
    see lookup results.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_translation(self, result: TranslationResult) -> None:
        """Display translated text."""
        print(result.translated_text)

    def show_config(self, config: DispatchConfig) -> None:
        """Display the resolved configuration."""
        backend = getattr(config.backend, "value", config.backend) or "(none)"
        print("Configuration:")
        print(f"  Backend:         {backend}")
        print(f"  CLI invocable:   {'yes' if config.cli_invocable else 'no'}")
        print(f"  Speech command:  {config.speech_command.value}")
        print(f"  Easydict server: {config.easydict_url}")
        print(f"  URL scheme:      {config.url_scheme}://")
        print(f"  Target language: {config.target_language or '(ask)'}")
        print(f"  Service type:    {config.service_type or '(ask)'}")
        if config.apple_dictionary_names:
            print(f"  Apple dictionaries: {', '.join(config.apple_dictionary_names)}")
