"""Presenter protocol for output abstraction."""

from typing import Protocol

from dict_dispatch.config import DispatchConfig
from dict_dispatch.models import TranslationResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, editor, etc).

    This protocol abstracts all output operations, allowing the same
    dispatch logic to report to a terminal or an editor's message area.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_translation(self, result: TranslationResult) -> None:
        """Display translated text returned by a translation service.

        Args:
            result: The translation to display
        """
        ...

    def show_config(self, config: DispatchConfig) -> None:
        """Display the resolved configuration.

        Args:
            config: The configuration to display
        """
        ...
