"""Null presenter for testing (no output)."""

from dict_dispatch.config import DispatchConfig
from dict_dispatch.models import TranslationResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_translation(self, result: TranslationResult) -> None:
        """Display translated text (no-op)."""
        pass

    def show_config(self, config: DispatchConfig) -> None:
        """Display the resolved configuration (no-op)."""
        pass
