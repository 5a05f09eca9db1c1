"""Protocol for interactive user input."""

from typing import Protocol


class InputSource(Protocol):
    """Interface for asking the user for input.

    Injected wherever an operation may need to prompt, so tests can supply
    canned answers instead of blocking on a terminal.
    """

    def read_string(self, prompt: str) -> str | None:
        """Ask for free text.

        Args:
            prompt: Text shown to the user

        Returns:
            The answer, or None if the user cancelled
        """
        ...

    def choose(self, prompt: str, candidates: list[str]) -> str | None:
        """Ask the user to pick one of a fixed list of candidates.

        Args:
            prompt: Text shown to the user
            candidates: Allowed answers

        Returns:
            The chosen candidate, or None if the user cancelled
        """
        ...
