"""Protocol for the editor the query text is taken from."""

from typing import Protocol


class EditorContext(Protocol):
    """Interface to the editor's selection and cursor.

    Implementations adapt a concrete editor (or the command line) so the
    text extractor can work without knowing which one it talks to.
    """

    def region_active(self) -> bool:
        """Check if a region/selection is active."""
        ...

    def region_text(self) -> str:
        """Return the text of the active region."""
        ...

    def deactivate_region(self) -> None:
        """Clear the active region."""
        ...

    def word_at_point(self) -> str | None:
        """Return the word-like token at the cursor, if any."""
        ...
