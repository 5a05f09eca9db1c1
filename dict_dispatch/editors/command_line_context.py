"""Editor context built from command-line arguments."""

from dataclasses import dataclass

from dict_dispatch.utils import normalize_selection, word_at_column


@dataclass
class CommandLineContext:
    """Editor state passed in by an editor keybinding or a shell.

    Attributes:
        selection: Selected text, if the editor had an active region
        line: Text of the line under the cursor
        column: Zero-based cursor column within ``line``
        word: Word at point, when the caller already extracted it
    """

    selection: str | None = None
    line: str | None = None
    column: int | None = None
    word: str | None = None

    @classmethod
    def from_words(cls, words: list[str]) -> "CommandLineContext":
        """Build a context from positional arguments.

        A single argument is the word at point; several arguments (or one
        containing whitespace) are treated as a selection.
        """
        text = " ".join(words).strip()
        if not text:
            return cls()
        if len(text.split()) > 1:
            return cls(selection=text)
        return cls(word=text)

    def region_active(self) -> bool:
        return self.selection is not None

    def region_text(self) -> str:
        return normalize_selection(self.selection or "")

    def deactivate_region(self) -> None:
        self.selection = None

    def word_at_point(self) -> str | None:
        if self.word and self.word.strip():
            return self.word.strip()
        if self.line is not None and self.column is not None:
            return word_at_column(self.line, self.column)
        return None
