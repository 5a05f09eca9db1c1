"""Text processing utilities."""

import re

# A word is a run of letters/digits, allowing inner apostrophes and hyphens
# ("don't", "well-known").
_WORD_PATTERN = re.compile(r"\w+(?:['’-]\w+)*")


def word_at_column(line: str, column: int) -> str | None:
    """Find the word-like token under a cursor position.

    A cursor just past the end of a word still selects that word, as
    editors place the cursor between characters.

    Args:
        line: Text of the current line
        column: Zero-based cursor column

    Returns:
        The token under the cursor, or None if the cursor is on blank space
    """
    if column < 0:
        return None

    for match in _WORD_PATTERN.finditer(line):
        if match.start() <= column <= match.end():
            return match.group(0)
        if match.start() > column:
            break
    return None


def normalize_selection(text: str) -> str:
    """Collapse whitespace in a selection to single spaces.

    Args:
        text: Raw selected text, possibly spanning several lines

    Returns:
        Text on one line without leading or trailing whitespace
    """
    return " ".join(text.split())


def applescript_quote(text: str) -> str:
    """Quote text as an AppleScript string literal.

    Backslashes and double quotes are escaped so the text cannot end the
    literal early.

    Args:
        text: Arbitrary text

    Returns:
        The text wrapped in double quotes
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
