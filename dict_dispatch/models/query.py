"""Data model for an extracted lookup query."""

from dataclasses import dataclass
from enum import Enum


class QueryKind(str, Enum):
    """Where the query text came from."""

    WORD = "word"  # Token at point or typed by the user
    TEXT = "text"  # Active region / selection


@dataclass(frozen=True)
class Query:
    """Text fragment to be looked up or translated."""

    text: str
    kind: QueryKind = QueryKind.WORD

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("Query text must not be blank")

    @property
    def is_word(self) -> bool:
        """Check if the query is a single word."""
        return self.kind is QueryKind.WORD

    def __str__(self) -> str:
        return self.text
