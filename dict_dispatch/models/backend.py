"""Identifiers for the supported dictionary backends and speech commands."""

from enum import Enum


class Backend(str, Enum):
    """External dictionary/translation programs that can receive a query."""

    GOLDENDICT = "goldendict"
    BOB = "bob"
    EUDIC = "eudic"
    EASYDICT = "easydict"
    EASYDICT_URL = "easydict-url"
    OSX_DICTIONARY = "osx-dictionary"

    @property
    def cli_invocable(self) -> bool:
        """Whether the program is driven through its command line."""
        return self is Backend.GOLDENDICT


class SpeechCommand(str, Enum):
    """Text-to-speech commands the speech reader knows how to call."""

    NONE = "none"
    SAY = "say"
    FESTIVAL = "festival"
    ESPEAK = "espeak"
