"""Business logic services for dict_dispatch."""

from .handlers import (
    BobHandler,
    EasydictHandler,
    EudicHandler,
    GoldenDictHandler,
    OsxDictionaryHandler,
    UrlSchemeHandler,
)
from .speech_service import SpeechService
from .text_extractor import TextExtractor

__all__ = [
    "TextExtractor",
    "SpeechService",
    "BobHandler",
    "EasydictHandler",
    "EudicHandler",
    "GoldenDictHandler",
    "OsxDictionaryHandler",
    "UrlSchemeHandler",
]
