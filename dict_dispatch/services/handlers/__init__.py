"""Backend handler implementations."""

from .bob_handler import BobHandler
from .easydict_handler import EasydictHandler
from .eudic_handler import EudicHandler
from .goldendict_handler import GoldenDictHandler
from .osx_dictionary_handler import OsxDictionaryHandler
from .url_scheme_handler import UrlSchemeHandler

__all__ = [
    "BobHandler",
    "EasydictHandler",
    "EudicHandler",
    "GoldenDictHandler",
    "OsxDictionaryHandler",
    "UrlSchemeHandler",
]
