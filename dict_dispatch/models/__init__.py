"""Data models for dict_dispatch."""

from .backend import Backend, SpeechCommand
from .host import HostEnvironment
from .query import Query, QueryKind
from .translation import (
    SERVICE_TYPE_CANDIDATES,
    STREAM_SERVICE_TYPES,
    TARGET_LANGUAGE_CANDIDATES,
    TranslationRequest,
    TranslationResult,
)

__all__ = [
    "Backend",
    "SpeechCommand",
    "HostEnvironment",
    "Query",
    "QueryKind",
    "TranslationRequest",
    "TranslationResult",
    "SERVICE_TYPE_CANDIDATES",
    "STREAM_SERVICE_TYPES",
    "TARGET_LANGUAGE_CANDIDATES",
]
