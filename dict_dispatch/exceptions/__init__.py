"""Custom exceptions for dict_dispatch."""

from .backend import (
    ExternalInvocationFailed,
    NoBackendConfigured,
    ServiceUnavailable,
    UnknownBackend,
)
from .base import DictDispatchException

__all__ = [
    "DictDispatchException",
    "NoBackendConfigured",
    "UnknownBackend",
    "ServiceUnavailable",
    "ExternalInvocationFailed",
]
