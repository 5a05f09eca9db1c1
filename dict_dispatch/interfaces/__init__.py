"""Interface protocols for dict_dispatch."""

from .backend_handler import BackendHandler, WindowRaiser
from .editor_context import EditorContext
from .input_source import InputSource
from .presenter import PresenterProtocol

__all__ = [
    "BackendHandler",
    "WindowRaiser",
    "EditorContext",
    "InputSource",
    "PresenterProtocol",
]
