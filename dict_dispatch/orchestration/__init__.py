"""Orchestration for routing queries to dictionary backends."""

from .dispatcher import Dispatcher
from .handler_factory import create_dispatcher, create_handlers

__all__ = ["Dispatcher", "create_dispatcher", "create_handlers"]
