"""Orchestrator that routes a query to the configured dictionary."""

import logging
from collections.abc import Mapping

from dict_dispatch.config import DispatchConfig
from dict_dispatch.exceptions import NoBackendConfigured, UnknownBackend
from dict_dispatch.interfaces import BackendHandler, WindowRaiser
from dict_dispatch.models import Backend, Query
from dict_dispatch.services import SpeechService, TextExtractor

logger = logging.getLogger(__name__)


class Dispatcher:
    """Do what I mean: look up whatever is at point in the configured app."""

    def __init__(
        self,
        config: DispatchConfig,
        handlers: Mapping[Backend, BackendHandler],
        extractor: TextExtractor,
        speech: SpeechService | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            config: Resolved configuration
            handlers: Handler registered for each supported backend
            extractor: Source of the query text
            speech: Optional speech reader run after each lookup
        """
        self.config = config
        self.handlers = handlers
        self.extractor = extractor
        self.speech = speech

    def resolve_handler(self) -> BackendHandler:
        """Find the handler for the configured backend.

        Raises:
            NoBackendConfigured: If no backend was detected or configured
            UnknownBackend: If the backend has no registered handler
        """
        backend = self.config.backend
        if not backend:
            raise NoBackendConfigured()

        handler = self.handlers.get(backend) if isinstance(backend, Backend) else None
        if handler is None:
            raise UnknownBackend(getattr(backend, "value", str(backend)))
        return handler

    def dwim(self) -> Query | None:
        """Extract the query from the editor and send it to the backend.

        The handler is resolved before anything is read from the editor,
        so a configuration error never consumes the selection.

        Returns:
            The query that was dispatched, or None if the user cancelled

        Raises:
            NoBackendConfigured: If no backend was detected or configured
            UnknownBackend: If the backend has no registered handler
            ExternalInvocationFailed: If the external program fails
        """
        handler = self.resolve_handler()

        query = self.extractor.extract()
        if query is None:
            return None

        self._dispatch(handler, query)
        return query

    def lookup(self, query: Query) -> None:
        """Send an already extracted query to the backend."""
        self._dispatch(self.resolve_handler(), query)

    def raise_main_window(self) -> bool:
        """Bring the backend's main window to the front.

        Returns:
            False if the backend has no main window to raise
        """
        handler = self.resolve_handler()
        if not isinstance(handler, WindowRaiser):
            return False
        handler.raise_main_window()
        return True

    def _dispatch(self, handler: BackendHandler, query: Query) -> None:
        logger.debug(f"Dispatching {query.kind.value} query to {handler.name}")
        handler.handle(query)

        if self.speech and self.speech.enabled:
            if query.is_word or self.config.speak_selections:
                self.speech.speak(query.text)
