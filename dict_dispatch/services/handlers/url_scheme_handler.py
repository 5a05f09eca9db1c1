"""Handler that opens a query through an app's custom URL scheme."""

import logging
from urllib.parse import quote

from dict_dispatch.config import DispatchConfig
from dict_dispatch.exceptions import ExternalInvocationFailed
from dict_dispatch.models import Query
from dict_dispatch.utils import spawn_detached, url_open_command

logger = logging.getLogger(__name__)


class UrlSchemeHandler:
    """Open ``<scheme>://query?text=...`` with the OS URL handler.

    Fire-and-forget: the opener runs detached and nothing is read back.
    """

    def __init__(self, config: DispatchConfig):
        self.config = config

    @property
    def name(self) -> str:
        return f"{self.config.url_scheme}:// URL"

    def build_url(self, text: str) -> str:
        """Build the query URL, percent-encoding the whole text."""
        return f"{self.config.url_scheme}://query?text={quote(text, safe='')}"

    def open(self, text: str) -> str:
        """Open the query URL for some text.

        Returns:
            The URL that was opened

        Raises:
            ExternalInvocationFailed: If the URL opener cannot be started
        """
        url = self.build_url(text)
        logger.debug(f"Opening {url}")
        try:
            spawn_detached(url_open_command(url))
        except OSError as e:
            raise ExternalInvocationFailed(url, str(e)) from e
        return url

    def handle(self, query: Query) -> None:
        self.open(query.text)
