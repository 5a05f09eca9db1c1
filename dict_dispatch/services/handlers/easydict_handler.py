"""Handler for Easydict's local HTTP translation API."""

import json
import logging

import requests

from dict_dispatch.config import DispatchConfig
from dict_dispatch.exceptions import ExternalInvocationFailed, ServiceUnavailable
from dict_dispatch.interfaces import InputSource, PresenterProtocol
from dict_dispatch.models import (
    SERVICE_TYPE_CANDIDATES,
    TARGET_LANGUAGE_CANDIDATES,
    Query,
    TranslationRequest,
    TranslationResult,
)
from dict_dispatch.utils import port_is_open

from .url_scheme_handler import UrlSchemeHandler

logger = logging.getLogger(__name__)


class EasydictHandler:
    """Translate text with Easydict's HTTP server.

    When the server is not reachable (Easydict not running, or its HTTP
    server disabled), the query is opened through the ``easydict://`` URL
    scheme instead, which shows Easydict's own window.
    """

    def __init__(
        self,
        config: DispatchConfig,
        presenter: PresenterProtocol,
        input_source: InputSource,
        url_handler: UrlSchemeHandler | None = None,
    ):
        """Initialize the Easydict handler.

        Args:
            config: Configuration with server address and defaults
            presenter: Where translated text is shown
            input_source: Used to ask for language/service when not configured
            url_handler: Fallback used when the server is unavailable
        """
        self.config = config
        self.presenter = presenter
        self.input_source = input_source
        self.url_handler = url_handler or UrlSchemeHandler(config)

    @property
    def name(self) -> str:
        return "Easydict"

    def is_server_available(self) -> bool:
        """Probe the HTTP server's port (the probe connection is closed)."""
        return port_is_open(
            self.config.easydict_host,
            self.config.easydict_port,
            timeout=self.config.probe_timeout,
        )

    def handle(self, query: Query) -> None:
        self.translate(query.text)

    def translate(
        self,
        text: str,
        target_language: str | None = None,
        service_type: str | None = None,
    ) -> TranslationResult | None:
        """Translate text and show the result.

        Args:
            text: Text to translate
            target_language: Language code (asked for when not given or configured)
            service_type: Easydict service (asked for when not given or configured)

        Returns:
            The translation, or None if the URL scheme fallback was used or
            the user cancelled a choice

        Raises:
            ExternalInvocationFailed: If the server answers with an error
        """
        if not self.is_server_available():
            self.fall_back(text)
            return None

        options = self.choose_options(target_language, service_type)
        if options is None:
            return None
        return self.request_translation(text, *options)

    def fall_back(self, text: str) -> None:
        """Open the text through the URL scheme when the server is down."""
        logger.warning(
            f"{self.name} server not reachable at {self.config.easydict_url}, "
            "falling back to URL scheme"
        )
        self.url_handler.open(text)

    def choose_options(
        self,
        target_language: str | None = None,
        service_type: str | None = None,
    ) -> tuple[str, str] | None:
        """Settle the target language and service type.

        Explicit arguments win over configured values; whatever is still
        missing is asked for.

        Returns:
            (target_language, service_type), or None if a choice was cancelled
        """
        target_language = target_language or self.config.target_language
        if not target_language:
            target_language = self.input_source.choose(
                "Target language: ", TARGET_LANGUAGE_CANDIDATES
            )
        if not target_language:
            return None

        service_type = service_type or self.config.service_type
        if not service_type:
            service_type = self.input_source.choose("Service type: ", SERVICE_TYPE_CANDIDATES)
        if not service_type:
            return None

        return target_language, service_type

    def request_translation(
        self,
        text: str,
        target_language: str,
        service_type: str,
    ) -> TranslationResult | None:
        """Send the request and show the result, falling back on connection loss.

        Returns:
            The translation, or None if the URL scheme fallback was used
        """
        request = TranslationRequest(
            text=text,
            target_language=target_language,
            service_type=service_type,
            apple_dictionary_names=list(self.config.apple_dictionary_names),
        )

        try:
            result = self.send(request)
        except ServiceUnavailable as e:
            logger.warning(f"{e}, falling back to URL scheme")
            self.url_handler.open(text)
            return None

        self.presenter.show_translation(result)
        return result

    def send(self, request: TranslationRequest) -> TranslationResult:
        """POST a translation request to the server.

        Args:
            request: Request to send

        Returns:
            TranslationResult with the translated text

        Raises:
            ServiceUnavailable: If the server cannot be reached or times out
            ExternalInvocationFailed: If the server answers with an error
        """
        url = f"{self.config.easydict_url}{request.endpoint}"
        logger.debug(f"POST {url} service={request.service_type}")

        try:
            response = requests.post(
                url,
                json=request.to_payload(),
                timeout=self.config.http_timeout,
            )
        except requests.exceptions.ConnectionError as e:
            raise ServiceUnavailable(f"Cannot connect to {self.name} at {url}") from e
        except requests.exceptions.Timeout as e:
            raise ServiceUnavailable(f"Connection to {self.name} timed out") from e
        except requests.RequestException as e:
            raise ExternalInvocationFailed(url, str(e)) from e

        if response.status_code != 200:
            raise ExternalInvocationFailed(url, f"HTTP {response.status_code}")

        return TranslationResult(
            translated_text=self._parse_translated_text(response, url),
            service_type=request.service_type,
            target_language=request.target_language,
        )

    @staticmethod
    def _parse_translated_text(response, url: str) -> str:
        """Read ``translatedText`` from a JSON or server-sent-event body."""
        content_type = response.headers.get("Content-Type", "")
        if content_type.startswith("text/event-stream"):
            chunks = []
            for line in response.text.splitlines():
                if not line.startswith("data:"):
                    continue
                try:
                    event = json.loads(line[len("data:") :].strip())
                except ValueError:
                    continue
                if isinstance(event, dict) and isinstance(event.get("translatedText"), str):
                    chunks.append(event["translatedText"])
            if not chunks:
                raise ExternalInvocationFailed(url, "No translatedText in stream")
            return "".join(chunks)

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalInvocationFailed(url, "Invalid JSON response") from e

        text = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ExternalInvocationFailed(url, "Response has no translatedText")
        return text
