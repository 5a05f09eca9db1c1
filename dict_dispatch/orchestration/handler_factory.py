"""Factory for creating the handler registry and dispatcher."""

from dict_dispatch.config import DispatchConfig
from dict_dispatch.interfaces import BackendHandler, EditorContext, InputSource, PresenterProtocol
from dict_dispatch.models import Backend
from dict_dispatch.services import (
    BobHandler,
    EasydictHandler,
    EudicHandler,
    GoldenDictHandler,
    OsxDictionaryHandler,
    SpeechService,
    TextExtractor,
    UrlSchemeHandler,
)

from .dispatcher import Dispatcher


def create_handlers(
    config: DispatchConfig,
    presenter: PresenterProtocol,
    input_source: InputSource,
) -> dict[Backend, BackendHandler]:
    """Create one handler per supported backend.

    Args:
        config: Resolved configuration
        presenter: Output for handlers that show results
        input_source: Prompting for handlers that ask questions

    Returns:
        Mapping from backend to its handler
    """
    url_handler = UrlSchemeHandler(config)
    return {
        Backend.GOLDENDICT: GoldenDictHandler(config),
        Backend.BOB: BobHandler(config),
        Backend.EUDIC: EudicHandler(),
        Backend.EASYDICT: EasydictHandler(config, presenter, input_source, url_handler),
        Backend.EASYDICT_URL: url_handler,
        Backend.OSX_DICTIONARY: OsxDictionaryHandler(),
    }


def create_dispatcher(
    config: DispatchConfig,
    context: EditorContext,
    presenter: PresenterProtocol,
    input_source: InputSource,
) -> Dispatcher:
    """Wire a Dispatcher with the default handlers and speech reader."""
    return Dispatcher(
        config=config,
        handlers=create_handlers(config, presenter, input_source),
        extractor=TextExtractor(context, input_source),
        speech=SpeechService(config),
    )
