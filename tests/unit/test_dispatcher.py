"""Tests for the dispatcher orchestrator."""

from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest

from dict_dispatch.exceptions import NoBackendConfigured, UnknownBackend
from dict_dispatch.models import Backend, Query, QueryKind, SpeechCommand
from dict_dispatch.orchestration import Dispatcher, create_dispatcher, create_handlers
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


class FakeHandler:
    """A backend handler that records the queries it receives."""

    name = "Fake"

    def __init__(self):
        self.queries = []

    def handle(self, query):
        self.queries.append(query)


@pytest.fixture
def extractor():
    extractor = MagicMock(spec=TextExtractor)
    extractor.extract.return_value = Query("hello")
    return extractor


@pytest.fixture
def speech():
    speech = MagicMock(spec=SpeechService)
    speech.enabled = True
    return speech


class TestDwim:
    """Tests for Dispatcher.dwim."""

    def test_routes_to_configured_backend(self, test_config, extractor):
        goldendict, bob = FakeHandler(), FakeHandler()
        dispatcher = Dispatcher(
            test_config, {Backend.GOLDENDICT: goldendict, Backend.BOB: bob}, extractor
        )

        query = dispatcher.dwim()

        assert query == Query("hello")
        assert goldendict.queries == [Query("hello")]
        assert bob.queries == []

    def test_no_backend(self, test_config, extractor):
        config = replace(test_config, backend=None)
        dispatcher = Dispatcher(config, {Backend.GOLDENDICT: FakeHandler()}, extractor)

        with pytest.raises(NoBackendConfigured):
            dispatcher.dwim()

        extractor.extract.assert_not_called()

    def test_unregistered_backend(self, test_config, extractor, speech):
        handler = FakeHandler()
        dispatcher = Dispatcher(test_config, {Backend.BOB: handler}, extractor, speech)

        with pytest.raises(UnknownBackend) as exc_info:
            dispatcher.dwim()

        assert exc_info.value.backend == "goldendict"
        assert handler.queries == []
        extractor.extract.assert_not_called()
        speech.speak.assert_not_called()

    def test_unknown_backend_name(self, test_config, extractor):
        config = replace(test_config, backend="lingoes")
        dispatcher = Dispatcher(config, {Backend.GOLDENDICT: FakeHandler()}, extractor)

        with pytest.raises(UnknownBackend, match="lingoes"):
            dispatcher.dwim()

    def test_cancelled_extraction(self, test_config, extractor, speech):
        extractor.extract.return_value = None
        handler = FakeHandler()
        dispatcher = Dispatcher(test_config, {Backend.GOLDENDICT: handler}, extractor, speech)

        assert dispatcher.dwim() is None
        assert handler.queries == []
        speech.speak.assert_not_called()

    def test_speaks_words(self, test_config, extractor, speech):
        dispatcher = Dispatcher(
            test_config, {Backend.GOLDENDICT: FakeHandler()}, extractor, speech
        )

        dispatcher.dwim()

        speech.speak.assert_called_once_with("hello")

    def test_does_not_speak_selections_by_default(self, test_config, extractor, speech):
        extractor.extract.return_value = Query("good girl", QueryKind.TEXT)
        dispatcher = Dispatcher(
            test_config, {Backend.GOLDENDICT: FakeHandler()}, extractor, speech
        )

        dispatcher.dwim()

        speech.speak.assert_not_called()

    def test_speaks_selections_when_enabled(self, test_config, extractor, speech):
        extractor.extract.return_value = Query("good girl", QueryKind.TEXT)
        config = replace(test_config, speak_selections=True)
        dispatcher = Dispatcher(config, {Backend.GOLDENDICT: FakeHandler()}, extractor, speech)

        dispatcher.dwim()

        speech.speak.assert_called_once_with("good girl")

    def test_speech_disabled(self, test_config, extractor, speech):
        speech.enabled = False
        dispatcher = Dispatcher(
            test_config, {Backend.GOLDENDICT: FakeHandler()}, extractor, speech
        )

        dispatcher.dwim()

        speech.speak.assert_not_called()

    def test_handler_error_skips_speech(self, test_config, extractor, speech):
        handler = MagicMock()
        handler.handle.side_effect = RuntimeError("boom")
        dispatcher = Dispatcher(test_config, {Backend.GOLDENDICT: handler}, extractor, speech)

        with pytest.raises(RuntimeError):
            dispatcher.dwim()

        speech.speak.assert_not_called()


class TestLookup:
    """Tests for Dispatcher.lookup."""

    def test_dispatches_given_query(self, test_config, extractor):
        handler = FakeHandler()
        dispatcher = Dispatcher(test_config, {Backend.GOLDENDICT: handler}, extractor)

        dispatcher.lookup(Query("world"))

        assert handler.queries == [Query("world")]
        extractor.extract.assert_not_called()


class TestRaiseMainWindow:
    """Tests for Dispatcher.raise_main_window."""

    def test_handler_with_window(self, test_config, extractor):
        handler = MagicMock()
        dispatcher = Dispatcher(test_config, {Backend.GOLDENDICT: handler}, extractor)

        assert dispatcher.raise_main_window() is True
        handler.raise_main_window.assert_called_once()

    def test_handler_without_window(self, test_config, extractor):
        dispatcher = Dispatcher(test_config, {Backend.GOLDENDICT: FakeHandler()}, extractor)

        assert dispatcher.raise_main_window() is False


class TestFactory:
    """Tests for create_handlers and create_dispatcher."""

    def test_every_backend_registered(self, test_config, null_presenter, static_input):
        handlers = create_handlers(test_config, null_presenter, static_input())

        assert set(handlers) == set(Backend)
        assert isinstance(handlers[Backend.GOLDENDICT], GoldenDictHandler)
        assert isinstance(handlers[Backend.BOB], BobHandler)
        assert isinstance(handlers[Backend.EUDIC], EudicHandler)
        assert isinstance(handlers[Backend.EASYDICT], EasydictHandler)
        assert isinstance(handlers[Backend.EASYDICT_URL], UrlSchemeHandler)
        assert isinstance(handlers[Backend.OSX_DICTIONARY], OsxDictionaryHandler)

    def test_easydict_falls_back_to_registered_url_handler(
        self, test_config, null_presenter, static_input
    ):
        handlers = create_handlers(test_config, null_presenter, static_input())

        assert handlers[Backend.EASYDICT].url_handler is handlers[Backend.EASYDICT_URL]

    def test_end_to_end_goldendict(self, test_config, null_presenter, static_input, make_context):
        config = replace(test_config, speech_command=SpeechCommand.ESPEAK)
        context = make_context(line="look up serendipity here", column=10)
        dispatcher = create_dispatcher(config, context, null_presenter, static_input())

        with (
            patch(
                "dict_dispatch.services.handlers.goldendict_handler.is_process_running",
                return_value=True,
            ),
            patch("dict_dispatch.services.handlers.goldendict_handler.spawn_detached") as spawn,
            patch(
                "dict_dispatch.services.speech_service.run_shell",
                return_value=MagicMock(returncode=0),
            ) as run_shell,
        ):
            query = dispatcher.dwim()

        assert query.text == "serendipity"
        spawn.assert_called_once_with(["goldendict", "serendipity"])
        assert run_shell.call_args[0][0] == "espeak serendipity"
