"""Pytest configuration and shared fixtures."""

import pytest

from dict_dispatch.config import DispatchConfig
from dict_dispatch.editors import CommandLineContext, StaticInputSource
from dict_dispatch.models import Backend, Query, QueryKind, SpeechCommand
from dict_dispatch.presenters import NullPresenter


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths and no delays."""
    return DispatchConfig(
        backend=Backend.GOLDENDICT,
        cli_invocable=True,
        speech_command=SpeechCommand.NONE,
        speech_delay=0.0,
        easydict_port=18080,
        http_timeout=2.0,
        probe_timeout=0.2,
        applications_dir=temp_dir / "Applications",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.translations = []
        self.configs = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_translation(self, result) -> None:
        self.translations.append(result)

    def show_config(self, config) -> None:
        self.configs.append(config)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def static_input():
    """Factory fixture for canned-answer input sources."""

    def _make(*answers):
        return StaticInputSource(answers)

    return _make


@pytest.fixture
def make_query():
    """Factory fixture for creating Query instances."""

    def _make(text="hello", kind=QueryKind.WORD):
        return Query(text, kind)

    return _make


@pytest.fixture
def make_context():
    """Factory fixture for command-line editor contexts."""

    def _make(selection=None, line=None, column=None, word=None):
        return CommandLineContext(selection=selection, line=line, column=column, word=word)

    return _make
