"""Handler for GoldenDict, driven through its command line."""

import logging
from pathlib import Path

from dict_dispatch.config import DispatchConfig
from dict_dispatch.exceptions import ExternalInvocationFailed
from dict_dispatch.models import Query
from dict_dispatch.utils import is_process_running, spawn_detached

logger = logging.getLogger(__name__)


class GoldenDictHandler:
    """Look words up in GoldenDict's scan popup.

    GoldenDict is a single-instance program: running the executable with a
    word while it is already running forwards the word to the existing
    instance. The handler therefore starts it once in the background and
    then passes each query as the only argument.
    """

    def __init__(self, config: DispatchConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "GoldenDict"

    @property
    def executable(self) -> str:
        return self.config.goldendict_executable

    @property
    def process_name(self) -> str:
        """Name the running process shows up as in the process list."""
        return Path(self.executable).name

    def ensure_running(self) -> bool:
        """Start GoldenDict in the background unless it is already running.

        Concurrent callers may both see it absent and both spawn it; the
        second instance exits on its own.

        Returns:
            True if a new process was spawned
        """
        if is_process_running(self.process_name):
            return False

        logger.info(f"Starting {self.name} in the background")
        self._spawn([self.executable])
        return True

    def handle(self, query: Query) -> None:
        """Show the query in GoldenDict's popup.

        Args:
            query: Text to look up (sent lower-cased)

        Raises:
            ExternalInvocationFailed: If GoldenDict cannot be started
        """
        self.ensure_running()
        self._spawn([self.executable, query.text.lower()])

    def raise_main_window(self) -> None:
        """Bring GoldenDict's main window to the front."""
        if not self.ensure_running():
            self._spawn([self.executable])

    def _spawn(self, args: list[str]) -> None:
        try:
            spawn_detached(args)
        except OSError as e:
            raise ExternalInvocationFailed(self.executable, str(e)) from e
