"""Service for reading text aloud."""

import logging
import shlex
import subprocess
import time

from dict_dispatch.config import DispatchConfig
from dict_dispatch.models import SpeechCommand
from dict_dispatch.utils import run_shell

logger = logging.getLogger(__name__)


class SpeechService:
    """Read words aloud with a text-to-speech command (stateless service).

    Speaking is best-effort: failures are logged and never interrupt the
    lookup that triggered them.
    """

    def __init__(self, config: DispatchConfig, sleep=time.sleep):
        """Initialize the speech service.

        Args:
            config: Configuration holding the speech command and delay
            sleep: Function used to wait before speaking
        """
        self.config = config
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        """Check if a speech command is configured."""
        return self.config.speech_command is not SpeechCommand.NONE

    def build_command(self, text: str) -> str | None:
        """Build the shell command line that speaks the text.

        Args:
            text: Text to read aloud

        Returns:
            Shell command line, or None when speech is disabled
        """
        quoted = shlex.quote(text)
        command = self.config.speech_command
        if command is SpeechCommand.SAY:
            return f"say {quoted}"
        if command is SpeechCommand.ESPEAK:
            return f"espeak {quoted}"
        if command is SpeechCommand.FESTIVAL:
            return f"echo {quoted} | festival --tts"
        return None

    def speak(self, text: str) -> None:
        """Read text aloud after a short delay.

        Args:
            text: Text to read aloud
        """
        command = self.build_command(text)
        if command is None:
            return

        self._sleep(self.config.speech_delay)

        try:
            result = run_shell(command, timeout=60)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Speech command failed: {e}")
            return

        if result.returncode != 0:
            logger.warning(
                f"Speech command '{self.config.speech_command.value}' exited with "
                f"{result.returncode}: {result.stderr.strip()}"
            )
