"""Handler for the Eudic dictionary, driven through AppleScript."""

import subprocess

from dict_dispatch.exceptions import ExternalInvocationFailed
from dict_dispatch.models import Query
from dict_dispatch.utils import applescript_quote, run_osascript


class EudicHandler:
    """Show a word in Eudic's main window."""

    APP_NAME = "Eudic"

    @property
    def name(self) -> str:
        return self.APP_NAME

    def build_script(self, text: str) -> str:
        return "\n".join(
            [
                f"tell application {applescript_quote(self.APP_NAME)}",
                "activate",
                f"show dic with word {applescript_quote(text)}",
                "end tell",
            ]
        )

    def handle(self, query: Query) -> None:
        """Look the query up in Eudic.

        Raises:
            ExternalInvocationFailed: If osascript fails
        """
        try:
            result = run_osascript(self.build_script(query.text))
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ExternalInvocationFailed("osascript", str(e)) from e

        if result.returncode != 0:
            raise ExternalInvocationFailed(self.APP_NAME, result.stderr.strip())
