"""Handler for the macOS Dictionary app."""

import shlex
import subprocess

from dict_dispatch.exceptions import ExternalInvocationFailed
from dict_dispatch.models import Query
from dict_dispatch.utils import run_shell


class OsxDictionaryHandler:
    """Open a ``dict://`` URL in the native Dictionary viewer."""

    @property
    def name(self) -> str:
        return "Dictionary"

    def build_command(self, text: str) -> str:
        return f"open {shlex.quote(f'dict://{text}')}"

    def handle(self, query: Query) -> None:
        """Show the query in Dictionary.app.

        Raises:
            ExternalInvocationFailed: If ``open`` fails
        """
        command = self.build_command(query.text)
        try:
            result = run_shell(command)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ExternalInvocationFailed(command, str(e)) from e

        if result.returncode != 0:
            raise ExternalInvocationFailed(command, result.stderr.strip())
