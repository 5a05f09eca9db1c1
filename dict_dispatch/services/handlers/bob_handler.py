"""Handler for the Bob translation app, driven through AppleScript."""

import json
import logging
import plistlib
import subprocess

from dict_dispatch.config import DispatchConfig
from dict_dispatch.exceptions import ExternalInvocationFailed
from dict_dispatch.models import Query
from dict_dispatch.utils import applescript_quote, is_at_least, run_osascript

logger = logging.getLogger(__name__)


class BobHandler:
    """Send text to Bob through the AppleScript bridge.

    Bob versions before ``bob_version_threshold`` only understand the
    ``translate`` verb. Later versions take a JSON request through the
    generic ``request`` verb, which also lets us place the window.
    """

    APP_NAME = "Bob"

    def __init__(self, config: DispatchConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.APP_NAME

    def get_version(self) -> str | None:
        """Read the installed Bob version from its bundle's Info.plist.

        Returns:
            Version string (e.g. "1.5.0"), or None if it cannot be read
        """
        bundle = self.config.bob_app_path or (
            self.config.applications_dir / f"{self.APP_NAME}.app"
        )
        plist_path = bundle / "Contents" / "Info.plist"
        try:
            with plist_path.open("rb") as f:
                info = plistlib.load(f)
        except (OSError, plistlib.InvalidFileException, ValueError) as e:
            logger.debug(f"Could not read {plist_path}: {e}")
            return None

        version = info.get("CFBundleShortVersionString")
        return version if isinstance(version, str) else None

    def uses_request_api(self, version: str | None) -> bool:
        """Check if a Bob version takes JSON requests.

        An unknown or unparsable version is assumed to be current.
        """
        if version is None:
            return True
        try:
            return is_at_least(version, self.config.bob_version_threshold)
        except ValueError:
            logger.warning(f"Unrecognized {self.APP_NAME} version {version!r}")
            return True

    def build_legacy_script(self, text: str) -> str:
        """Script for Bob versions that only know the ``translate`` verb."""
        app = applescript_quote(self.APP_NAME)
        return f"tell application {app} to translate {applescript_quote(text)}"

    def build_request_script(self, text: str) -> str:
        """Script sending a JSON translate request through ``request``."""
        payload = {
            "path": "translate",
            "body": {
                "action": "translateText",
                "text": text,
                "windowLocation": "center",
                "inputBoxState": "alwaysUnfold",
            },
        }
        body = json.dumps(payload, ensure_ascii=False)
        app = applescript_quote(self.APP_NAME)
        return f"tell application {app} to request {applescript_quote(body)}"

    def build_script(self, text: str, version: str | None) -> str:
        """Pick the script format matching the installed version."""
        if self.uses_request_api(version):
            return self.build_request_script(text)
        return self.build_legacy_script(text)

    def handle(self, query: Query) -> None:
        """Translate the query in Bob.

        Raises:
            ExternalInvocationFailed: If osascript fails
        """
        version = self.get_version()
        script = self.build_script(query.text, version)
        logger.debug(f"{self.APP_NAME} version {version}, sending script")

        try:
            result = run_osascript(script)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ExternalInvocationFailed("osascript", str(e)) from e

        if result.returncode != 0:
            raise ExternalInvocationFailed(self.APP_NAME, result.stderr.strip())
