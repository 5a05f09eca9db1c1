"""Detect installed dictionary programs and resolve the configuration."""

import logging
import shutil
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from dict_dispatch.models import Backend, HostEnvironment, SpeechCommand

from .config import DispatchConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)

# Application bundles looked for on macOS
KNOWN_APPLICATIONS = (
    "Easydict",
    "Bob",
    "Eudic",
    "GoldenDict",
    "GoldenDict-ng",
    "Dictionary",
)

# Executables looked for on PATH
KNOWN_EXECUTABLES = (
    "goldendict",
    "GoldenDict",
    "say",
    "festival",
    "espeak",
)


def default_application_dirs() -> list[Path]:
    """Directories that hold application bundles on macOS."""
    return [
        Path("/Applications"),
        Path("/System/Applications"),
        Path.home() / "Applications",
    ]


def probe_host(
    platform: str | None = None,
    application_dirs: list[Path] | None = None,
) -> HostEnvironment:
    """Inspect the host for installed applications and executables.

    Only looks at the filesystem and PATH; nothing is launched.

    Args:
        platform: Platform override (defaults to ``sys.platform``)
        application_dirs: Directories to scan for ``.app`` bundles

    Returns:
        HostEnvironment snapshot
    """
    platform = platform or sys.platform
    app_paths: dict[str, Path] = {}

    if platform == "darwin":
        # Earlier directories win when an app is installed twice
        for directory in application_dirs or default_application_dirs():
            for name in KNOWN_APPLICATIONS:
                bundle = directory / f"{name}.app"
                if name not in app_paths and bundle.exists():
                    app_paths[name] = bundle
    applications = set(app_paths)

    executables = {name for name in KNOWN_EXECUTABLES if shutil.which(name)}

    logger.debug(f"Probed host {platform}: apps={sorted(applications)} exes={sorted(executables)}")
    return HostEnvironment(
        platform=platform,
        applications=frozenset(applications),
        executables=frozenset(executables),
        app_paths=app_paths,
    )


class ConfigResolver:
    """Select a backend and speech command from a host snapshot (pure)."""

    def __init__(self, base_config: DispatchConfig | None = None):
        """Initialize the resolver.

        Args:
            base_config: Configuration whose tunables are kept; only the
                backend, ``cli_invocable`` and speech fields are replaced.
        """
        self.base_config = base_config or create_default_config()

    def resolve(self, host: HostEnvironment) -> DispatchConfig:
        """Build the configuration for a host.

        Args:
            host: Snapshot returned by ``probe_host``

        Returns:
            DispatchConfig with at most one backend selected
        """
        backend = self.select_backend(host)
        changes: dict[str, Any] = {
            "backend": backend,
            "cli_invocable": backend.cli_invocable if backend else False,
            "speech_command": self.select_speech_command(host),
        }

        executable = self._goldendict_executable(host)
        if backend is Backend.GOLDENDICT and executable:
            changes["goldendict_executable"] = executable
        bob_bundle = host.app_path("Bob")
        if bob_bundle:
            changes["bob_app_path"] = bob_bundle

        return replace(self.base_config, **changes)

    def select_backend(self, host: HostEnvironment) -> Backend | None:
        """Pick exactly one backend following the per-OS priority order."""
        if host.is_macos:
            if host.has_app("Easydict"):
                return Backend.EASYDICT
            if host.has_app("Bob"):
                return Backend.BOB
            if host.has_app("Eudic"):
                return Backend.EUDIC
            if self._goldendict_executable(host):
                return Backend.GOLDENDICT
            if host.has_app("Dictionary"):
                return Backend.OSX_DICTIONARY
            return None

        if host.is_linux or host.is_windows:
            if self._goldendict_executable(host):
                return Backend.GOLDENDICT
            return None

        return None

    def select_speech_command(self, host: HostEnvironment) -> SpeechCommand:
        """Pick the speech command available on the host."""
        if host.is_macos:
            return SpeechCommand.SAY if host.has_executable("say") else SpeechCommand.NONE
        if host.has_executable("festival"):
            return SpeechCommand.FESTIVAL
        if host.has_executable("espeak"):
            return SpeechCommand.ESPEAK
        return SpeechCommand.NONE

    def _goldendict_executable(self, host: HostEnvironment) -> str | None:
        """Return the command that starts GoldenDict, if it is installed."""
        for name in ("goldendict", "GoldenDict"):
            if host.has_executable(name):
                return name
        if host.is_macos:
            for app in ("GoldenDict", "GoldenDict-ng"):
                if host.has_app(app):
                    bundle = host.app_path(app) or self.base_config.applications_dir / f"{app}.app"
                    return str(bundle / "Contents" / "MacOS" / app)
        return None


def application_dirs_for(config: DispatchConfig) -> list[Path]:
    """Bundle directories to scan, the configured one first."""
    dirs = [config.applications_dir]
    dirs.extend(d for d in default_application_dirs() if d != config.applications_dir)
    return dirs


def resolve_config(
    host: HostEnvironment | None = None,
    overrides: dict[str, Any] | None = None,
) -> DispatchConfig:
    """Probe the host and build the configuration used for this process.

    Overrides are applied before probing as well as after it, so a saved
    ``applications_dir`` is scanned first and explicit values always win.

    Args:
        host: Pre-probed host (probes the real host when None)
        overrides: User overrides (persisted settings, then CLI flags)

    Returns:
        Resolved DispatchConfig
    """
    overrides = overrides or {}
    base_config = create_default_config(**overrides)
    host = host or probe_host(application_dirs=application_dirs_for(base_config))
    config = ConfigResolver(base_config).resolve(host)

    if overrides:
        config = replace(config, **overrides)
        if "backend" in overrides and "cli_invocable" not in overrides:
            backend = config.backend
            config = replace(
                config,
                cli_invocable=isinstance(backend, Backend) and backend.cli_invocable,
            )

    logger.debug(f"Resolved backend={config.backend} speech={config.speech_command}")
    return config
