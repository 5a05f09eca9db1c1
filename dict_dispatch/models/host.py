"""Snapshot of the host environment used for backend detection."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class HostEnvironment:
    """What probing saw on the host.

    Attributes:
        platform: ``sys.platform`` value (e.g. "darwin", "linux", "win32")
        applications: Names of installed application bundles, without ``.app``
        executables: Executable names found on PATH
        app_paths: Where each application bundle was found
    """

    platform: str
    applications: frozenset[str] = field(default_factory=frozenset)
    executables: frozenset[str] = field(default_factory=frozenset)
    app_paths: dict[str, Path] = field(default_factory=dict, compare=False)

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @property
    def is_linux(self) -> bool:
        return self.platform.startswith("linux")

    @property
    def is_windows(self) -> bool:
        return self.platform == "win32"

    def has_app(self, name: str) -> bool:
        """Check if an application bundle is installed."""
        return name in self.applications

    def has_executable(self, name: str) -> bool:
        """Check if an executable is on PATH."""
        return name in self.executables

    def app_path(self, name: str) -> Path | None:
        """Path of an installed ``.app`` bundle, if probing recorded one."""
        return self.app_paths.get(name)
