"""Configuration classes for dict_dispatch."""

from dataclasses import dataclass, field
from pathlib import Path

from dict_dispatch.models import Backend, SpeechCommand


@dataclass(frozen=True)
class DispatchConfig:
    """Immutable configuration for dictionary dispatching.

    Resolved once at startup (see ``ConfigResolver``) and only read
    afterwards. ``backend`` is left as a plain string when it names a
    backend this version does not know, so the dispatcher can report it.
    """

    # Backend selection
    backend: Backend | str | None = None
    cli_invocable: bool = False

    # Speech settings
    speech_command: SpeechCommand = SpeechCommand.NONE
    speech_delay: float = 0.5  # Seconds to let focus settle before speaking
    speak_selections: bool = False  # Also read multi-word selections aloud

    # Easydict settings
    easydict_host: str = "localhost"
    easydict_port: int = 8080
    http_timeout: float = 5.0
    probe_timeout: float = 0.5
    url_scheme: str = "easydict"
    target_language: str | None = None  # None = ask every time
    service_type: str | None = None  # None = ask every time
    apple_dictionary_names: tuple[str, ...] = ()

    # Bob settings
    bob_version_threshold: str = "1.5.0"  # JSON request API from this version on
    bob_app_path: Path | None = None  # Detected bundle; None = applications_dir/Bob.app

    # GoldenDict settings
    goldendict_executable: str = "goldendict"

    # Host layout
    applications_dir: Path = field(default_factory=lambda: Path("/Applications"))

    def __post_init__(self):
        """Normalize string values coming from JSON or the command line."""
        if isinstance(self.backend, str) and not isinstance(self.backend, Backend):
            try:
                object.__setattr__(self, "backend", Backend(self.backend))
            except ValueError:
                pass  # Reported as UnknownBackend at dispatch time
        if isinstance(self.speech_command, str) and not isinstance(
            self.speech_command, SpeechCommand
        ):
            object.__setattr__(self, "speech_command", SpeechCommand(self.speech_command))
        if isinstance(self.applications_dir, str):
            object.__setattr__(self, "applications_dir", Path(self.applications_dir))
        if isinstance(self.bob_app_path, str):
            object.__setattr__(self, "bob_app_path", Path(self.bob_app_path))
        if isinstance(self.apple_dictionary_names, list):
            object.__setattr__(
                self, "apple_dictionary_names", tuple(self.apple_dictionary_names)
            )

    @property
    def has_backend(self) -> bool:
        """Check if a backend was detected or configured."""
        return bool(self.backend)

    @property
    def easydict_url(self) -> str:
        """Base URL of the local Easydict HTTP server."""
        return f"http://{self.easydict_host}:{self.easydict_port}"
