"""Backend selection and invocation exceptions."""

from .base import DictDispatchException


class NoBackendConfigured(DictDispatchException):
    """Raised when no supported dictionary application was detected."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "No dictionary application found. Install GoldenDict, Bob, Eudic or "
            "Easydict, or pin one with 'dict_dispatch config set backend <name>'."
        )


class UnknownBackend(DictDispatchException):
    """Raised when the configured backend has no registered handler."""

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Unknown dictionary backend: {backend!r}")


class ServiceUnavailable(DictDispatchException):
    """Raised when a local translation service cannot be reached."""

    pass


class ExternalInvocationFailed(DictDispatchException):
    """Raised when a spawned process, script or HTTP call reports failure."""

    def __init__(self, target: str, detail: str = ""):
        self.target = target
        self.detail = detail
        message = f"Failed to invoke {target}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
