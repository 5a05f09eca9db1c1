"""Default configuration values for dict_dispatch."""

from .config import DispatchConfig


def create_default_config(**overrides) -> DispatchConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DispatchConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            backend="goldendict",
            speech_command="espeak",
        )
    """
    return DispatchConfig(**overrides)
