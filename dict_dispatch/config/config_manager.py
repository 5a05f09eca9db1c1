"""Persistence of user configuration overrides."""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

from dict_dispatch.models import SpeechCommand

from .config import DispatchConfig

logger = logging.getLogger(__name__)


def _to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def _to_optional_str(value: str) -> str | None:
    value = value.strip()
    return None if value.lower() in ("", "none", "ask") else value


def _to_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _to_speech_command(value: str) -> str:
    return SpeechCommand(value.strip().lower()).value


# How values typed on the command line are converted per setting.
# ``cli_invocable`` is derived from the backend and is not settable.
_CONVERTERS = {
    "backend": _to_optional_str,
    "speech_command": _to_speech_command,
    "speech_delay": float,
    "speak_selections": _to_bool,
    "easydict_host": str,
    "easydict_port": int,
    "http_timeout": float,
    "probe_timeout": float,
    "url_scheme": str,
    "target_language": _to_optional_str,
    "service_type": _to_optional_str,
    "apple_dictionary_names": _to_names,
    "bob_version_threshold": str,
    "goldendict_executable": str,
    "applications_dir": str,
}


def _coerce(key: str, value: Any) -> Any:
    """Convert a stored value and check it builds a valid configuration.

    Raises:
        TypeError: If the value has the wrong type
        ValueError: If the value cannot be converted
    """
    converter = _CONVERTERS[key]
    if isinstance(value, str):
        value = converter(value)
    elif converter in (int, float) and (
        isinstance(value, bool) or not isinstance(value, (int, float))
    ):
        raise TypeError(f"expected a number, got {value!r}")
    DispatchConfig(**{key: value})
    return value


class ConfigManager:
    """Manager for persisted configuration overrides.

    Only the settings the user explicitly changed are stored, in a JSON
    file in the user's home directory. Everything else keeps coming from
    host probing, so installing a new dictionary app is picked up without
    editing the file.
    """

    CONFIG_FILE = Path.home() / ".dict_dispatch" / "config.json"

    @classmethod
    def settable_keys(cls) -> list[str]:
        """Names of the settings that can be overridden."""
        known = {f.name for f in fields(DispatchConfig)}
        return [key for key in _CONVERTERS if key in known]

    @classmethod
    def load_overrides(cls) -> dict[str, Any]:
        """Load overrides from the JSON file.

        Returns:
            Dictionary of overrides, empty if the file doesn't exist

        Note:
            If the file exists but is invalid, it is ignored and a warning
            is logged. Single settings with invalid values are dropped the
            same way.
        """
        if not cls.CONFIG_FILE.exists():
            return {}

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Invalid config file, ignoring it: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Invalid config file, expected a JSON object")
            return {}

        allowed = set(cls.settable_keys())
        unknown = set(data) - allowed
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")

        overrides: dict[str, Any] = {}
        for key, value in data.items():
            if key not in allowed:
                continue
            try:
                overrides[key] = _coerce(key, value)
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring invalid value for {key}: {e}")
        return overrides

    @classmethod
    def save_overrides(cls, overrides: dict[str, Any]) -> None:
        """Save overrides to the JSON file.

        Args:
            overrides: Settings to persist

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(cls._to_json(overrides), f, indent=2, ensure_ascii=False)

    @classmethod
    def set_value(cls, key: str, raw_value: str) -> Any:
        """Convert and persist a single setting.

        Args:
            key: Setting name
            raw_value: Value as typed by the user

        Returns:
            The converted value that was stored

        Raises:
            KeyError: If the setting is unknown
            ValueError: If the value cannot be converted
        """
        if key not in cls.settable_keys():
            raise KeyError(key)

        value = _CONVERTERS[key](raw_value)
        overrides = cls.load_overrides()
        overrides[key] = value
        cls.save_overrides(overrides)
        return value

    @classmethod
    def unset_value(cls, key: str) -> bool:
        """Remove a single override.

        Returns:
            True if the setting was present
        """
        overrides = cls.load_overrides()
        if key not in overrides:
            return False
        del overrides[key]
        cls.save_overrides(overrides)
        return True

    @classmethod
    def config_exists(cls) -> bool:
        """Check if the configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file, returning to detected defaults."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _to_json(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path, enum and tuple values to JSON-friendly types."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, Path):
                result[key] = str(value)
            elif isinstance(value, tuple):
                result[key] = list(value)
            elif hasattr(value, "value") and isinstance(value.value, str):
                result[key] = value.value
            else:
                result[key] = value
        return result
