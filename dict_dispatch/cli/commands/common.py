"""Helpers shared by the CLI commands."""

import sys
from typing import Any

from dict_dispatch.config import ConfigManager, DispatchConfig, resolve_config
from dict_dispatch.editors import ConsoleInputSource, StaticInputSource
from dict_dispatch.interfaces import InputSource


def cli_overrides(args) -> dict[str, Any]:
    """Collect configuration overrides given as global CLI flags."""
    overrides: dict[str, Any] = {}
    if getattr(args, "backend", None):
        overrides["backend"] = args.backend
    if getattr(args, "speech", None):
        overrides["speech_command"] = args.speech
    return overrides


def load_config(args) -> DispatchConfig:
    """Resolve the configuration: probing, then saved settings, then flags."""
    overrides = ConfigManager.load_overrides()
    overrides.update(cli_overrides(args))
    return resolve_config(overrides=overrides)


def make_input_source(args) -> InputSource:
    """Prompt on the terminal unless prompting was disabled."""
    if getattr(args, "no_prompt", False) or not sys.stdin.isatty():
        return StaticInputSource()
    return ConsoleInputSource()
