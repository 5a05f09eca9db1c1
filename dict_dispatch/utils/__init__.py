"""Utility functions for dict_dispatch."""

from .net_utils import port_is_open
from .process_utils import (
    is_process_running,
    run_osascript,
    run_shell,
    spawn_detached,
    url_open_command,
)
from .text_utils import applescript_quote, normalize_selection, word_at_column
from .version_utils import is_at_least, parse_version

__all__ = [
    "port_is_open",
    "is_process_running",
    "run_osascript",
    "run_shell",
    "spawn_detached",
    "url_open_command",
    "applescript_quote",
    "normalize_selection",
    "word_at_column",
    "is_at_least",
    "parse_version",
]
