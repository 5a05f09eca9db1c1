"""Editor contexts and input sources."""

from .command_line_context import CommandLineContext
from .console_input import ConsoleInputSource
from .static_input import StaticInputSource

__all__ = ["CommandLineContext", "ConsoleInputSource", "StaticInputSource"]
