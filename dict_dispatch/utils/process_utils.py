"""Helpers for launching and probing external processes."""

import logging
import subprocess
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Detached children are never waited on. Handles are kept until poll() sees
# them exit, so Popen objects are not collected while the child still runs.
_detached: list[subprocess.Popen] = []


def spawn_detached(args: Sequence[str]) -> None:
    """Start a process in the background and return immediately.

    The child is detached from this process (own session on POSIX,
    ``DETACHED_PROCESS`` on Windows) with its standard streams closed, so it
    outlives the caller. Nothing is waited for and no result is collected.

    Args:
        args: Program and arguments

    Raises:
        OSError: If the program cannot be started (e.g. not installed)
    """
    logger.debug(f"Spawning detached: {list(args)}")
    kwargs: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True
    process = subprocess.Popen(list(args), **kwargs)
    _detached.append(process)
    _detached[:] = [p for p in _detached if p.poll() is None]


def is_process_running(name: str) -> bool:
    """Check the process list for a program.

    Uses ``pgrep -x`` on POSIX and ``tasklist`` on Windows.

    Args:
        name: Executable name (without path)

    Returns:
        True if at least one matching process is running
    """
    try:
        if sys.platform == "win32":
            image = name if name.lower().endswith(".exe") else f"{name}.exe"
            result = subprocess.run(
                ["tasklist", "/FI", f"IMAGENAME eq {image}", "/NH"],
                capture_output=True,
                text=True,
                timeout=5,
            )
            return image.lower() in result.stdout.lower()

        result = subprocess.run(
            ["pgrep", "-x", name],
            capture_output=True,
            text=True,
            timeout=5,
        )
        return result.returncode == 0

    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Could not list processes: {e}")
        return False


def run_shell(command: str, timeout: float = 10) -> subprocess.CompletedProcess:
    """Run a command line through the shell and wait for it.

    Args:
        command: Shell command line (arguments must already be quoted)
        timeout: Seconds before giving up

    Returns:
        The completed process, with text output captured

    Raises:
        OSError: If the shell cannot be started
        subprocess.TimeoutExpired: If the command does not finish in time
    """
    logger.debug(f"Running shell command: {command}")
    return subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )


def url_open_command(url: str) -> list[str]:
    """Build the command that opens a URL with the OS's default handler."""
    if sys.platform == "darwin":
        return ["open", url]
    if sys.platform == "win32":
        return ["cmd", "/c", "start", "", url]
    return ["xdg-open", url]


def run_osascript(script: str, timeout: float = 10) -> subprocess.CompletedProcess:
    """Run an AppleScript through ``osascript`` and wait for it.

    Args:
        script: AppleScript source
        timeout: Seconds before giving up

    Returns:
        The completed process, with text output captured

    Raises:
        OSError: If ``osascript`` is not available
        subprocess.TimeoutExpired: If the script does not finish in time
    """
    logger.debug(f"Running AppleScript: {script!r}")
    return subprocess.run(
        ["osascript", "-e", script],
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )
