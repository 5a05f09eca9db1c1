"""Network utilities."""

import logging
import socket

logger = logging.getLogger(__name__)


def port_is_open(host: str, port: int, timeout: float = 0.5) -> bool:
    """Check whether something accepts TCP connections on a port.

    The probe connection is closed before returning.

    Args:
        host: Host name or address
        port: TCP port
        timeout: Seconds to wait for the connection

    Returns:
        True if the connection succeeded
    """
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as e:
        logger.debug(f"Probe of {host}:{port} failed: {e}")
        return False
