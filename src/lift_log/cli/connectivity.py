"""Online/offline indicator shown in the CLI header. Display only."""

import socket

PROBE_HOST = "1.1.1.1"
PROBE_PORT = 53


def is_online(timeout: float = 0.5) -> bool:
    """Return True if a TCP connection to a public resolver succeeds."""
    try:
        with socket.create_connection((PROBE_HOST, PROBE_PORT), timeout=timeout):
            return True
    except OSError:
        return False
