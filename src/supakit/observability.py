"""
supakit - Logging setup.

Library modules only create module loggers; applications (the CLI, the
example scripts) call setup_logging() once at startup.
"""

import logging
import sys

# HTTP and websocket libraries used by supabase-py log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "websockets")


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging to stderr with a compact format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
