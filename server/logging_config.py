"""Root logging for the API process."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Client libraries that log every HTTP round trip at INFO/DEBUG
NOISY_LOGGERS = ("urllib3", "google.auth", "google.auth.transport", "cachecontrol")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send all records to stdout at `level`. Safe to call again (e.g. on reload)."""
    root = logging.getLogger()
    numeric = getattr(logging, level.upper(), None)
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return root
