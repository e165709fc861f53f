"""
Logging configuration for the application.

Rejected parameters are logged at DEBUG by the binding module with their
raw input. That input comes straight from the client and may be sensitive,
so those entries are only let through when explicitly asked for, even when
the application itself runs at DEBUG.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that write the "Invalid input received" entries
REJECTED_INPUT_LOGGERS = (
    "typedparams.domain.params.param_type",
    "typedparams.interfaces.params.dependencies",
    "typedparams.cli",
)


def configure_logging(level: str = "INFO", log_rejected_input: bool = False) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        log_rejected_input: Let the raw-input DEBUG entries of rejected
            parameters through. Off by default.
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    binding_level = logging.DEBUG if log_rejected_input else max(root_level, logging.INFO)
    for name in REJECTED_INPUT_LOGGERS:
        logging.getLogger(name).setLevel(binding_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
