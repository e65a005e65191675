"""
Logging configuration.

The package only creates module loggers under the ``fastapi_http_exceptions``
namespace; it never installs handlers on import. Applications (the demo
app included) call configure_logging once at startup.
Logging must not change program behavior.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "fastapi_http_exceptions"
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def parse_level(level: str | None, default: int = logging.INFO) -> int:
    """Map a level name (case-insensitive) to its numeric value."""
    if not level:
        return default
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else default


def configure_logging(level: str = "INFO", *, package_level: str | None = None) -> None:
    """Route all logging to stdout with one pipe-delimited format.

    The middleware and responder diagnostics live under the package
    namespace, so they can be turned up or down without touching
    third-party loggers.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR).
        package_level: Level for ``fastapi_http_exceptions.*`` loggers.
            Defaults to ``level``.
    """
    root_level = parse_level(level)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(parse_level(package_level, root_level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
