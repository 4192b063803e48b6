"""
Centralized logging configuration.

All log output goes to stderr: on the stdio transport stdout carries the
JSON-RPC stream and must never receive log lines.

Importing this module quiets chatty third-party loggers; call
configure_logging() once at startup to install the handler.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_SUPPRESSED_LOGGERS = [
    'uvicorn.access',
    'httpx',
    'asyncio',
]

for _logger_name in _SUPPRESSED_LOGGERS:
    logging.getLogger(_logger_name).setLevel(logging.WARNING)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single stderr handler on the root logger.

    Safe to call more than once; the previous handler is replaced.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_fit_docs_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._fit_docs_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return root
