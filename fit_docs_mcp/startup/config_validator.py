"""
Configuration validator for startup checks.

Validates configuration settings early to provide clear error messages
before the server starts accepting requests.
"""
import logging
import os
from typing import List

from fit_docs_mcp.config import TRANSPORT_MODES, LOG_LEVELS

logger = logging.getLogger(__name__)

# Subdirectories the document routes read from
EXPECTED_SUBDIRECTORIES = ("skills", "docs")


class ConfigValidationError(Exception):
    """Configuration validation failed"""
    pass


class ConfigValidator:
    """Validates configuration settings on startup

    Invalid settings are errors. Problems with the document tree are only
    warnings: each request reports its own read failure.
    """

    def __init__(self, config):
        self.config = config
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> None:
        """Validate all configuration settings

        Raises:
            ConfigValidationError: If validation fails
        """
        self._validate_environment()
        self._validate_transport()
        self._validate_log_level()
        self._validate_docs_root()

        for warning in self.warnings:
            logger.warning(warning)

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            raise ConfigValidationError(error_msg)

    def _validate_environment(self) -> None:
        """Report environment values the loader could not parse"""
        self.errors.extend(self.config.load_errors)

    def _validate_transport(self) -> None:
        """Validate transport mode and HTTP port"""
        transport = self.config.transport
        if transport.mode not in TRANSPORT_MODES:
            self.errors.append(
                f"Unknown transport: {transport.mode}\n"
                f"    Set MCP_TRANSPORT to one of: {', '.join(TRANSPORT_MODES)}"
            )
        if not 1 <= transport.port <= 65535:
            self.errors.append(
                f"Port out of range: {transport.port}\n"
                f"    Set MCP_PORT to a value between 1 and 65535"
            )

    def _validate_log_level(self) -> None:
        """Validate log level name"""
        level = self.config.logging.level
        if level not in LOG_LEVELS:
            self.errors.append(
                f"Unknown log level: {level}\n"
                f"    Set LOG_LEVEL to one of: {', '.join(LOG_LEVELS)}"
            )

    def _validate_docs_root(self) -> None:
        """Warn about an unusable document root"""
        docs_root = self.config.paths.docs_root

        if not docs_root.exists():
            self.warnings.append(
                f"Document root does not exist: {docs_root} "
                f"(set DOCS_PATH); every read will fail"
            )
            return

        if not docs_root.is_dir():
            self.warnings.append(f"Document root is not a directory: {docs_root}")
            return

        if not os.access(docs_root, os.R_OK):
            self.warnings.append(f"Document root is not readable: {docs_root}")
            return

        for name in EXPECTED_SUBDIRECTORIES:
            if not (docs_root / name).is_dir():
                self.warnings.append(f"Missing {name}/ directory under {docs_root}")
