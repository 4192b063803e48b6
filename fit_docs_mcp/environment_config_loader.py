"""
Environment configuration loader.

Reading environment variables lives with the data source (environment)
rather than in the Config dataclasses.
"""
import os
from pathlib import Path
from typing import List

from fit_docs_mcp.config import (
    Config, ServerConfig, PathConfig, TransportConfig, LoggingConfig
)

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def __init__(self):
        self.errors: List[str] = []

    def load(self) -> Config:
        """Create Config from environment variables

        Unparseable values fall back to their defaults and are listed in
        Config.load_errors for ConfigValidator to report.
        """
        self.errors = []
        return Config(
            server=ServerConfig(),
            paths=self._load_path_config(),
            transport=self._load_transport_config(),
            logging=self._load_logging_config(),
            load_errors=list(self.errors)
        )

    def _load_path_config(self) -> PathConfig:
        """Load document root from environment (defaults to the parent directory)"""
        return PathConfig(
            docs_root=self._get_path("DOCS_PATH", Path(".."))
        )

    def _load_transport_config(self) -> TransportConfig:
        """Load transport configuration from environment"""
        return TransportConfig(
            mode=self._get_optional("MCP_TRANSPORT", "stdio").lower(),
            host=self._get_optional("MCP_HOST", "127.0.0.1"),
            port=self._get_int("MCP_PORT", 8000)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", "INFO").upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            self.errors.append(f"{key} must be an integer, got {value!r}")
            return default

    def _get_path(self, key: str, default: Path) -> Path:
        """Get path environment variable, expanded and made absolute"""
        value = os.getenv(key)
        path = Path(value) if value else default
        path = path.expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        return path.resolve()
