"""
Configuration constants for the document MCP server
"""
from pathlib import Path
from dataclasses import dataclass, field
from typing import List

SERVER_NAME = "fit-common"
SERVER_VERSION = "2.0.0"

# MCP protocol revisions this server can speak, newest last
SUPPORTED_PROTOCOL_VERSIONS = ("2024-11-05", "2025-03-26", "2025-06-18")
DEFAULT_PROTOCOL_VERSION = "2024-11-05"

TRANSPORT_MODES = ("stdio", "http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

@dataclass
class ServerConfig:
    """Identity reported to MCP clients"""
    name: str = SERVER_NAME
    version: str = SERVER_VERSION
    protocol_version: str = DEFAULT_PROTOCOL_VERSION

@dataclass
class PathConfig:
    """Document tree location"""
    docs_root: Path = field(default_factory=lambda: Path.cwd().parent)

@dataclass
class TransportConfig:
    """How clients reach the server"""
    mode: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"

@dataclass
class Config:
    """Main configuration container"""
    server: ServerConfig
    paths: PathConfig
    transport: TransportConfig
    logging: LoggingConfig
    # Environment values that could not be parsed; reported by ConfigValidator
    load_errors: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from fit_docs_mcp.environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()
