"""
fit-common document MCP server

Usage:
    python -m fit_docs_mcp                        # stdio transport (default)
    python -m fit_docs_mcp --transport http       # Streamable HTTP on MCP_HOST:MCP_PORT
    python -m fit_docs_mcp --docs-path ~/fit-docs  # override DOCS_PATH

Environment:
    DOCS_PATH, MCP_TRANSPORT, MCP_HOST, MCP_PORT, LOG_LEVEL
"""
import argparse
import dataclasses
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from fit_docs_mcp.app_state import AppState
from fit_docs_mcp.config import Config, TRANSPORT_MODES, LOG_LEVELS, default_config
from fit_docs_mcp.logging_config import configure_logging
from fit_docs_mcp.routes.health import router as health_router
from fit_docs_mcp.routes.mcp import router as mcp_router
from fit_docs_mcp.startup.config_validator import ConfigValidator, ConfigValidationError
from fit_docs_mcp.stdio_server import run_stdio

logger = logging.getLogger(__name__)


def create_app(config: Config) -> FastAPI:
    """Build the HTTP application around one AppState"""
    state = AppState(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan"""
        logger.info(f"Serving documents from {config.paths.docs_root}")
        yield

    app = FastAPI(
        title=f"{config.server.name} MCP server",
        description="Serves skill, shared and app-specific documents over MCP",
        version=config.server.version,
        lifespan=lifespan
    )

    # Store state in app for route access
    app.state.app_state = state

    app.include_router(health_router)
    app.include_router(mcp_router)
    return app


app = create_app(default_config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fit-docs-mcp",
        description="Serve skill and project documents over MCP (stdio or HTTP)."
    )
    parser.add_argument('--transport', choices=TRANSPORT_MODES, help='Transport (default: MCP_TRANSPORT or stdio)')
    parser.add_argument('--host', help='HTTP bind address (default: MCP_HOST or 127.0.0.1)')
    parser.add_argument('--port', type=int, help='HTTP port (default: MCP_PORT or 8000)')
    parser.add_argument('--docs-path', type=Path, help='Document root (default: DOCS_PATH or ..)')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, help='Log level (default: LOG_LEVEL or INFO)')
    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of config with command line flags applied"""
    transport = dataclasses.replace(
        config.transport,
        mode=args.transport or config.transport.mode,
        host=args.host or config.transport.host,
        port=args.port if args.port is not None else config.transport.port,
    )
    paths = config.paths
    if args.docs_path is not None:
        paths = dataclasses.replace(paths, docs_root=args.docs_path.expanduser().resolve())
    log = config.logging
    if args.log_level:
        log = dataclasses.replace(log, level=args.log_level)
    return dataclasses.replace(config, transport=transport, paths=paths, logging=log)


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    config = apply_overrides(default_config, args)
    configure_logging(config.logging.level)

    try:
        ConfigValidator(config).validate()
    except ConfigValidationError as e:
        logger.error(str(e))
        return 2

    logger.info(
        f"Starting {config.server.name} {config.server.version} "
        f"({config.transport.mode}, docs: {config.paths.docs_root})"
    )

    if config.transport.mode == "http":
        import uvicorn
        uvicorn.run(create_app(config), host=config.transport.host, port=config.transport.port)
    else:
        run_stdio(AppState(config).get_mcp_handler())
    return 0


if __name__ == "__main__":
    sys.exit(main())
