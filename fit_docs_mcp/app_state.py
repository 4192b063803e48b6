"""Application state shared by the transports.

Built once at startup from Config; routes reach it through routes.deps.
"""
from fit_docs_mcp.config import Config
from fit_docs_mcp.mcp_handler import McpHandler
from fit_docs_mcp.operations.document_router import DocumentRouter


class AppState:
    """Holds the router and protocol handler for one server process"""

    def __init__(self, config: Config):
        self.config = config
        self.router = DocumentRouter(config.paths.docs_root)
        self.mcp = McpHandler(self.router, config.server)

    @property
    def docs_root(self):
        return self.config.paths.docs_root

    def get_router(self) -> DocumentRouter:
        return self.router

    def get_mcp_handler(self) -> McpHandler:
        return self.mcp

    def tool_names(self) -> list:
        return [spec.name for spec in self.router.list_operations()]
