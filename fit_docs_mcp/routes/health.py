"""Health and info routes."""
from fastapi import APIRouter, Request
from fit_docs_mcp.models import HealthResponse
from fit_docs_mcp.routes.deps import get_app_state

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root(request: Request):
    """Root endpoint with API information"""
    server = get_app_state(request).config.server
    return {
        "message": f"{server.name} document MCP server",
        "mcp": "/mcp",
        "health": "/health"
    }


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """
    Health check endpoint

    Reports the document root without reading any documents
    """
    app_state = get_app_state(request)
    server = app_state.config.server

    return HealthResponse(
        status="healthy",
        server=server.name,
        version=server.version,
        docs_root=str(app_state.docs_root),
        docs_root_exists=app_state.docs_root.is_dir(),
        tools=app_state.tool_names()
    )
