"""MCP (Model Context Protocol) HTTP transport endpoint.

Implements Streamable HTTP transport for a network-accessible MCP server.
Spec: https://modelcontextprotocol.io/specification/2025-03-26/basic/transports

Features:
- JSON-RPC 2.0 protocol over HTTP
- SSE (Server-Sent Events) for tool call responses
- No authentication (local network only)
- Same tools as the stdio server (load_skill, read_common, read_app_doc)

Usage:
- POST /mcp - Send JSON-RPC requests (returns JSON or SSE stream)
- Clients may include Accept: application/json, text/event-stream
"""
import json
from typing import Any, AsyncGenerator

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse

from fit_docs_mcp.mcp_handler import PARSE_ERROR, error_response
from fit_docs_mcp.routes.deps import get_app_state

router = APIRouter()


async def sse_generator(payload: Any) -> AsyncGenerator[str, None]:
    """Generate SSE events for streaming response."""
    # SSE format: "data: {json}\n\n"
    yield f"data: {json.dumps(payload)}\n\n"


def _is_tool_call(body: Any) -> bool:
    return isinstance(body, dict) and body.get("method") == "tools/call"


@router.post("/mcp")
async def mcp_endpoint(request: Request):
    """
    MCP Streamable HTTP endpoint.

    Accepts JSON-RPC 2.0 requests and returns either:
    - application/json for single responses
    - text/event-stream for tool calls when the client accepts it
    - 202 Accepted with no body for notifications
    """
    accept_header = request.headers.get("accept", "application/json")
    supports_sse = "text/event-stream" in accept_header

    try:
        body = await request.json()
    except ValueError as e:
        return JSONResponse(
            status_code=400,
            content=error_response(None, PARSE_ERROR, f"Parse error: {str(e)}").to_wire(),
        )

    handler = get_app_state(request).get_mcp_handler()
    payload = await handler.handle_message(body)

    if payload is None:
        return Response(status_code=202)

    if supports_sse and _is_tool_call(body):
        return StreamingResponse(
            sse_generator(payload),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
            },
        )
    return JSONResponse(content=payload)


@router.get("/mcp")
async def mcp_info(request: Request):
    """
    Info endpoint for MCP HTTP server.

    Returns server capabilities and connection instructions.
    """
    app_state = get_app_state(request)
    server = app_state.config.server
    return {
        "name": server.name,
        "version": server.version,
        "protocol": "MCP Streamable HTTP",
        "transport": "HTTP + SSE",
        "authentication": "none (local network only)",
        "tools": app_state.tool_names(),
        "endpoint": "/mcp",
        "usage": {
            "POST": "Send JSON-RPC 2.0 requests",
            "Accept": "application/json, text/event-stream",
        },
    }
