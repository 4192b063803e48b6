"""MCP (Model Context Protocol) request handling.

Transport-independent JSON-RPC 2.0 dispatch shared by the stdio loop and
the Streamable HTTP endpoint.

Supported methods:
- initialize: protocol version negotiation and server info
- ping: liveness check
- tools/list: the document operation catalog
- tools/call: run one document operation
- notifications/*: accepted, never answered
"""
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from fit_docs_mcp.config import ServerConfig, SUPPORTED_PROTOCOL_VERSIONS
from fit_docs_mcp.models import (
    JsonRpcRequest, JsonRpcError, JsonRpcResponse,
    Tool, ToolListResult, ToolCallResult,
)
from fit_docs_mcp.operations.document_router import DocumentRouter

logger = logging.getLogger(__name__)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def error_response(request_id: Optional[Union[int, str]], code: int, message: str) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=code, message=message))


class McpHandler:
    """Dispatches JSON-RPC messages to the document router"""

    def __init__(self, router: DocumentRouter, server: Optional[ServerConfig] = None):
        self.router = router
        self.server = server or ServerConfig()

    async def handle_message(self, payload: Any) -> Optional[Union[Dict, List]]:
        """Handle one decoded JSON message (object or batch).

        Returns the wire-ready response, or None when nothing should be sent.
        """
        if isinstance(payload, list):
            if not payload:
                return error_response(None, INVALID_REQUEST, "Invalid Request: empty batch").to_wire()
            responses = [await self._handle_single(item) for item in payload]
            responses = [r for r in responses if r is not None]
            return responses or None
        return await self._handle_single(payload)

    async def _handle_single(self, payload: Any) -> Optional[Dict]:
        """Validate the envelope and dispatch"""
        if not isinstance(payload, dict):
            return error_response(None, INVALID_REQUEST, "Invalid Request: expected a JSON object").to_wire()
        request_id = payload.get("id")
        if not isinstance(request_id, (int, str)):
            request_id = None
        try:
            rpc_request = JsonRpcRequest(**payload)
        except ValidationError as e:
            return error_response(request_id, INVALID_REQUEST, f"Invalid Request: {e.errors()[0]['msg']}").to_wire()

        rpc_response = await self.handle_request(rpc_request)
        return rpc_response.to_wire() if rpc_response is not None else None

    async def handle_request(self, rpc_request: JsonRpcRequest) -> Optional[JsonRpcResponse]:
        """Handle a single JSON-RPC request."""
        method = rpc_request.method
        params = rpc_request.params or {}

        if rpc_request.is_notification:
            logger.debug(f"Notification: {method}")
            return None

        try:
            if method == "initialize":
                result = await self.handle_initialize(params)
            elif method == "ping":
                result = {}
            elif method == "tools/list":
                result = (await self.handle_list_tools()).model_dump()
            elif method == "tools/call":
                arguments = params.get("arguments") or {}
                if not isinstance(arguments, dict):
                    return error_response(rpc_request.id, INVALID_PARAMS, "Invalid params: arguments must be an object")
                tool_result = await self.handle_call_tool(params.get("name", ""), arguments)
                result = tool_result.model_dump()
            else:
                return error_response(rpc_request.id, METHOD_NOT_FOUND, f"Method not found: {method}")

            return JsonRpcResponse(id=rpc_request.id, result=result)

        except Exception as e:
            logger.exception(f"Internal error handling {method}")
            return error_response(rpc_request.id, INTERNAL_ERROR, f"Internal error: {str(e)}")

    async def handle_initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Handle initialize JSON-RPC method."""
        requested = params.get("protocolVersion")
        if requested in SUPPORTED_PROTOCOL_VERSIONS:
            version = requested
        else:
            version = self.server.protocol_version
        client = params.get("clientInfo")
        client_name = client.get("name") if isinstance(client, dict) else None
        logger.info(f"Initialize from {client_name or 'unknown client'} (protocol {version})")
        return {
            "protocolVersion": version,
            "capabilities": {
                "tools": {},
            },
            "serverInfo": {
                "name": self.server.name,
                "version": self.server.version,
            },
        }

    async def handle_list_tools(self) -> ToolListResult:
        """Handle tools/list JSON-RPC method."""
        return ToolListResult(
            tools=[Tool(**spec.to_tool()) for spec in self.router.list_operations()]
        )

    async def handle_call_tool(self, name: str, arguments: Dict[str, Any]) -> ToolCallResult:
        """Handle tools/call JSON-RPC method."""
        document = await self.router.call(name, arguments)
        return ToolCallResult(
            content=[{"type": "text", "text": document.text}],
            isError=document.failed,
        )
