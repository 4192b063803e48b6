"""MCP stdio transport.

One JSON-RPC message per line on stdin, one response per line on stdout.
Logging must stay on stderr; anything else written to stdout corrupts the
stream.
"""
import asyncio
import json
import logging
import sys
from typing import Any, Optional, TextIO

from fit_docs_mcp.mcp_handler import McpHandler, PARSE_ERROR, error_response

logger = logging.getLogger(__name__)


class StdioServer:
    """Serves one MCP session over a pair of text streams"""

    def __init__(self, handler: McpHandler, input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        self.handler = handler
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout

    async def serve(self) -> None:
        """Process messages until end of input"""
        logger.info("stdio transport ready")
        while True:
            line = await asyncio.to_thread(self.input.readline)
            if not line:
                break
            response = await self.handle_line(line)
            if response is not None:
                self._write(response)
        logger.info("stdin closed, shutting down")

    async def handle_line(self, line: str) -> Optional[Any]:
        """Decode one line and dispatch it; blank lines are ignored"""
        line = line.strip()
        if not line:
            return None
        try:
            payload = json.loads(line)
        except ValueError as e:
            logger.warning(f"Unparseable message: {e}")
            return error_response(None, PARSE_ERROR, f"Parse error: {str(e)}").to_wire()
        return await self.handler.handle_message(payload)

    def _write(self, response: Any) -> None:
        self.output.write(json.dumps(response) + "\n")
        self.output.flush()


def run_stdio(handler: McpHandler) -> None:
    """Entry point for the stdio transport"""
    asyncio.run(StdioServer(handler).serve())
