"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- health: health/info endpoints
- mcp: MCP Streamable HTTP transport
"""
