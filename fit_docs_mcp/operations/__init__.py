"""Operations layer for the document server.

This package handles MCP-facing operations:
- Operation catalog (OperationSpec, OPERATIONS)
- Document routing (DocumentRouter)

Principles:
- Single Responsibility Principle
- Dependency Injection
"""
