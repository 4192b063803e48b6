"""Test package for fit-docs-mcp"""
