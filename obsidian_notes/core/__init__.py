"""Core vault operations, independent of the MCP transport."""
