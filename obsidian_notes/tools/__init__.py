"""MCP tool and resource definitions for Obsidian vault operations.

Each submodule exposes a ``register(server)`` function that attaches its
tools (or resources) to a FastMCP server instance.
"""

from mcp.server.fastmcp import FastMCP

from obsidian_notes.tools import file_tools, note_tools, resources

__all__ = [
    "file_tools",
    "note_tools",
    "resources",
    "register_all",
]


def register_all(server: FastMCP) -> None:
    """Register every tool and resource on ``server``."""
    note_tools.register(server)
    file_tools.register(server)
    resources.register(server)
