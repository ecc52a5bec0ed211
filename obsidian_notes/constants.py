"""Module-level constants for the Obsidian notes MCP server."""

from pathlib import Path

# Server identity
SERVER_NAME = "ObsidianMCP"

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "vault.yaml"
CONFIG_PATH_ENV = "OBSIDIAN_NOTES_CONFIG"
VAULT_PATH_ENV = "OBSIDIAN_VAULT_PATH"
ENFORCE_SANDBOX_ENV = "OBSIDIAN_ENFORCE_SANDBOX"

# Notes
NOTE_EXTENSION = ".md"
NOTE_URI_TEMPLATE = "note://{note}"

# Transports accepted by FastMCP.run()
TRANSPORTS = ("stdio", "sse", "streamable-http")

# Logging
LOG_LEVEL = "INFO"
