"""Obsidian Notes MCP Server

Obsidian vault note management via Model Context Protocol.
"""

from obsidian_notes.config import load_vault_configuration
from obsidian_notes.data_models import VaultConfiguration, VaultMetadata
from obsidian_notes.results import Err, ErrorKind, Ok, VaultOperationError
from obsidian_notes.server import create_server, main, run_server

__version__ = "1.0.0"
__all__ = [
    "load_vault_configuration",
    "VaultConfiguration",
    "VaultMetadata",
    "Err",
    "ErrorKind",
    "Ok",
    "VaultOperationError",
    "create_server",
    "main",
    "run_server",
]
