"""FastMCP server construction, lifespan and command line entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from obsidian_notes.config import load_vault_configuration
from obsidian_notes.constants import LOG_LEVEL, SERVER_NAME, TRANSPORTS
from obsidian_notes.data_models import VaultContext, VaultMetadata
from obsidian_notes.tools import register_all

logger = logging.getLogger(__name__)


def create_server(vault: VaultMetadata) -> FastMCP:
    """Build a FastMCP server bound to ``vault``.

    The vault is handed to every request through the lifespan context, so
    tools read it from their :class:`~mcp.server.fastmcp.Context` instead of a
    module-level global.

    Args:
        vault: Immutable metadata for the vault to serve.

    Returns:
        A FastMCP server with all tools and the ``note://{note}`` resource registered.
    """

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[VaultContext]:
        logger.info("Serving vault '%s' at %s", vault.name, vault.path)
        yield VaultContext(vault=vault)

    server = FastMCP(SERVER_NAME, lifespan=lifespan)
    register_all(server)
    return server


def run_server(vault: VaultMetadata, transport: str = "stdio") -> None:
    """Start the MCP server with the selected transport."""
    logger.info("Starting Obsidian MCP Server (%s)", transport)
    create_server(vault).run(transport=transport)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obsidian-notes",
        description="Expose an Obsidian vault as MCP tools.",
    )
    parser.add_argument("--vault", help="Vault root directory (overrides config and environment)")
    parser.add_argument("--config", type=Path, help="Path to the YAML configuration file")
    parser.add_argument("--transport", choices=TRANSPORTS, default="stdio")
    parser.add_argument("--log-level", help=f"Logging level (default: {LOG_LEVEL})")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console entry point."""
    args = build_parser().parse_args(argv)

    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(level=(args.log_level or LOG_LEVEL).upper())

    configuration = load_vault_configuration(config_path=args.config, vault_path=args.vault)
    if not args.log_level:
        logging.getLogger().setLevel(configuration.log_level)

    run_server(configuration.vault, transport=args.transport)


if __name__ == "__main__":
    main()
