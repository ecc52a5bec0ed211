"""Access to the vault configured for the running server."""

from mcp.server.fastmcp import Context

from obsidian_notes.data_models import VaultContext, VaultMetadata


def resolve_vault(ctx: Context) -> VaultMetadata:
    """Return the vault bound to the server handling this request.

    Args:
        ctx: The request context supplied by FastMCP. The server lifespan stores
            a :class:`VaultContext` on it at startup.

    Returns:
        The immutable :class:`VaultMetadata` for this process.

    Raises:
        RuntimeError: If the server was started without a vault lifespan.
    """
    state = ctx.request_context.lifespan_context
    if not isinstance(state, VaultContext):
        raise RuntimeError("Server was not started with a vault configuration")
    return state.vault
