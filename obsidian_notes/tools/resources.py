"""MCP resources exposed by the server."""
import asyncio
from urllib.parse import unquote

from mcp.server.fastmcp import Context, FastMCP

from obsidian_notes.constants import NOTE_URI_TEMPLATE
from obsidian_notes.core.note_operations import read_note_resource
from obsidian_notes.session import resolve_vault


async def read_obsidian_note_resource(note: str, ctx: Context) -> str:
    """Return the text served for ``note://{note}``.

    A note that cannot be read yields ``Note "<note>" not found.``
    """
    vault = resolve_vault(ctx)
    uri = NOTE_URI_TEMPLATE.format(note=note)
    contents = await asyncio.to_thread(read_note_resource, vault, note, uri)
    return contents.text


def register(server: FastMCP) -> None:
    """Register the ``note://{note}`` resource template on ``server``."""

    @server.resource(
        NOTE_URI_TEMPLATE,
        name="note",
        description="Content of a note in the Obsidian vault",
        mime_type="text/markdown",
    )
    async def note_resource(note: str) -> str:
        # URI template variables arrive percent-encoded
        return await read_obsidian_note_resource(unquote(note), server.get_context())
