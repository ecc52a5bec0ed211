"""Note MCP tools.

This module provides MCP tool wrappers for note operations:
- List notes in the vault root
- Read a note
- Create or overwrite a note
- Search note contents

``list-notes``, ``write-note`` and ``search-notes`` propagate filesystem
failures as tool errors. ``read-note`` reports any failure as a "not found"
text payload.

All tools delegate to core operations in obsidian_notes.core.note_operations.
"""
import asyncio
import logging

from mcp.server.fastmcp import Context, FastMCP

from obsidian_notes.core import responses
from obsidian_notes.core.note_operations import (
    list_notes,
    read_note,
    search_notes,
    write_note,
)
from obsidian_notes.models import NoteContent, NoteName, SearchQuery
from obsidian_notes.results import Err, OperationResult, T, unwrap
from obsidian_notes.session import resolve_vault

logger = logging.getLogger(__name__)


def _unwrap_or_raise(result: OperationResult[T], operation: str) -> T:
    if isinstance(result, Err):
        logger.error("%s failed: %s (%s)", operation, result.detail, result.kind.value)
    return unwrap(result, operation)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

# Shallow listing of the vault root; subfolders are never entered.
async def list_obsidian_notes(ctx: Context) -> str:
    """List markdown notes directly inside the vault root.

    Returns:
        ``"Notes:\\n"`` followed by the ``.md`` filenames, one per line.

    Error Handling:
        - Vault root missing or unreadable → tool error
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(list_notes, vault)
    return responses.notes_listing(_unwrap_or_raise(result, "list-notes"))


async def read_obsidian_note(note: NoteName, ctx: Context) -> str:
    """Read the complete content of ``<note>.md``.

    Args:
        note: Note identifier without extension, e.g. ``"Projects/Plan"``.

    Returns:
        The raw file content, or ``Note "<note>" not found.`` when the note
        cannot be read for any reason.
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(read_note, vault, note)
    if isinstance(result, Err):
        logger.warning("Note '%s' could not be read (%s)", note, result.kind.value)
        return responses.note_not_found(note)
    return result.value


async def search_obsidian_notes(query: SearchQuery, ctx: Context) -> str:
    """Search note contents in the vault root for a literal substring.

    Case-sensitive, no regex, not recursive. Each note is read in full.

    Args:
        query: Text to look for.

    Returns:
        ``Notes containing "<query>":\\n`` followed by matching filenames,
        one per line. No matches yields the header alone.

    Error Handling:
        - Vault root unreadable → tool error
        - Any note unreadable → tool error; the search is abandoned
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(search_notes, vault, query)
    return responses.search_results(query, _unwrap_or_raise(result, "search-notes"))


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================

# Last writer wins; there is no locking between concurrent writes.
async def write_obsidian_note(note: NoteName, content: NoteContent, ctx: Context) -> str:
    """Create ``<note>.md`` or overwrite it completely.

    Args:
        note: Note identifier without extension.
        content: New complete file content.

    Returns:
        ``Note "<note>" saved.``

    Error Handling:
        - Missing parent folder, permission error, path outside vault → tool error
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(write_note, vault, note, content)
    _unwrap_or_raise(result, "write-note")
    return responses.note_saved(note)


def register(server: FastMCP) -> None:
    """Register the note tools on ``server``."""
    server.tool(
        name="list-notes",
        description="Lists all markdown notes in the Obsidian vault",
    )(list_obsidian_notes)
    server.tool(
        name="read-note",
        description="Reads the content of a note in the Obsidian vault",
    )(read_obsidian_note)
    server.tool(
        name="write-note",
        description="Creates or updates a note in the Obsidian vault",
    )(write_obsidian_note)
    server.tool(
        name="search-notes",
        description="Searches for a keyword across all notes",
    )(search_obsidian_notes)
