"""File and folder MCP tools.

These tools take vault-relative paths verbatim (no ``.md`` is added) and never
raise on filesystem failures; a failure is described in the returned text.
"""
import asyncio
import logging

from mcp.server.fastmcp import Context, FastMCP

from obsidian_notes.core import responses
from obsidian_notes.core.file_operations import (
    append_content,
    delete_file,
    list_files_in_dir,
)
from obsidian_notes.models import AppendText, DirPath, FilePath
from obsidian_notes.results import Err
from obsidian_notes.session import resolve_vault

logger = logging.getLogger(__name__)


async def list_files_in_obsidian_dir(dirpath: DirPath, ctx: Context) -> str:
    """List files and folders directly inside a vault folder.

    Returns:
        ``Files in '<dirpath>':\\n`` followed by entry names, or a warning when
        the folder is missing or unreadable.
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(list_files_in_dir, vault, dirpath)
    if isinstance(result, Err):
        logger.warning("Directory '%s' unavailable (%s)", dirpath, result.kind.value)
        return responses.directory_unavailable(dirpath)
    return responses.directory_listing(dirpath, result.value)


async def delete_obsidian_file(filepath: FilePath, ctx: Context) -> str:
    """Permanently delete a file. Folders are not deleted."""
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(delete_file, vault, filepath)
    if isinstance(result, Err):
        logger.warning("Delete of '%s' failed (%s)", filepath, result.kind.value)
        return responses.file_delete_failed(filepath, result)
    return responses.file_deleted(filepath)


async def append_obsidian_content(filepath: FilePath, content: AppendText, ctx: Context) -> str:
    """Append text to a file, creating it when absent.

    Parent folders must already exist.
    """
    vault = resolve_vault(ctx)
    result = await asyncio.to_thread(append_content, vault, filepath, content)
    if isinstance(result, Err):
        logger.warning("Append to '%s' failed (%s)", filepath, result.kind.value)
        return responses.content_append_failed(filepath, result)
    return responses.content_appended(filepath)


def register(server: FastMCP) -> None:
    """Register the file tools on ``server``."""
    server.tool(
        name="list-files-in-dir",
        description="Lists all files and directories that exist in a specific Obsidian directory.",
    )(list_files_in_obsidian_dir)
    server.tool(
        name="delete-file",
        description="Deletes a file from the Obsidian vault.",
    )(delete_obsidian_file)
    server.tool(
        name="append-content",
        description="Appends content to a new or existing file in the Obsidian vault.",
    )(append_obsidian_content)
