"""Text payloads returned to MCP callers.

Every message here is part of the wire contract; callers may match on them.
"""

from __future__ import annotations

from collections.abc import Iterable

from obsidian_notes.results import Err


def _join_lines(names: Iterable[str]) -> str:
    return "\n".join(names)


def notes_listing(names: Iterable[str]) -> str:
    return f"Notes:\n{_join_lines(names)}"


def directory_listing(dirpath: str, names: Iterable[str]) -> str:
    return f"Files in '{dirpath}':\n{_join_lines(names)}"


def directory_unavailable(dirpath: str) -> str:
    return f"⚠️ Directory '{dirpath}' not found or not accessible."


def note_not_found(note: str) -> str:
    return f'Note "{note}" not found.'


def note_saved(note: str) -> str:
    return f'Note "{note}" saved.'


def search_results(query: str, names: Iterable[str]) -> str:
    return f'Notes containing "{query}":\n{_join_lines(names)}'


# The leading space in the two confirmations below is intentional.
def file_deleted(filepath: str) -> str:
    return f" Successfully deleted '{filepath}'."


def file_delete_failed(filepath: str, error: Err) -> str:
    return f"Failed to delete '{filepath}': {error.detail}"


def content_appended(filepath: str) -> str:
    return f" Successfully appended content to '{filepath}'."


def content_append_failed(filepath: str, error: Err) -> str:
    return f"Failed to append to '{filepath}': {error.detail}"
