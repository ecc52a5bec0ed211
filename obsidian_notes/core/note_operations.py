"""Core business logic for note operations.

Notes are the ``.md`` files addressed by identifier (extension appended).
Listing and search are shallow: only entries directly in the vault root count.
"""

from __future__ import annotations

import logging
from pathlib import Path

from obsidian_notes.core import responses
from obsidian_notes.core.vault_operations import (
    is_note_name,
    read_text,
    resolve_note_path,
    write_text,
)
from obsidian_notes.data_models import NoteResourceContents, VaultMetadata
from obsidian_notes.results import Err, OperationResult, Ok, classify_os_error

logger = logging.getLogger(__name__)


# ==============================================================================
# NOTE OPERATIONS
# ==============================================================================


def list_notes(vault: VaultMetadata) -> OperationResult[list[str]]:
    """List the note filenames directly inside the vault root.

    Args:
        vault: Vault metadata.

    Returns:
        ``Ok`` with filenames ending in ``.md`` (extension kept), in directory
        listing order, or ``Err`` if the root cannot be listed.
    """
    try:
        names = [entry.name for entry in vault.path.iterdir()]
    except OSError as exc:
        return classify_os_error(exc)

    return Ok([name for name in names if is_note_name(name)])


def read_note(vault: VaultMetadata, note: str) -> OperationResult[str]:
    """Read the full content of ``<root>/<note>.md``.

    Args:
        vault: Vault metadata.
        note: Note identifier without extension.

    Returns:
        ``Ok`` with the file content, or ``Err`` describing why it could not be read.
    """
    target = resolve_note_path(vault, note)
    if isinstance(target, Err):
        return target

    try:
        return Ok(read_text(target.value))
    except OSError as exc:
        return classify_os_error(exc)


def write_note(vault: VaultMetadata, note: str, content: str) -> OperationResult[Path]:
    """Create or truncate ``<root>/<note>.md`` and write ``content`` into it.

    Parent folders are not created; writing into a missing folder fails.

    Args:
        vault: Vault metadata.
        note: Note identifier without extension.
        content: Complete new file content.

    Returns:
        ``Ok`` with the written path, or ``Err``.
    """
    target = resolve_note_path(vault, note)
    if isinstance(target, Err):
        return target

    try:
        write_text(target.value, content)
    except OSError as exc:
        return classify_os_error(exc)

    logger.info("Saved note '%s' in vault '%s'", note, vault.name)
    return Ok(target.value)


def search_notes(vault: VaultMetadata, query: str) -> OperationResult[list[str]]:
    """Find notes in the vault root whose content contains ``query``.

    Matching is a case-sensitive literal substring test on the whole file.
    Files are read one at a time in listing order; the first file that cannot
    be read fails the whole search.

    Args:
        vault: Vault metadata.
        query: Literal text to look for. An empty query matches every note.

    Returns:
        ``Ok`` with matching filenames (extension kept), or the first ``Err``.
    """
    listing = list_notes(vault)
    if isinstance(listing, Err):
        return listing

    matches: list[str] = []
    for name in listing.value:
        try:
            content = read_text(vault.path / name)
        except OSError as exc:
            logger.error("Search aborted: could not read '%s' in vault '%s'", name, vault.name)
            return classify_os_error(exc)

        if query in content:
            matches.append(name)

    return Ok(matches)


def read_note_resource(vault: VaultMetadata, note: str, uri: str) -> NoteResourceContents:
    """Build the ``note://{note}`` resource contents.

    Every failure, including a missing note, collapses into the same
    "not found" text; the underlying error is only logged.
    """
    result = read_note(vault, note)
    if isinstance(result, Err):
        logger.warning("Resource %s unavailable (%s)", uri, result.kind.value)
        return NoteResourceContents(uri=uri, text=responses.note_not_found(note))
    return NoteResourceContents(uri=uri, text=result.value)
