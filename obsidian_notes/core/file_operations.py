"""Core logic for operations that address arbitrary vault paths.

Paths are used exactly as given; no ``.md`` extension is inferred.
"""

from __future__ import annotations

import logging
from pathlib import Path

from obsidian_notes.core.vault_operations import join_vault_path, write_text
from obsidian_notes.data_models import VaultMetadata
from obsidian_notes.results import Err, OperationResult, Ok, classify_os_error

logger = logging.getLogger(__name__)


def list_files_in_dir(vault: VaultMetadata, dirpath: str) -> OperationResult[list[str]]:
    """List every entry (files and folders) directly under ``<root>/<dirpath>``.

    Args:
        vault: Vault metadata.
        dirpath: Folder relative to the vault root; ``""`` lists the root.

    Returns:
        ``Ok`` with entry names in directory listing order, or ``Err``.
    """
    target = join_vault_path(vault, dirpath)
    if isinstance(target, Err):
        return target

    try:
        return Ok([entry.name for entry in target.value.iterdir()])
    except OSError as exc:
        return classify_os_error(exc)


def delete_file(vault: VaultMetadata, filepath: str) -> OperationResult[Path]:
    """Remove the file at ``<root>/<filepath>``. Directories are not removed."""
    target = join_vault_path(vault, filepath)
    if isinstance(target, Err):
        return target

    try:
        target.value.unlink()
    except OSError as exc:
        return classify_os_error(exc)

    logger.info("Deleted '%s' in vault '%s'", filepath, vault.name)
    return Ok(target.value)


def append_content(vault: VaultMetadata, filepath: str, content: str) -> OperationResult[Path]:
    """Append ``content`` to ``<root>/<filepath>``, creating the file if absent.

    No separator is inserted between the existing text and ``content``.
    """
    target = join_vault_path(vault, filepath)
    if isinstance(target, Err):
        return target

    try:
        write_text(target.value, content, mode="a")
    except OSError as exc:
        return classify_os_error(exc)

    logger.info("Appended %d characters to '%s' in vault '%s'", len(content), filepath, vault.name)
    return Ok(target.value)
