"""Path resolution against the vault root."""

from __future__ import annotations

import os
from pathlib import Path

from obsidian_notes.constants import NOTE_EXTENSION
from obsidian_notes.data_models import VaultMetadata
from obsidian_notes.results import Err, ErrorKind, OperationResult, Ok, classify_os_error

OUTSIDE_VAULT_DETAIL = "Path escapes the vault root"
SYMLINK_LOOP_DETAIL = "Too many levels of symbolic links"

_SEPARATORS = os.sep + (os.altsep or "")


def join_vault_path(vault: VaultMetadata, relative: str) -> OperationResult[Path]:
    """Join a caller-supplied relative path onto the vault root.

    The join is purely lexical: ``.`` and ``..`` segments are collapsed, and a
    leading separator does not replace the root (``"/a"`` names ``<root>/a``).
    An empty string names the root itself.

    When ``vault.enforce_sandbox`` is set, the joined path is resolved (following
    symlinks) and must stay inside the resolved vault root.

    Args:
        vault: Vault metadata.
        relative: Path relative to the vault root, used verbatim.

    Returns:
        ``Ok(path)`` with the joined, normalized (unresolved) path, or
        ``Err(OUTSIDE_VAULT)`` when the sandbox check fails.

    Examples:
        >>> join_vault_path(vault, "Projects/todo.md")
        Ok(value=PosixPath('/vault/Projects/todo.md'))
    """
    candidate = Path(os.path.normpath(os.path.join(str(vault.path), relative.lstrip(_SEPARATORS))))

    if not vault.enforce_sandbox:
        return Ok(candidate)

    try:
        vault_root = vault.path.resolve(strict=False)
        resolved = candidate.resolve(strict=False)
    except OSError as exc:
        return classify_os_error(exc)
    except RuntimeError:
        # Python < 3.13 reports symlink loops as RuntimeError
        return Err(kind=ErrorKind.IO_ERROR, detail=SYMLINK_LOOP_DETAIL)

    if not resolved.is_relative_to(vault_root):
        return Err(kind=ErrorKind.OUTSIDE_VAULT, detail=OUTSIDE_VAULT_DETAIL)

    return Ok(candidate)


def resolve_note_path(vault: VaultMetadata, note: str) -> OperationResult[Path]:
    """Resolve a note identifier to ``<root>/<note>.md``.

    The extension is always appended, even when ``note`` already ends in ``.md``.
    """
    return join_vault_path(vault, f"{note}{NOTE_EXTENSION}")


def is_note_name(name: str) -> bool:
    """Return ``True`` for directory entry names that count as notes."""
    return name.endswith(NOTE_EXTENSION)


def read_text(path: Path) -> str:
    """Read a file as UTF-8 without newline translation.

    Undecodable bytes become U+FFFD instead of raising.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def write_text(path: Path, content: str, mode: str = "w") -> None:
    """Write ``content`` as UTF-8 without newline translation."""
    with path.open(mode, encoding="utf-8", newline="") as handle:
        handle.write(content)
