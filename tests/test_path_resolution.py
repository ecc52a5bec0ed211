from pathlib import Path

import pytest

from obsidian_notes.core.vault_operations import (
    is_note_name,
    join_vault_path,
    resolve_note_path,
)
from obsidian_notes.data_models import VaultMetadata
from obsidian_notes.results import Err, ErrorKind, Ok


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    return VaultMetadata(name="test", path=root)


@pytest.fixture
def open_vault(vault):
    return VaultMetadata(name="open", path=vault.path, enforce_sandbox=False)


def test_note_path_appends_extension(vault):
    """Note identifiers always gain a .md suffix."""
    result = resolve_note_path(vault, "Projects/Plan")
    assert result == Ok(vault.path / "Projects" / "Plan.md")


def test_note_path_keeps_existing_extension_and_adds_another(vault):
    """An identifier already ending in .md is not special-cased."""
    result = resolve_note_path(vault, "todo.md")
    assert isinstance(result, Ok)
    assert result.value.name == "todo.md.md"


def test_note_path_preserves_dots_in_basename(vault):
    """Dots inside the note name are left untouched."""
    result = resolve_note_path(vault, "v1.4 Release Notes")
    assert result.value.name == "v1.4 Release Notes.md"


def test_file_path_is_used_verbatim(vault):
    """File paths do not get an extension inferred."""
    result = join_vault_path(vault, "attachments/image.png")
    assert result == Ok(vault.path / "attachments" / "image.png")


def test_empty_path_names_the_root(vault):
    assert join_vault_path(vault, "") == Ok(vault.path)


def test_leading_slash_stays_inside_vault(vault):
    """A leading separator is joined onto the root, not treated as absolute."""
    assert join_vault_path(vault, "/etc/passwd") == Ok(vault.path / "etc" / "passwd")


def test_inner_parent_segments_are_collapsed(vault):
    result = join_vault_path(vault, "Projects/../Inbox/today.md")
    assert result == Ok(vault.path / "Inbox" / "today.md")


def test_traversal_outside_vault_is_rejected(vault):
    result = join_vault_path(vault, "../outside.md")
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.OUTSIDE_VAULT


def test_note_traversal_outside_vault_is_rejected(vault):
    result = resolve_note_path(vault, "../../etc/secret")
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.OUTSIDE_VAULT


def test_symlink_escaping_vault_is_rejected(vault, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (vault.path / "linked").symlink_to(outside, target_is_directory=True)

    result = join_vault_path(vault, "linked/file.md")
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.OUTSIDE_VAULT


def test_traversal_allowed_when_sandbox_disabled(open_vault):
    result = join_vault_path(open_vault, "../outside.md")
    assert result == Ok(open_vault.path.parent / "outside.md")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("note.md", True),
        ("archive.tar.md", True),
        ("note.MD", False),
        ("note.markdown", False),
        ("md", False),
    ],
)
def test_is_note_name(name, expected):
    assert is_note_name(name) is expected


def test_symlink_loop_does_not_raise(vault):
    """A self-referencing link yields an error result rather than an exception."""
    (vault.path / "loop").symlink_to(vault.path / "loop")

    result = join_vault_path(vault, "loop/x.md")

    # Older interpreters detect the loop while resolving; newer ones leave it to the open call.
    if isinstance(result, Err):
        assert result.kind is ErrorKind.IO_ERROR
    else:
        assert result == Ok(vault.path / "loop" / "x.md")
