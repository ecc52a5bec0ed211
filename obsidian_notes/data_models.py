"""Data models for vault configuration and resource payloads."""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VaultMetadata:
    """Normalized, immutable description of the vault served by this process."""

    name: str
    path: Path
    description: str = ""
    enforce_sandbox: bool = True

    @property
    def exists(self) -> bool:
        return self.path.is_dir()


@dataclass(frozen=True)
class VaultContext:
    """Lifespan state shared with every request handled by the server."""

    vault: VaultMetadata


@dataclass(frozen=True)
class NoteResourceContents:
    """Contents returned for a ``note://{note}`` resource read."""

    uri: str
    text: str


class VaultConfiguration:
    """Holds the vault metadata and process-level settings.

    Built once at startup by :func:`obsidian_notes.config.load_vault_configuration`
    and never mutated afterwards.
    """

    def __init__(self, vault: VaultMetadata, log_level: str = "INFO") -> None:
        self.vault = vault
        self.log_level = log_level
