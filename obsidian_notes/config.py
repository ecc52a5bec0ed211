"""Configuration loading for the vault root."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from obsidian_notes.constants import (
    CONFIG_PATH,
    CONFIG_PATH_ENV,
    ENFORCE_SANDBOX_ENV,
    LOG_LEVEL,
    VAULT_PATH_ENV,
)
from obsidian_notes.data_models import VaultConfiguration, VaultMetadata

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _normalize_vault_path(raw_path: str) -> Path:
    """Expand ``~`` and make ``raw_path`` absolute without requiring it to exist."""
    resolved_path = Path(raw_path).expanduser()
    try:
        resolved_path = resolved_path.resolve(strict=False)
    except RuntimeError:
        # resolve can raise on symlink loops; fall back to the absolute form
        resolved_path = resolved_path.absolute()
    return resolved_path


def _parse_bool_flag(value: str, source: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{source} must be a boolean flag (true/false), got '{value}'")


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the YAML configuration file into a mapping.

    Raises:
        ValueError: If the document is not a mapping.
    """
    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a YAML mapping")
    return raw_config


def load_vault_configuration(
    config_path: Optional[Path] = None,
    vault_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VaultConfiguration:
    """Resolve the vault root and server settings.

    The vault path is taken from, in order: ``vault_path`` (command line),
    the ``OBSIDIAN_VAULT_PATH`` environment variable, and the ``vault.path``
    entry of the YAML configuration file. The configuration file itself is
    optional when the path comes from one of the first two sources.

    Args:
        config_path: Path to the YAML configuration file. Defaults to
            ``OBSIDIAN_NOTES_CONFIG`` or ``vault.yaml`` at the project root.
        vault_path: Explicit vault path, typically from ``--vault``.
        environ: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        A :class:`VaultConfiguration` holding immutable vault metadata.

    Raises:
        FileNotFoundError: If no vault path is supplied and the configuration
            file is missing.
        ValueError: If the configuration file does not provide the expected
            structure.
    """
    env = os.environ if environ is None else environ

    if config_path is None:
        config_path = Path(env[CONFIG_PATH_ENV]) if env.get(CONFIG_PATH_ENV) else CONFIG_PATH

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        raw_config = _read_config_file(config_path)

    vault_section = raw_config.get("vault", {})
    if not isinstance(vault_section, dict):
        raise ValueError("Configuration 'vault' entry must map to a dictionary of settings")

    raw_path = vault_path or env.get(VAULT_PATH_ENV) or vault_section.get("path")
    if raw_path is None:
        if not config_path.exists():
            raise FileNotFoundError(
                f"No vault path given and configuration file not found at {config_path}"
            )
        raise ValueError("Configuration must include a 'vault.path' string")
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise ValueError("Vault path must be a non-empty string")

    resolved_path = _normalize_vault_path(raw_path.strip())

    enforce_sandbox = vault_section.get("enforce_sandbox", True)
    if not isinstance(enforce_sandbox, bool):
        raise ValueError("Configuration 'vault.enforce_sandbox' must be true or false")
    if env.get(ENFORCE_SANDBOX_ENV):
        enforce_sandbox = _parse_bool_flag(env[ENFORCE_SANDBOX_ENV], ENFORCE_SANDBOX_ENV)

    name = vault_section.get("name") or resolved_path.name or str(resolved_path)
    description = str(vault_section.get("description", "")).strip()

    log_level = raw_config.get("log_level", LOG_LEVEL)
    if not isinstance(log_level, str) or not log_level.strip():
        raise ValueError("Configuration 'log_level' must be a logging level name")

    metadata = VaultMetadata(
        name=str(name),
        path=resolved_path,
        description=description,
        enforce_sandbox=enforce_sandbox,
    )
    if not metadata.exists:
        logger.warning("Vault '%s' does not exist at %s", metadata.name, metadata.path)
    if not enforce_sandbox:
        logger.warning("Vault sandbox disabled: paths may resolve outside %s", metadata.path)

    return VaultConfiguration(vault=metadata, log_level=log_level.strip().upper())
