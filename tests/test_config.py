from pathlib import Path

import pytest

from obsidian_notes.config import load_vault_configuration
from obsidian_notes.server import build_parser


def _write_config(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_vault_from_yaml(tmp_path):
    vault_dir = tmp_path / "notes"
    vault_dir.mkdir()
    config = _write_config(
        tmp_path / "vault.yaml",
        f"vault:\n  path: {vault_dir}\n  name: personal\n  description: ' Mine '\nlog_level: debug\n",
    )

    configuration = load_vault_configuration(config_path=config, environ={})

    assert configuration.vault.name == "personal"
    assert configuration.vault.path == vault_dir.resolve()
    assert configuration.vault.description == "Mine"
    assert configuration.vault.enforce_sandbox is True
    assert configuration.vault.exists is True
    assert configuration.log_level == "DEBUG"


def test_name_defaults_to_directory_name(tmp_path):
    vault_dir = tmp_path / "Second Brain"
    vault_dir.mkdir()
    configuration = load_vault_configuration(
        config_path=tmp_path / "absent.yaml",
        vault_path=str(vault_dir),
        environ={},
    )
    assert configuration.vault.name == "Second Brain"


def test_explicit_path_beats_environment_and_file(tmp_path):
    config = _write_config(tmp_path / "vault.yaml", "vault:\n  path: /from/file\n")
    configuration = load_vault_configuration(
        config_path=config,
        vault_path=str(tmp_path / "cli"),
        environ={"OBSIDIAN_VAULT_PATH": str(tmp_path / "env")},
    )
    assert configuration.vault.path == (tmp_path / "cli").resolve()


def test_environment_beats_file(tmp_path):
    config = _write_config(tmp_path / "vault.yaml", "vault:\n  path: /from/file\n")
    configuration = load_vault_configuration(
        config_path=config,
        environ={"OBSIDIAN_VAULT_PATH": str(tmp_path / "env")},
    )
    assert configuration.vault.path == (tmp_path / "env").resolve()


def test_config_path_from_environment(tmp_path):
    config = _write_config(tmp_path / "custom.yaml", f"vault:\n  path: {tmp_path}\n")
    configuration = load_vault_configuration(environ={"OBSIDIAN_NOTES_CONFIG": str(config)})
    assert configuration.vault.path == tmp_path.resolve()


def test_home_directory_is_expanded(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    configuration = load_vault_configuration(
        config_path=tmp_path / "absent.yaml",
        vault_path="~/vault",
        environ={},
    )
    assert configuration.vault.path == (tmp_path / "vault").resolve()


def test_missing_vault_directory_is_not_fatal(tmp_path):
    configuration = load_vault_configuration(
        config_path=tmp_path / "absent.yaml",
        vault_path=str(tmp_path / "not-yet"),
        environ={},
    )
    assert configuration.vault.exists is False


def test_missing_config_without_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vault_configuration(config_path=tmp_path / "absent.yaml", environ={})


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "vault: /not/a/mapping\n",
        "vault:\n  name: no path\n",
        "vault:\n  path: ''\n",
        "vault:\n  path: /tmp\n  enforce_sandbox: maybe\n",
        "vault:\n  path: /tmp\nlog_level: 10\n",
    ],
)
def test_malformed_config_raises_value_error(tmp_path, text):
    config = _write_config(tmp_path / "vault.yaml", text)
    with pytest.raises(ValueError):
        load_vault_configuration(config_path=config, environ={})


def test_sandbox_flag_from_file_and_environment(tmp_path):
    config = _write_config(
        tmp_path / "vault.yaml",
        f"vault:\n  path: {tmp_path}\n  enforce_sandbox: false\n",
    )
    assert load_vault_configuration(config_path=config, environ={}).vault.enforce_sandbox is False

    configuration = load_vault_configuration(
        config_path=config,
        environ={"OBSIDIAN_ENFORCE_SANDBOX": "yes"},
    )
    assert configuration.vault.enforce_sandbox is True


def test_invalid_sandbox_environment_value(tmp_path):
    with pytest.raises(ValueError):
        load_vault_configuration(
            config_path=tmp_path / "absent.yaml",
            vault_path=str(tmp_path),
            environ={"OBSIDIAN_ENFORCE_SANDBOX": "sometimes"},
        )


def test_command_line_parser_defaults():
    args = build_parser().parse_args([])
    assert args.vault is None
    assert args.config is None
    assert args.transport == "stdio"


def test_command_line_parser_options(tmp_path):
    args = build_parser().parse_args(
        ["--vault", str(tmp_path), "--config", "x.yaml", "--transport", "sse", "--log-level", "debug"]
    )
    assert args.vault == str(tmp_path)
    assert args.config == Path("x.yaml")
    assert args.transport == "sse"
    assert args.log_level == "debug"
