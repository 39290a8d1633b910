from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from docmatter.config import Settings, load_settings


def test_defaults(isolated_config: Path) -> None:
    settings = load_settings()
    assert settings.delimiters == ("---", "---")
    assert settings.language == "yaml"
    assert settings.aliases == {"yml": "yaml"}
    assert settings.excerpt_separator is None


def test_config_file_in_working_directory(isolated_config: Path) -> None:
    (isolated_config / "docmatter.toml").write_text(
        'delimiters = ["<!--", "-->"]\n'
        'language = "json"\n'
        'excerpt_separator = "<!-- more -->"\n'
        "\n[aliases]\n"
        'JS = "json"\n',
        encoding="utf-8",
    )
    settings = load_settings()
    assert settings.delimiters == ("<!--", "-->")
    assert settings.language == "json"
    assert settings.excerpt_separator == "<!-- more -->"
    assert settings.aliases == {"yml": "yaml", "js": "json"}


def test_config_file_in_home(isolated_config: Path) -> None:
    config_dir = isolated_config / "home" / ".config" / "docmatter"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text('delimiters = "+++"\n', encoding="utf-8")
    assert load_settings().delimiters == ("+++", "+++")


def test_invalid_config_file_is_ignored(isolated_config: Path, caplog: pytest.LogCaptureFixture) -> None:
    (isolated_config / "docmatter.toml").write_text("language = \n", encoding="utf-8")
    settings = load_settings()
    assert settings.language == "yaml"
    assert "Ignoring config file" in caplog.text


def test_environment_overrides_config_file(isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (isolated_config / "docmatter.toml").write_text('language = "json"\n', encoding="utf-8")
    monkeypatch.setenv("DOCMATTER_LANGUAGE", "yml")
    monkeypatch.setenv("DOCMATTER_DELIMITERS", "<!--, -->")
    settings = load_settings()
    assert settings.language == "yml"
    assert settings.delimiters == ("<!--", "-->")


def test_explicit_values_override_environment(isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCMATTER_LANGUAGE", "json")
    monkeypatch.setenv("DOCMATTER_EXCERPT_SEPARATOR", "<!-- more -->")
    settings = load_settings(language="yaml", delimiters="+++", excerpt_separator="***")
    assert settings.language == "yaml"
    assert settings.delimiters == ("+++", "+++")
    assert settings.excerpt_separator == "***"


def test_invalid_delimiters_fail_validation() -> None:
    with pytest.raises(ValidationError):
        Settings(delimiters=["a", "b", "c"])
    with pytest.raises(ValidationError):
        Settings(delimiters=5)
