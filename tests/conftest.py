from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def fixture_root() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in ("DOCMATTER_DELIMITERS", "DOCMATTER_LANGUAGE", "DOCMATTER_EXCERPT_SEPARATOR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
