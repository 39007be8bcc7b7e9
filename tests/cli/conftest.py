"""Shared fixtures for CLI tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run every command from an empty directory with no global config."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in ("DOCBIND__LOGGING__LEVEL", "DOCBIND__EXTRACT__TAG", "DOCBIND__EXTRACT__WILDCARD"):
        monkeypatch.delenv(name, raising=False)
    with patch("docbind.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "missing" / "config.yaml"):
        yield workdir
