from __future__ import annotations

from pathlib import Path

import pytest

from wiz.cli import progress as progress_module


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WIZ_DATA_DIR", str(data_dir))
    monkeypatch.setenv("WIZ_PROGRESS", "false")
    for name in ("WIZ_LLM_BIN", "WIZ_MODEL", "WIZ_SHELL", "WIZ_HISTORY_LIMIT", "WIZ_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return data_dir


@pytest.fixture(autouse=True)
def _reset_progress_session(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(progress_module, "_SESSION", None)
