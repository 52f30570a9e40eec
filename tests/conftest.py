from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def pytest_configure() -> None:
    """
    Ensure `src/` (package) and the project root (`run.py`) are importable
    when running pytest in a src-layout project.

    This only affects the test environment.
    """
    project_root = Path(__file__).resolve().parents[1]
    for path in (project_root / "src", project_root):
        if str(path) not in sys.path:
            sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def isolated_lottery_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the loader at a per-test path so a local lottery_config.yaml never leaks in."""
    from parkinglottery.infrastructure.config import lottery_config as lc

    config_file = tmp_path / "lottery_config.yaml"
    monkeypatch.setattr(lc, "LOTTERY_CONFIG_FILE", config_file)
    lc.get_lottery_config.cache_clear()
    yield config_file
    lc.get_lottery_config.cache_clear()
