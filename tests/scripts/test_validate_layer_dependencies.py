from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "validate_layer_dependencies.py"


@pytest.fixture(scope="module")
def layers() -> ModuleType:
    spec = importlib.util.spec_from_file_location("validate_layer_dependencies", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_project_package_respects_layering(layers: ModuleType) -> None:
    assert layers.check_package() == []


def test_domain_importing_infrastructure_is_reported(
    layers: ModuleType, tmp_path: Path
) -> None:
    root = tmp_path / "parkinglottery"
    bad = _write(
        root / "domain" / "models" / "bad.py",
        "from parkinglottery.infrastructure.config.lottery_config import get_lottery_config\n",
    )
    _write(
        root / "infrastructure" / "ok.py",
        "from parkinglottery.domain.models.lottery_config import LotteryConfig\n",
    )

    violations = layers.check_package(root)
    assert [(v.path, v.lineno, v.layer) for v in violations] == [(bad, 1, "domain")]
    assert "infrastructure" in violations[0].format()


def test_shared_importing_domain_is_reported(layers: ModuleType, tmp_path: Path) -> None:
    root = tmp_path / "parkinglottery"
    _write(root / "shared" / "x.py", "import os\nimport parkinglottery.domain.models\n")

    violations = layers.check_package(root)
    assert len(violations) == 1
    assert violations[0].lineno == 2
    assert violations[0].imported == "parkinglottery.domain.models"
