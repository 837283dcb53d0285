from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

from bezmorph import _config
from bezmorph.modeling import Shape

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a temporary directory."""
    config_dir = tmp_path / ".bezmorph"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "bezmorph.cfg")
    return config_dir / "bezmorph.cfg"


def load_example_build(path: Path):
    """Import an example module and return its build() function."""
    module_name = f"bezmorph_test_example_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module.build


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def unit_square() -> Shape:
    return Shape.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def example_loader():
    return load_example_build
