"""
Unit test fixtures: temporary config directories and a manual clock.
"""

from pathlib import Path
from typing import Callable, Dict

import pytest
import yaml

from webui_suites.ui_testing.framework.config_loader import (
    Configuration,
    Environment,
    reset_configuration,
)
from webui_suites.unit.fakes import FakeClock


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Clear process-level overrides and the cached configuration."""
    for var in ("ENV", "env", "WEBUI_CONFIG_DIR", "PYTEST_XDIST_WORKER"):
        monkeypatch.delenv(var, raising=False)
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def write_config(tmp_path) -> Callable[..., Path]:
    """
    Write config.yaml / <env>.yaml files into a temp directory.

    Usage:
        config_dir = write_config(base={"env": "QA"}, qa={"baseURL": "..."})
    """
    def _write(**files: Dict) -> Path:
        for name, data in files.items():
            path = tmp_path / ("config.yaml" if name == "base" else f"{name}.yaml")
            if isinstance(data, str):
                path.write_text(data, encoding="utf-8")
            else:
                path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def make_config() -> Callable[..., Configuration]:
    def _make(**values: str) -> Configuration:
        return Configuration(environment=Environment.DEV, values=values)

    return _make


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
