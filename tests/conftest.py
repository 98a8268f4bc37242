from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SETTINGS_ENV = ("WSDECODE_LABEL_BLANK", "WSDECODE_LABEL_TAB", "WSDECODE_FORMAT")


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
