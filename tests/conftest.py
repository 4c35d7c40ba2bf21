from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure `import envchain` works when running tests without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture()
def fixtures_dir(monkeypatch: pytest.MonkeyPatch) -> Path:
    # Include paths inside fixture files are relative to the working directory.
    monkeypatch.chdir(FIXTURES)
    return FIXTURES
