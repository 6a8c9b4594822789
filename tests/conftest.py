"""Root test configuration - isolate every test from the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no OUT_DIR or DOMINATOR_STATIC_* variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OUT_DIR", raising=False)
    for name in list(os.environ):
        if name.startswith("DOMINATOR_STATIC_"):
            monkeypatch.delenv(name)
