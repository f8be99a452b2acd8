# tests/conftest.py
"""
Shared pytest fixtures - Snapshots and Isolated Environment

Files that USE this module:
- pytest (fixtures are injected into every test module)

Files that this module USES:
- dualprice.config.resolver (resolve for snapshot fixtures)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from dualprice.config.resolver import resolve  # Builds snapshots from raw host config

BASE_CONFIG = {
    "primary": "BGN",
    "rate": 1.95583,
    "showSecondary": 1,
    "tagStyle": "symbol",
    "format": "paren",
    "enableProduct": 1,
    "enableCart": 1,
    "enableEmails": 1,
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test without DUALPRICE_* variables or a stray .env file."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("DUALPRICE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def base_config():
    """Raw host configuration with every feature enabled."""
    return dict(BASE_CONFIG)


@pytest.fixture
def make_snapshot():
    """Factory: resolve BASE_CONFIG with overrides."""
    def _make(**overrides):
        config = dict(BASE_CONFIG)
        config.update(overrides)
        return resolve(config)
    return _make


@pytest.fixture
def bgn_snapshot(make_snapshot):
    return make_snapshot()


@pytest.fixture
def eur_snapshot(make_snapshot):
    return make_snapshot(primary="EUR")
