"""Pytest hooks and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_node: talks to a real bitcoind (skipped unless BTCRPC_LIVE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_node tests unless a live node was asked for."""
    if os.environ.get("BTCRPC_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a reachable bitcoind (set BTCRPC_LIVE=1)")
    for item in items:
        if "requires_node" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep BTCRPC_* variables from the developer's shell out of unit tests."""
    if os.environ.get("BTCRPC_LIVE") == "1":
        return
    for key in list(os.environ):
        if key.startswith("BTCRPC_"):
            monkeypatch.delenv(key, raising=False)
