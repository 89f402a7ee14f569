"""Shared fixtures for cspinject tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from cspinject.config import InjectorConfig

POLICIES = {
    "default": "default-src 'self';",
    "dev": "default-src 'self' 'unsafe-eval'; connect-src 'self' ws://localhost:5173;",
    "prod": "default-src 'self'; object-src 'none';",
}

INDEX_HTML = "<html><head><title>t</title></head></html>"


@pytest.fixture
def policies() -> dict[str, str]:
    return dict(POLICIES)


@pytest.fixture
def write_policies(tmp_path: Path) -> Callable[[object], Path]:
    """Write a policy table (any JSON value) to ``<tmp>/csp.json``."""

    def _write(data: object) -> Path:
        path = tmp_path / "csp.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_index(tmp_path: Path) -> Callable[[str], Path]:
    """Write built HTML to ``<tmp>/dist/index.html``."""

    def _write(html: str = INDEX_HTML) -> Path:
        path = tmp_path / "dist" / "index.html"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def build_root(tmp_path: Path, write_policies, write_index) -> Path:
    """A build root with csp.json and a freshly built dist/index.html."""
    write_policies(POLICIES)
    write_index()
    return tmp_path


@pytest.fixture
def config(build_root: Path) -> InjectorConfig:
    return InjectorConfig.for_root(build_root)
