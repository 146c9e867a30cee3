"""Shared pytest fixtures for the cppgen test suite.

Provides reusable fixtures for:
- Configurations covering every combination the scaffolder branches on
- An output directory for generated projects
- A clean ``CPPGEN_*`` environment
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from cppgen.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

_ENV_VARS = (
    "CPPGEN_NAME",
    "CPPGEN_CONFIG_TYPE",
    "CPPGEN_USE_CLANG_TIDY",
    "CPPGEN_USE_CONAN",
    "CPPGEN_GENERATOR",
    "CPPGEN_SCRIPT_STYLE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no CPPGEN_* variable from the host leaks into a test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ScaffoldConfig]:
    """Factory for configurations; keyword arguments override the defaults."""

    def _make(**overrides: Any) -> ScaffoldConfig:
        fields: dict[str, Any] = {
            "name": "demo",
            "artifact_kind": "exec",
            "use_clang_tidy": False,
            "use_conan": False,
            "generator": "cmake",
        }
        fields.update(overrides)
        return ScaffoldConfig.create(**fields)

    return _make


@pytest.fixture
def demo_config(make_config) -> ScaffoldConfig:
    """Plain executable project: no Conan, no clang-tidy, batch scripts."""
    return make_config()


@pytest.fixture
def full_config(make_config) -> ScaffoldConfig:
    """Library project with Conan and clang-tidy enabled."""
    return make_config(name="mylib", artifact_kind="lib", use_clang_tidy=True, use_conan=True)
