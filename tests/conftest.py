"""Test configuration and shared fixtures."""

from pathlib import Path

import pytest

from ecomimic_site.core.config import SiteConfig
from ecomimic_site.utils.log import DEFAULT_LOG_PATH, set_log_path


@pytest.fixture(autouse=True)
def temp_log_path(tmp_path):
    """Keep log output inside the test's temp directory."""
    path = set_log_path(tmp_path / "site.log")
    yield path
    set_log_path(DEFAULT_LOG_PATH)


@pytest.fixture
def static_root(tmp_path) -> Path:
    root = tmp_path / "docroot"
    root.mkdir()
    (root / "index.html").write_text("<h1>EcoMimic</h1>", encoding="utf-8")
    (root / "data.json").write_text('{"ok": true}', encoding="utf-8")
    return root


@pytest.fixture
def site_config(tmp_path, static_root) -> SiteConfig:
    return SiteConfig(
        api_key="abc123",
        static_dir=static_root,
        log_path=tmp_path / "site.log",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every site variable from the environment for the duration of a test."""
    for name in (
        "COZE_API_KEY",
        "ECOMIMIC_HOST",
        "ECOMIMIC_PORT",
        "ECOMIMIC_CORS_ORIGINS",
        "ECOMIMIC_STATIC_DIR",
        "ECOMIMIC_LOG_PATH",
    ):
        # setenv first so monkeypatch restores the original (possibly absent) value afterwards
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch
