"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from scholar_scraper.config import ScholarConfig, load_config
from scholar_scraper.exceptions import InvalidServiceError
from scholar_scraper.models import ServiceTarget

_ENV_VARS = ("SCHOLAR_SERVICE", "SCHOLAR_TIMEOUT_S", "SCHOLAR_FOLLOW_REDIRECTS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # setenv first so teardown also removes values written by load_dotenv
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(tmp_path):
    config = load_config(tmp_path / "missing.env")
    assert config == ScholarConfig()
    assert config.service == ServiceTarget.SCHOLAR
    assert config.timeout_s == 20.0
    assert config.follow_redirects is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHOLAR_SERVICE", "Scholar")
    monkeypatch.setenv("SCHOLAR_TIMEOUT_S", "7.5")
    monkeypatch.setenv("SCHOLAR_FOLLOW_REDIRECTS", "no")
    config = load_config(tmp_path / "missing.env")
    assert config.timeout_s == 7.5
    assert config.follow_redirects is False


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SCHOLAR_TIMEOUT_S=3\n")
    config = load_config(env_file)
    assert config.timeout_s == 3.0


def test_unknown_service(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHOLAR_SERVICE", "bing")
    with pytest.raises(InvalidServiceError):
        load_config(tmp_path / "missing.env")
