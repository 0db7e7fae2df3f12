"""Tests for QuerySettings environment loading and how queries consume it."""

from scenequery import LocalScene, Query, QuerySettings


def test_defaults():
    settings = QuerySettings()

    assert settings.auto_refresh is False
    assert settings.warn_on_lookup_miss is True
    assert settings.default_tag == "Untagged"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCENEQUERY_AUTO_REFRESH", "true")
    monkeypatch.setenv("SCENEQUERY_DEFAULT_TAG", "Prop")

    settings = QuerySettings()

    assert settings.auto_refresh is True
    assert settings.default_tag == "Prop"


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("SCENEQUERY_AUTO_REFRESH", "true")

    assert QuerySettings(auto_refresh=False).auto_refresh is False


def test_query_picks_up_environment(monkeypatch):
    monkeypatch.setenv("SCENEQUERY_AUTO_REFRESH", "1")

    assert Query(LocalScene()).auto_refresh is True
