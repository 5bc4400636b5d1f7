#!/usr/bin/env python3
"""Tests for default path configuration."""
from pathlib import Path

from service_intervals.config import (
    ACTIVITIES_ENV_VAR,
    DB_ENV_VAR,
    default_activities_path,
    default_db_path,
    resolve_path,
)


class TestResolvePath:
    """Tests for resolve_path."""

    def test_expands_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_path("~/db.yaml") == tmp_path / "db.yaml"

    def test_expands_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BIKE_DIR", str(tmp_path))
        assert resolve_path("$BIKE_DIR/db.yaml") == tmp_path / "db.yaml"

    def test_plain_path_unchanged(self):
        assert resolve_path(Path("data/db.yaml")) == Path("data/db.yaml")


class TestDefaults:
    """Tests for environment-driven defaults."""

    def test_default_db_path(self, monkeypatch, tmp_path):
        monkeypatch.delenv(DB_ENV_VAR, raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_db_path() == tmp_path / ".config" / "service-intervals" / "db.yaml"

    def test_db_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv(DB_ENV_VAR, str(tmp_path / "bike.yaml"))
        assert default_db_path() == tmp_path / "bike.yaml"

    def test_no_default_activities(self, monkeypatch):
        monkeypatch.delenv(ACTIVITIES_ENV_VAR, raising=False)
        assert default_activities_path() is None

    def test_activities_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ACTIVITIES_ENV_VAR, str(tmp_path / "Activities.csv"))
        assert default_activities_path() == tmp_path / "Activities.csv"
