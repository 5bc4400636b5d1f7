#!/usr/bin/env python3
"""Tests for ServiceRegistry."""
from datetime import timedelta

from service_intervals import Component, ServiceRegistry


def make_registry():
    return ServiceRegistry(
        [
            Component("Fork", timedelta(hours=50)),
            Component("Shock", timedelta(hours=100)),
            Component("Fork", timedelta(hours=200)),
        ]
    )


class TestServiceRegistry:
    """Tests for ServiceRegistry enumeration and lookup."""

    def test_len(self):
        assert len(make_registry()) == 3

    def test_iterates_in_order(self):
        assert [c.interval.total_seconds() / 3600 for c in make_registry()] == [50, 100, 200]

    def test_names(self):
        assert make_registry().names == ["Fork", "Shock", "Fork"]

    def test_get_returns_first_match(self):
        component = make_registry().get("Fork")
        assert component is not None
        assert component.interval == timedelta(hours=50)

    def test_get_missing(self):
        assert make_registry().get("Chain") is None

    def test_components_is_read_only_snapshot(self):
        source = [Component("Fork", timedelta(hours=50))]
        registry = ServiceRegistry(source)
        source.append(Component("Shock", timedelta(hours=100)))

        assert isinstance(registry.components, tuple)
        assert len(registry) == 1

    def test_has_no_mutators(self):
        registry = make_registry()
        for name in ("add", "append", "remove", "mark_serviced"):
            assert not hasattr(registry, name)

    def test_empty(self):
        registry = ServiceRegistry([])
        assert len(registry) == 0
        assert list(registry) == []
