from __future__ import annotations

import pytest

from session_log_bridge.application.use_cases.registry import CategoryRegistry
from session_log_bridge.domain.categories import CATEGORIES, DEFAULT_CATEGORY, ROOT_NAMESPACE
from tests.fakes import RecordingFactory


def test_registry_creates_one_handle_per_category_plus_default(recording_factory: RecordingFactory) -> None:
    registry = CategoryRegistry(recording_factory)

    expected = [f"{ROOT_NAMESPACE}.{name}" for name in CATEGORIES] + [f"{ROOT_NAMESPACE}.default"]
    assert recording_factory.requested == expected
    assert len(registry) == len(CATEGORIES) + 1
    assert registry.names()[-1] == DEFAULT_CATEGORY


@pytest.mark.parametrize("category", CATEGORIES)
def test_resolve_returns_namespaced_handle(recording_factory: RecordingFactory, category: str) -> None:
    registry = CategoryRegistry(recording_factory)

    handle = registry.resolve(category)

    assert handle.name == f"{ROOT_NAMESPACE}.{category}"
    assert registry.handle_name(category) == handle.name


def test_well_known_handles_are_distinct(recording_factory: RecordingFactory) -> None:
    registry = CategoryRegistry(recording_factory)
    handles = [registry.resolve(category) for category in CATEGORIES]
    assert len({id(handle) for handle in handles}) == len(CATEGORIES)
    assert registry.resolve(DEFAULT_CATEGORY) not in handles


@pytest.mark.parametrize("category", [None, "", "   ", "\t", "not-a-real-category", "SQL", " sql "])
def test_invalid_categories_fall_back_to_default(recording_factory: RecordingFactory, category: str | None) -> None:
    registry = CategoryRegistry(recording_factory)

    assert registry.resolve(category) is registry.resolve("default")
    assert registry.normalise(category) == DEFAULT_CATEGORY
    assert registry.handle_name(category) == f"{ROOT_NAMESPACE}.default"


def test_lookups_do_not_create_handles(recording_factory: RecordingFactory) -> None:
    registry = CategoryRegistry(recording_factory)
    created = len(recording_factory.requested)

    registry.resolve("sql")
    registry.resolve("unknown")
    registry.resolve(None)

    assert len(recording_factory.requested) == created


def test_custom_category_set(recording_factory: RecordingFactory) -> None:
    registry = CategoryRegistry(recording_factory, categories=("alpha", "beta"))

    assert registry.names() == ("alpha", "beta", DEFAULT_CATEGORY)
    assert "alpha" in registry
    assert registry.resolve("sql") is registry.resolve(DEFAULT_CATEGORY)


def test_registry_mapping_is_read_only(recording_factory: RecordingFactory) -> None:
    registry = CategoryRegistry(recording_factory)
    with pytest.raises(TypeError):
        registry._handles["extra"] = object()  # type: ignore[index]
