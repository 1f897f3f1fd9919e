from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from creational.singleton import (
    AppLogger,
    ConfigManager,
    DatabaseConnection,
    DataStore,
    GuardedSingleton,
    SingletonRegistry,
    get_singleton,
)


class SlowService(GuardedSingleton):
    constructed = 0
    gate = threading.Event()

    def __init__(self) -> None:
        super().__init__()
        type(self).constructed += 1
        # hold the creation lock while the other callers race
        self.gate.wait(timeout=0.2)


def test_registry_itself_is_shared() -> None:
    assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()


def test_concurrent_callers_observe_identical_instance() -> None:
    SlowService.constructed = 0
    barrier = threading.Barrier(16)

    def _resolve() -> SlowService:
        barrier.wait()
        return SlowService.get_instance()

    with ThreadPoolExecutor(max_workers=16) as pool:
        instances = list(pool.map(lambda _: _resolve(), range(16)))

    first = instances[0]
    assert all(instance is first for instance in instances)
    assert SlowService.constructed == 1


def test_each_singleton_type_has_its_own_instance() -> None:
    store = DataStore.get_instance()
    config = ConfigManager.get_instance()
    assert store is DataStore.get_instance()
    assert config is ConfigManager.get_instance()
    assert store is not config


def test_get_singleton_matches_class_accessor() -> None:
    assert get_singleton(AppLogger) is AppLogger.get_instance()


def test_constructor_arguments_only_apply_on_first_resolution() -> None:
    registry = SingletonRegistry()
    first = registry.get(DatabaseConnection, "postgres://db/one")
    second = registry.get(DatabaseConnection, "postgres://db/two")
    assert first is second
    assert second.connection_string == "postgres://db/one"


def test_reset_drops_instance() -> None:
    original = DataStore.get_instance()
    assert DataStore.has_instance()

    DataStore.reset_instance()

    assert not DataStore.has_instance()
    assert DataStore.get_instance() is not original


def test_direct_construction_is_isolated_from_shared_instance() -> None:
    shared = DataStore.get_instance()
    private = DataStore()
    private.add("only here")
    assert private is not shared
    assert shared.count() == 0


def test_singleton_constructor_may_resolve_another_singleton() -> None:
    class Dependent(GuardedSingleton):
        def __init__(self) -> None:
            super().__init__()
            self.config = ConfigManager.get_instance()

    dependent = Dependent.get_instance()
    assert dependent.config is ConfigManager.get_instance()
