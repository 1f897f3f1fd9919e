"""Process-wide registry of lazily constructed, lock-guarded singletons."""

from __future__ import annotations

import logging
import threading
from typing import Any, ClassVar, Self, TypeVar, cast

T = TypeVar("T")


logger = logging.getLogger(__name__)


class SingletonRegistry:
    """Owns at most one instance per registered type.

    Lookups take a lock-free fast path once an instance is published. The first
    caller for a type constructs it while holding that type's creation lock, so
    concurrent first callers block until the instance exists and then observe
    the same object. Creation locks are per type, so a constructor may itself
    resolve another singleton.

    ``reset`` is the documented teardown hook: it forgets instances so the next
    lookup constructs a fresh one.
    """

    _shared: ClassVar[SingletonRegistry | None] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._instances: dict[type[Any], Any] = {}
        self._creation_locks: dict[type[Any], threading.Lock] = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> SingletonRegistry:
        """Return the process-wide registry, creating it on first use."""

        registry = cls._shared
        if registry is None:
            with cls._shared_lock:
                registry = cls._shared
                if registry is None:
                    registry = cls()
                    cls._shared = registry
        return registry

    def get(self, singleton_class: type[T], *args: Any, **kwargs: Any) -> T:
        """Return the single instance of ``singleton_class``.

        Constructor arguments are only used by the call that creates the
        instance; later calls receive the existing object unchanged.
        """

        instance = self._instances.get(singleton_class)
        if instance is not None:
            return cast(T, instance)

        with self._creation_lock_for(singleton_class):
            with self._lock:
                instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                with self._lock:
                    self._instances[singleton_class] = instance
                logger.debug("Created singleton %s", singleton_class.__name__)
        return cast(T, instance)

    def has(self, singleton_class: type[Any]) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: type[Any] | None = None) -> None:
        """Forget one singleton, or all of them when no type is given."""

        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)

    def _creation_lock_for(self, singleton_class: type[Any]) -> threading.Lock:
        with self._lock:
            lock = self._creation_locks.get(singleton_class)
            if lock is None:
                lock = threading.Lock()
                self._creation_locks[singleton_class] = lock
            return lock


class GuardedSingleton:
    """Base class for services shared through the :class:`SingletonRegistry`.

    Subclasses own a ``_lock`` guarding their mutable state. Constructing a
    subclass directly yields a private instance, which is how tests inject
    isolated services; ``get_instance`` returns the shared one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> Self:
        return SingletonRegistry.get_instance().get(cls)

    @classmethod
    def has_instance(cls) -> bool:
        return SingletonRegistry.get_instance().has(cls)

    @classmethod
    def reset_instance(cls) -> None:
        SingletonRegistry.get_instance().reset(cls)


def get_singleton(singleton_class: type[T], *args: Any, **kwargs: Any) -> T:
    """Resolve ``singleton_class`` through the process-wide registry."""

    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)


__all__ = ["GuardedSingleton", "SingletonRegistry", "get_singleton"]
