"""Container lookup shared by CLI commands."""

from __future__ import annotations

from functools import lru_cache

from creational.config import AppSettings
from creational.container import ServiceContainer, build_container
from creational.singleton import SingletonRegistry


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Build the container from the environment once per process."""

    return build_container(AppSettings.from_env())


def reset_container(*, singletons: bool = False) -> None:
    """Forget the cached container.

    With ``singletons=True`` the shared services are torn down as well, so the
    next lookup starts from freshly constructed instances.
    """

    get_container.cache_clear()
    if singletons:
        SingletonRegistry.get_instance().reset()
