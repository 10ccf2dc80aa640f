"""Registry of resource managers, looked up by resource name (``"vlan"``)."""

from __future__ import annotations

from typing import Any, Callable

from switchconf.resources.base.node import Node
from switchconf.resources.base.resource import BaseResource

_RESOURCE_REGISTRY: dict[str, type[BaseResource]] = {}


def _class_path(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def register_resource(name: str) -> Callable[[type[BaseResource]], type[BaseResource]]:
    """Class decorator making a resource manager reachable as ``node.api(name)``.

    Names are case-insensitive. Registering a second, different class under
    a taken name raises ``ValueError``; re-registering the same class is a
    no-op, so module reloads are harmless.

    Usage::

        @register_resource("vlan")
        class VlanManager(BaseResource):
            ...
    """
    key = name.lower()

    def decorator(cls: type[BaseResource]) -> type[BaseResource]:
        existing = _RESOURCE_REGISTRY.get(key)
        if existing is not None and _class_path(existing) != _class_path(cls):
            raise ValueError(f"Resource '{key}' is already provided by {existing.__qualname__}")
        _RESOURCE_REGISTRY[key] = cls
        return cls

    return decorator


def resource_class(name: str) -> type[BaseResource]:
    """Return the manager class registered as *name*.

    Raises:
        ValueError: If no resource is registered under *name*.
    """
    try:
        return _RESOURCE_REGISTRY[name.lower()]
    except KeyError:
        available = ", ".join(list_resources())
        raise ValueError(f"Unknown resource '{name}'. Available: {available}") from None


def create_resource(name: str, node: Node, **kwargs: Any) -> BaseResource:
    """Bind the manager registered as *name* to *node*."""
    return resource_class(name)(node, **kwargs)


def list_resources() -> list[str]:
    """Return the registered resource names, sorted."""
    return sorted(_RESOURCE_REGISTRY)
