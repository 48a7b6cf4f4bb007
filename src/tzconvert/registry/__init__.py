"""Timezone registries for conversion lookups.

A registry resolves timezone identifiers to ``tzinfo`` objects. The
default is backed by the standard library ``zoneinfo`` module.
"""

from __future__ import annotations

from typing import Any

from tzconvert.registry._base import TimeZoneRegistry

__all__ = [
    "get_registry",
    "FixedOffsetRegistry",
    "PytzRegistry",
    "TimeZoneRegistry",
    "ZoneInfoRegistry",
]


def get_registry(registry_name: str, **kwargs: Any) -> TimeZoneRegistry:
    """Build a registry by name.

    Args:
        registry_name: Registry name (``"zoneinfo"``, ``"pytz"``, ``"fixed"``).
        **kwargs: Forwarded to the registry constructor (e.g. ``is_dst``
            for pytz, ``offsets`` for fixed).

    Returns:
        A new :class:`TimeZoneRegistry`.

    Raises:
        ValueError: If the registry name is unknown.
    """
    if registry_name == "zoneinfo":
        from tzconvert.registry.zoneinfo import ZoneInfoRegistry

        return ZoneInfoRegistry(**kwargs)
    if registry_name == "pytz":
        from tzconvert.registry.pytz import PytzRegistry

        return PytzRegistry(**kwargs)
    if registry_name == "fixed":
        from tzconvert.registry.fixed import FixedOffsetRegistry

        return FixedOffsetRegistry(**kwargs)

    raise ValueError(
        f"unknown registry: {registry_name!r}. "
        f"Available: fixed, pytz, zoneinfo"
    )


def __getattr__(name: str) -> Any:
    """Lazy re-exports of registry implementations."""
    if name == "ZoneInfoRegistry":
        from tzconvert.registry.zoneinfo import ZoneInfoRegistry

        return ZoneInfoRegistry
    if name == "PytzRegistry":
        from tzconvert.registry.pytz import PytzRegistry

        return PytzRegistry
    if name == "FixedOffsetRegistry":
        from tzconvert.registry.fixed import FixedOffsetRegistry

        return FixedOffsetRegistry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
