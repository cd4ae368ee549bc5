"""Type-keyed dependency registry.

A ``DependencyRegistry`` maps a type key to exactly one registered object.
Registering again under the same key replaces the previous object, and every
successful resolve returns the stored object itself, never a copy.

All operations run under a single reentrant lock owned by the registry, so
register/resolve/remove/reset are linearizable across threads.
"""

import os
import sys
import threading
from functools import lru_cache
from typing import Any, NoReturn, TypeVar

from loguru import logger

from .exceptions import MissingDependencyError
from .settings import get_settings

T = TypeVar("T")


def describe_type(type_key: Any) -> str:
    """Return a readable ``module.QualName`` for a type key.

    Typing constructs without a qualified name (``list[int]``, unions) fall
    back to their ``repr``.
    """
    qualname = getattr(type_key, "__qualname__", None)
    if not isinstance(type_key, type) or qualname is None:
        return repr(type_key)
    module = getattr(type_key, "__module__", None)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


class DependencyRegistry:
    """Registry of shared dependencies keyed by their declared type."""

    def __init__(self, abort_on_missing: bool | None = None):
        """Initialize an empty dependency registry.

        Args:
            abort_on_missing: Abort the process on a strict resolve miss instead
                of raising. ``None`` defers to ``InjectionSettings.abort_on_missing``.
        """
        self._lock = threading.RLock()
        self._entries: dict[Any, Any] = {}
        self._abort_on_missing = abort_on_missing

    def register(self, dependency: T, as_: type[T] | None = None) -> None:
        """Register a dependency, replacing any entry with the same type key.

        Args:
            dependency: The object to register
            as_: Register under this type (e.g. an ABC or Protocol) instead of
                the concrete type of ``dependency``
        """
        type_key = as_ if as_ is not None else type(dependency)
        with self._lock:
            replaced = type_key in self._entries
            self._entries[type_key] = dependency
        logger.debug(f"Registered dependency for {describe_type(type_key)}" + (" (replaced)" if replaced else ""))

    def resolve(self, dependency_type: type[T]) -> T:
        """Get the dependency registered for a type.

        Args:
            dependency_type: The type key to look up

        Returns:
            The registered object

        Raises:
            MissingDependencyError: If nothing is registered for the type. When
                abort-on-missing is enabled the process is aborted instead.
        """
        with self._lock:
            if dependency_type in self._entries:
                logger.trace(f"Resolved dependency for {describe_type(dependency_type)}")
                return self._entries[dependency_type]
        self._handle_missing(dependency_type)

    def safe_resolve(self, dependency_type: type[T]) -> T | None:
        """Get the dependency registered for a type, or None if absent."""
        with self._lock:
            return self._entries.get(dependency_type)

    def remove(self, dependency_type: Any) -> None:
        """Remove the entry for a type key. Removing an absent key is a no-op.

        Args:
            dependency_type: The type key whose entry should be removed
        """
        with self._lock:
            removed = dependency_type in self._entries
            self._entries.pop(dependency_type, None)
        if removed:
            logger.debug(f"Removed dependency for {describe_type(dependency_type)}")

    def remove_instance(self, dependency: Any) -> None:
        """Remove whatever is registered under the concrete type of ``dependency``.

        Only the type of ``dependency`` matters: if another object of the same
        type was registered later, that object is removed.
        """
        self.remove(type(dependency))

    def reset(self) -> None:
        """Discard every registered dependency."""
        with self._lock:
            count = len(self._entries)
            self._entries = {}
        logger.debug(f"Registry reset ({count} dependencies discarded)")

    def is_registered(self, dependency_type: Any) -> bool:
        """Check whether an entry exists for a type key."""
        with self._lock:
            return dependency_type in self._entries

    def registered_types(self) -> list[Any]:
        """Return a snapshot of the registered type keys."""
        with self._lock:
            return list(self._entries)

    def snapshot(self) -> dict[Any, Any]:
        """Return a shallow copy of the current type key to object mapping."""
        with self._lock:
            return dict(self._entries)

    def __contains__(self, dependency_type: Any) -> bool:
        return self.is_registered(dependency_type)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} dependencies)"

    def _handle_missing(self, dependency_type: Any) -> NoReturn:
        type_name = describe_type(dependency_type)
        abort = self._abort_on_missing
        if abort is None:
            abort = get_settings().abort_on_missing

        if abort:
            logger.critical(f"No provider registered for type {type_name}, aborting")
            # Reaches stderr even while package logging is disabled
            sys.stderr.write(f"Fatal error: No provider registered for type {type_name}\n")
            sys.stderr.flush()
            os.abort()

        logger.error(f"No provider registered for type {type_name}")
        raise MissingDependencyError(dependency_type, type_name)


@lru_cache
def get_registry() -> DependencyRegistry:
    """Get the process-wide dependency registry.

    Returns:
        The global dependency registry instance
    """
    return DependencyRegistry()


def register(dependency: T, as_: type[T] | None = None) -> None:
    """Register a dependency in the process-wide registry."""
    get_registry().register(dependency, as_=as_)


def resolve(dependency_type: type[T]) -> T:
    """Resolve a dependency from the process-wide registry.

    Raises:
        MissingDependencyError: If nothing is registered for the type
    """
    return get_registry().resolve(dependency_type)


def safe_resolve(dependency_type: type[T]) -> T | None:
    """Resolve a dependency from the process-wide registry, or None if absent."""
    return get_registry().safe_resolve(dependency_type)


def remove(dependency_type: Any) -> None:
    """Remove a type key from the process-wide registry."""
    get_registry().remove(dependency_type)


def remove_instance(dependency: Any) -> None:
    """Remove the entry for the concrete type of ``dependency`` from the process-wide registry."""
    get_registry().remove_instance(dependency)


def reset() -> None:
    """Clear the process-wide registry."""
    get_registry().reset()


__all__ = [
    "DependencyRegistry",
    "describe_type",
    "get_registry",
    "register",
    "remove",
    "remove_instance",
    "reset",
    "resolve",
    "safe_resolve",
]
