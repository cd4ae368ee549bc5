"""Exceptions raised by the dependency registry.

Only the strict resolution path raises; registration, removal and reset are
total operations and never fail.
"""

from typing import Any


class InjectionError(Exception):
    """Base exception for all dependency injection errors."""


class MissingDependencyError(InjectionError):
    """Raised when a strict resolve finds nothing registered for a type.

    A missing required dependency is a configuration defect of the
    composition root, so this error is not meant to be handled at the call
    site. Use ``safe_resolve`` where a dependency is optional.
    """

    def __init__(self, dependency_type: Any, type_name: str):
        self.dependency_type = dependency_type
        super().__init__(f"No provider registered for type {type_name}")
