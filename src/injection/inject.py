"""Construction-time injection helpers built on the dependency registry.

``Inject`` resolves its dependency once, when it is constructed, and keeps
that object for its whole lifetime. It never re-resolves: replacing or
removing the registry entry afterwards does not change the bound object.

Example:
    ```python
    register(SmtpMailer(), as_=Mailer)

    class SignupService:
        mailer = Inject(Mailer)  # resolved when the class body runs, at import

        def __init__(self):
            self.clock = Inject(Clock).value  # resolved per instance


    @dataclass
    class ReportJob:
        mailer: Mailer = field(default_factory=provider(Mailer))
    ```
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

from .registry import DependencyRegistry, describe_type, get_registry

T = TypeVar("T")


class Inject(Generic[T]):
    """Bind a dependency from the registry at construction time.

    When assigned as a class attribute the instance works as a read-only
    descriptor, so instances of the owning class read the bound object
    directly.
    """

    def __init__(self, dependency_type: type[T], registry: DependencyRegistry | None = None):
        """Resolve the dependency.

        Args:
            dependency_type: The type key to resolve
            registry: Registry to resolve from, the process-wide one by default

        Raises:
            MissingDependencyError: If nothing is registered for the type
        """
        target = registry if registry is not None else get_registry()
        self._dependency_type = dependency_type
        self._value: T = target.resolve(dependency_type)
        self._name: str | None = None

    @property
    def value(self) -> T:
        """The injected dependency."""
        return self._value

    @property
    def dependency_type(self) -> type[T]:
        return self._dependency_type

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @overload
    def __get__(self, instance: None, owner: type) -> "Inject[T]": ...

    @overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(self, instance: object | None, owner: type) -> "Inject[T] | T":
        if instance is None:
            return self
        return self._value

    def __set__(self, instance: object, value: Any) -> None:
        raise AttributeError(f"Injected dependency '{self._name}' is read-only")

    def __repr__(self) -> str:
        return f"Inject({describe_type(self._dependency_type)})"


def provider(dependency_type: type[T], registry: DependencyRegistry | None = None) -> Callable[[], T]:
    """Create a zero-argument callable that resolves a dependency.

    Each call performs a strict resolve, which makes the result suitable as a
    ``dataclasses.field(default_factory=...)`` or a framework dependency.

    Args:
        dependency_type: The type key to resolve
        registry: Registry to resolve from, the process-wide one by default

    Returns:
        A callable returning the registered dependency
    """

    def resolve_dependency() -> T:
        target = registry if registry is not None else get_registry()
        return target.resolve(dependency_type)

    return resolve_dependency


__all__ = ["Inject", "provider"]
