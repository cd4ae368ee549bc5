"""Tests for registering implementations under abstract capabilities."""

from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from injection import DependencyRegistry, MissingDependencyError


class Greeter(Protocol):
    def greet(self, name: str) -> str: ...


class FriendlyGreeter:
    def greet(self, name: str) -> str:
        return f"Hello, {name}"


class Storage(ABC):
    @abstractmethod
    def load(self, key: str) -> bytes: ...


class MemoryStorage(Storage):
    def load(self, key: str) -> bytes:
        return key.encode()


def test_protocol_resolve():
    registry = DependencyRegistry()
    greeter = FriendlyGreeter()
    registry.register(greeter, as_=Greeter)

    resolved = registry.resolve(Greeter)

    assert resolved is greeter
    assert resolved.greet("Ada") == "Hello, Ada"


def test_concrete_type_not_registered_by_capability():
    registry = DependencyRegistry(abort_on_missing=False)
    registry.register(FriendlyGreeter(), as_=Greeter)

    assert registry.safe_resolve(FriendlyGreeter) is None
    with pytest.raises(MissingDependencyError):
        registry.resolve(FriendlyGreeter)


def test_abstract_base_class_capability():
    registry = DependencyRegistry()
    storage = MemoryStorage()
    registry.register(storage, as_=Storage)

    assert registry.resolve(Storage) is storage
    assert registry.safe_resolve(MemoryStorage) is None


def test_subclass_registration_does_not_satisfy_base():
    """Keys are exact types, there is no subtype lookup."""
    registry = DependencyRegistry()
    registry.register(MemoryStorage())

    assert registry.safe_resolve(Storage) is None


def test_same_object_under_two_keys():
    registry = DependencyRegistry()
    storage = MemoryStorage()
    registry.register(storage)
    registry.register(storage, as_=Storage)

    assert registry.resolve(MemoryStorage) is registry.resolve(Storage)


def test_generic_alias_as_key():
    registry = DependencyRegistry()
    allowed_hosts = ["localhost"]
    registry.register(allowed_hosts, as_=list[str])

    assert registry.resolve(list[str]) is allowed_hosts
    assert registry.safe_resolve(list) is None
