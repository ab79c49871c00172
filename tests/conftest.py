"""Shared fixtures for symbol-autoloader tests."""

from collections.abc import Callable

import pytest

from symbol_autoloader.engine import ResolutionEngine
from symbol_autoloader.registry import Registry


class FakeFileSystem:
    """In-memory filesystem recording every probe and load."""

    def __init__(self, files: set[str] | None = None):
        self.files = set(files or ())
        self.probed: list[str] = []
        self.loaded: list[str] = []

    def exists(self, path: str) -> bool:
        self.probed.append(path)
        return path in self.files

    def load(self, path: str) -> None:
        self.loaded.append(path)


class FakeGate:
    """Bundle gate whose activation runs a test-supplied callback."""

    def __init__(self):
        self.bundles: dict[str, Callable[[], None]] = {}
        self.active: set[str] = set()
        self.activations: list[str] = []

    def add(self, name: str, on_activate: Callable[[], None] = lambda: None) -> None:
        self.bundles[name] = on_activate

    def exists(self, prefix: str) -> bool:
        return prefix in self.bundles

    def is_activated(self, prefix: str) -> bool:
        return prefix in self.active

    def activate(self, prefix: str) -> None:
        self.activations.append(prefix)
        self.active.add(prefix)
        self.bundles[prefix]()


class FakeHost:
    def __init__(self):
        self.bindings: dict[str, str] = {}

    def bind_alias(self, alias: str, real: str) -> None:
        self.bindings[alias] = real


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def fs():
    return FakeFileSystem()


@pytest.fixture
def gate():
    return FakeGate()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def engine(registry, gate, fs, host):
    return ResolutionEngine(registry, gate, fs, host)
