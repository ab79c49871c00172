"""Autoloader facade wiring the registry, engine and symbol space together."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping

from .bundles import ExtensionGate
from .bundles import NullGate
from .engine import Resolution
from .engine import ResolutionEngine
from .filesystem import FileSystem
from .filesystem import SourceFileSystem
from .registry import Registry
from .symbols import SymbolSpace

logger = logging.getLogger(__name__)


class Autoloader:
    """Lazy symbol loader.

    Register rules with `map`, `alias`, `psr` and `namespaces`, call
    `install` to hook into the symbol space, then look symbols up through
    `space`. Every collaborator can be injected; omitted ones get defaults.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        space: SymbolSpace | None = None,
        gate: ExtensionGate | None = None,
        filesystem: FileSystem | None = None,
        separator: str = ".",
        extension: str = ".py",
    ):
        self.registry = registry if registry is not None else Registry()
        self.space = space if space is not None else SymbolSpace(separator=separator)
        self.gate = gate if gate is not None else NullGate()
        self.filesystem = filesystem if filesystem is not None else SourceFileSystem(self.space)
        self.engine = ResolutionEngine(
            self.registry,
            self.gate,
            self.filesystem,
            self.space,
            separator=separator,
            extension=extension,
        )

    # ----- Registration -----

    def map(self, mappings: Mapping[str, str]) -> None:
        self.registry.register_mappings(mappings)

    def alias(self, real_name: str, alias_name: str) -> None:
        self.registry.register_alias(real_name, alias_name)

    def psr(self, directories: str | Iterable[str]) -> None:
        self.registry.register_convention_roots(directories)

    def namespaces(self, mappings: Mapping[str, str]) -> None:
        self.registry.register_namespaces(mappings)

    # ----- Resolution -----

    def load(self, symbol: str) -> Resolution:
        """Resolve symbol, loading its file if one is found."""
        return self.engine.resolve(symbol)

    def explain(self, symbol: str) -> Resolution:
        """Report how symbol would resolve, without side effects."""
        return self.engine.resolve(symbol, dry_run=True)

    def install(self) -> None:
        """Register this autoloader on its symbol space."""
        self.space.register_autoloader(self.load)
        logger.debug(f"[autoload] installed on {self.space!r}")

    def __repr__(self) -> str:
        return f"Autoloader({self.registry!r}, gate={self.gate!r})"
