"""Resolution engine - decides which rule answers a symbol request.

Resolution order (first match wins):
1. Alias (bind the alias in the host, load nothing)
2. Direct mapping (load the mapped file)
3. Namespaced symbol:
   a. namespace directory registered -> convention lookup in that directory only
   b. inactive bundle registered for the prefix -> activate it, retry once from 1
4. Convention lookup across every convention root

A request never raises for "not found"; the outcome is reported in the
returned `Resolution`. Faults from loading a file or activating a bundle
propagate unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Protocol

from .bundles import ExtensionGate
from .convention import ConventionResolver
from .filesystem import FileSystem
from .registry import Registry

logger = logging.getLogger(__name__)


class SymbolHost(Protocol):
    """Host symbol table that receives alias bindings."""

    def bind_alias(self, alias: str, real: str) -> None: ...


class Outcome(str, Enum):
    """How a resolution request ended."""

    ALIASED = "aliased"
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass
class Resolution:
    """Result of a single resolution request.

    Attributes:
        symbol: Requested symbol name
        outcome: ALIASED, FOUND or NOT_FOUND
        via: Branch that decided the outcome (alias, mapping, namespace, convention)
        path: File loaded (or that would be loaded, for dry runs)
        target: Real name an alias points to
        activated: Bundle prefixes activated while resolving, in order
        pending_activation: Bundle a dry run would have activated
        probes: Every path probed for existence, in order
        dry_run: True when no side effects were performed
    """

    symbol: str
    outcome: Outcome
    via: str
    path: str | None = None
    target: str | None = None
    activated: list[str] = field(default_factory=list)
    pending_activation: str | None = None
    probes: list[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND

    @property
    def loaded(self) -> bool:
        """True when a file was actually loaded by this request."""
        return self.found and not self.dry_run


class ResolutionEngine:
    """Runs the ordered resolution procedure against a Registry."""

    def __init__(
        self,
        registry: Registry,
        gate: ExtensionGate,
        filesystem: FileSystem,
        host: SymbolHost,
        separator: str = ".",
        extension: str = ".py",
    ):
        self.registry = registry
        self.gate = gate
        self.filesystem = filesystem
        self.host = host
        self.separator = separator
        self.convention = ConventionResolver(filesystem, separator=separator, extension=extension)

    def resolve(self, symbol: str, dry_run: bool = False) -> Resolution:
        """Resolve symbol, loading at most one file.

        Args:
            symbol: Symbol name requested by the host
            dry_run: Decide without binding, loading or activating anything

        Returns:
            Resolution describing the outcome
        """
        activated: list[str] = []
        probes: list[str] = []
        pending: str | None = None

        def result(outcome: Outcome, via: str, path: str | None = None, target: str | None = None) -> Resolution:
            return Resolution(
                symbol=symbol,
                outcome=outcome,
                via=via,
                path=path,
                target=target,
                activated=activated,
                pending_activation=pending,
                probes=probes,
                dry_run=dry_run,
            )

        # Each pass restarts the procedure from the alias check. A prefix is
        # activated at most once per request, so the loop runs at most twice.
        while True:
            real = self.registry.alias_for(symbol)
            if real is not None:
                logger.debug(f"[autoload:resolve] {symbol} -> alias of {real}")
                if not dry_run:
                    self.host.bind_alias(symbol, real)
                return result(Outcome.ALIASED, "alias", target=real)

            path = self.registry.mapping_for(symbol)
            if path is not None:
                logger.debug(f"[autoload:resolve] {symbol} -> mapping ({path})")
                if not dry_run:
                    self.filesystem.load(path)
                return result(Outcome.FOUND, "mapping", path=path)

            prefix, separator, remainder = symbol.partition(self.separator)
            if not separator:
                break

            directory = self.registry.namespace_directory(prefix)
            if directory is not None:
                logger.debug(f"[autoload:resolve] {symbol} -> namespace {prefix} ({directory})")
                path = self._convention(remainder, [directory], probes, dry_run)
                if path is None:
                    return result(Outcome.NOT_FOUND, "namespace")
                return result(Outcome.FOUND, "namespace", path=path)

            if prefix in activated or not self.gate.exists(prefix) or self.gate.is_activated(prefix):
                break

            if dry_run:
                pending = prefix
                break

            logger.info(f"[autoload:resolve] activating bundle '{prefix}' for {symbol}")
            self.gate.activate(prefix)
            activated.append(prefix)

        roots = self.registry.convention_roots
        path = self._convention(symbol, roots, probes, dry_run)
        if path is None:
            logger.debug(f"[autoload:resolve] {symbol} -> not found ({len(probes)} probe(s))")
            return result(Outcome.NOT_FOUND, "convention")
        return result(Outcome.FOUND, "convention", path=path)

    def _convention(self, symbol: str, roots: list[str], probes: list[str], dry_run: bool) -> str | None:
        if dry_run:
            return self.convention.locate(symbol, roots, probes)
        return self.convention.resolve(symbol, roots, probes)

    def __repr__(self) -> str:
        return f"ResolutionEngine({self.registry!r}, separator={self.separator!r})"
