"""Registry of autoload rules.

Holds the four independent tables the resolution engine reads:
- aliases: alias name -> real name
- mappings: symbol -> file path
- namespaces: namespace prefix -> directory
- convention roots: ordered, de-duplicated directories searched by convention

Registration only ever merges. Later registrations win for the three keyed
tables; convention roots keep their first insertion position.
"""

import logging
import os
from collections.abc import Iterable
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)


def normalize_root(directory: str) -> str:
    """Return directory with exactly one trailing path separator."""
    return directory.rstrip("/" + os.sep) + os.sep


class Registry:
    """In-memory tables of autoload rules."""

    def __init__(self):
        self._aliases: dict[str, str] = {}
        self._mappings: dict[str, str] = {}
        self._namespaces: dict[str, str] = {}
        self._convention_roots: list[str] = []

    # ----- Registration -----

    def register_mappings(self, mappings: Mapping[str, str]) -> None:
        """Merge symbol -> file path mappings, overwriting existing keys."""
        self._mappings.update(mappings)
        logger.debug(f"[autoload:registry] {len(mappings)} mapping(s) registered")

    def register_alias(self, real_name: str, alias_name: str) -> None:
        """Make alias_name an alternate name for real_name."""
        self._aliases[alias_name] = real_name
        logger.debug(f"[autoload:registry] alias {alias_name} -> {real_name}")

    def register_convention_roots(self, roots: str | Iterable[str]) -> None:
        """Add directories to the convention search set.

        Each root is normalized to end with one separator. Roots already in
        the set (by exact string) keep their original position.
        """
        if isinstance(roots, str):
            roots = [roots]

        for root in roots:
            root = normalize_root(root)
            if root not in self._convention_roots:
                self._convention_roots.append(root)
                logger.debug(f"[autoload:registry] convention root {root}")

    def register_namespaces(self, mappings: Mapping[str, str]) -> None:
        """Merge namespace prefix -> directory mappings, overwriting existing keys."""
        self._namespaces.update(mappings)
        logger.debug(f"[autoload:registry] {len(mappings)} namespace(s) registered")

    # ----- Lookup -----

    def alias_for(self, name: str) -> str | None:
        return self._aliases.get(name)

    def mapping_for(self, name: str) -> str | None:
        return self._mappings.get(name)

    def namespace_directory(self, prefix: str) -> str | None:
        return self._namespaces.get(prefix)

    @property
    def convention_roots(self) -> list[str]:
        """Current convention search set, in search order."""
        return list(self._convention_roots)

    @property
    def aliases(self) -> Mapping[str, str]:
        return MappingProxyType(self._aliases)

    @property
    def mappings(self) -> Mapping[str, str]:
        return MappingProxyType(self._mappings)

    @property
    def namespaces(self) -> Mapping[str, str]:
        return MappingProxyType(self._namespaces)

    def __repr__(self) -> str:
        return (
            f"Registry(aliases={len(self._aliases)}, mappings={len(self._mappings)}, "
            f"namespaces={len(self._namespaces)}, roots={len(self._convention_roots)})"
        )
