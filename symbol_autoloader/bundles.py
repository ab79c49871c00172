"""Bundles - lazily activated groups of symbols.

A bundle is named after the namespace prefix its symbols use. Until it is
activated, none of its autoload rules exist. The resolution engine activates
a bundle the first time a symbol under its prefix cannot be resolved, then
retries the request once.

Activating a bundle:
1. marks it active (so a nested resolution cannot activate it again)
2. registers its declared autoloads, with relative paths under its location
3. runs ``<location>/start.py`` if present, with ``registry`` and ``bundle``
   in its globals so it can announce further symbols
"""

from __future__ import annotations

import logging
import os
import runpy
from typing import Protocol

from .errors import BundleActivationError
from .errors import BundleNotFoundError
from .registry import Registry
from .schema import AutoloadsConfig
from .schema import BundleConfig

logger = logging.getLogger(__name__)

START_SCRIPT = "start.py"


class ExtensionGate(Protocol):
    """Activation hooks the resolution engine needs."""

    def exists(self, prefix: str) -> bool: ...

    def is_activated(self, prefix: str) -> bool: ...

    def activate(self, prefix: str) -> None: ...


class NullGate:
    """Gate with no bundles."""

    def exists(self, prefix: str) -> bool:
        return False

    def is_activated(self, prefix: str) -> bool:
        return False

    def activate(self, prefix: str) -> None:
        raise BundleNotFoundError(prefix)

    def __repr__(self) -> str:
        return "NullGate()"


class BundleManager:
    """Registry-backed bundle gate.

    Usage:
        bundles = BundleManager(registry)
        bundles.register("Admin", "bundles/admin", {"namespaces": {"Admin": "bundles/admin/lib"}})
        bundles.activate("Admin")
    """

    def __init__(self, registry: Registry):
        self.registry = registry
        self._bundles: dict[str, BundleConfig] = {}
        self._active: list[str] = []

    def register(self, name: str, location: str, autoloads: AutoloadsConfig | dict | None = None) -> None:
        """Declare a bundle rooted at location. Re-registering replaces it."""
        if isinstance(autoloads, dict):
            autoloads = AutoloadsConfig.model_validate(autoloads)
        self.register_spec(name, BundleConfig(location=location, autoloads=autoloads or AutoloadsConfig()))

    def register_spec(self, name: str, spec: BundleConfig) -> None:
        self._bundles[name] = spec
        logger.debug(f"[autoload:bundle] registered '{name}' at {spec.location}")

    def exists(self, name: str) -> bool:
        return name in self._bundles

    def is_activated(self, name: str) -> bool:
        return name in self._active

    started = is_activated

    def get(self, name: str) -> BundleConfig:
        if name not in self._bundles:
            raise BundleNotFoundError(name)
        return self._bundles[name]

    def names(self) -> list[str]:
        return list(self._bundles)

    def activated(self) -> list[str]:
        """Active bundles in activation order."""
        return list(self._active)

    def activate(self, name: str) -> None:
        """Activate a bundle, registering its autoloads and running its start script.

        Raises:
            BundleNotFoundError: No bundle registered under name
            BundleActivationError: The start script raised
        """
        spec = self.get(name)
        if name in self._active:
            return

        self._active.append(name)
        self._register_autoloads(spec)

        script = os.path.join(spec.location, START_SCRIPT)
        if os.path.isfile(script):
            logger.debug(f"[autoload:bundle] running {script}")
            try:
                runpy.run_path(script, init_globals={"registry": self.registry, "bundle": spec})
            except Exception as e:
                raise BundleActivationError(name, str(e)) from e

        logger.info(f"[autoload:bundle] activated '{name}'")

    def _register_autoloads(self, spec: BundleConfig) -> None:
        autoloads = spec.autoloads
        if autoloads.mappings:
            self.registry.register_mappings(
                {symbol: self._under(spec, path) for symbol, path in autoloads.mappings.items()}
            )
        if autoloads.namespaces:
            self.registry.register_namespaces(
                {prefix: self._under(spec, path) for prefix, path in autoloads.namespaces.items()}
            )
        if autoloads.convention_roots:
            self.registry.register_convention_roots([self._under(spec, path) for path in autoloads.convention_roots])
        for alias, real in autoloads.aliases.items():
            self.registry.register_alias(real, alias)

    def _under(self, spec: BundleConfig, path: str) -> str:
        if os.path.isabs(path):
            return path
        return os.path.join(spec.location, path)

    def __repr__(self) -> str:
        return f"BundleManager(bundles={self.names()}, active={self._active})"
