"""Factories that build a configured autoloader from settings."""

from __future__ import annotations

import logging
from pathlib import Path

from .autoloader import Autoloader
from .bundles import BundleManager
from .registry import Registry
from .schema import AutoloadConfig
from .settings import AutoloadSettings

logger = logging.getLogger(__name__)


def load_config(config_file: Path | None = None) -> AutoloadConfig:
    """Read settings from config_file, or from the standard scopes when None."""
    settings = AutoloadSettings.from_file(config_file) if config_file else AutoloadSettings()
    return settings.load()


def create_autoloader(config: AutoloadConfig | None = None, install: bool = True) -> Autoloader:
    """Create an autoloader with every rule in config registered.

    Rules are registered in order: mappings, namespaces, convention roots,
    aliases, then bundles (whose own rules wait for activation).

    Args:
        config: Settings to apply (default: empty settings)
        install: Hook the autoloader into its symbol space

    Returns:
        Configured Autoloader
    """
    config = config or AutoloadConfig()
    registry = Registry()
    bundles = BundleManager(registry)

    autoloader = Autoloader(
        registry=registry,
        gate=bundles,
        separator=config.separator,
        extension=config.extension,
    )

    autoloader.map(config.mappings)
    autoloader.namespaces(config.namespaces)
    autoloader.psr(config.convention_roots)
    for alias, real in config.aliases.items():
        autoloader.alias(real, alias)

    for name, spec in config.bundles.items():
        bundles.register_spec(name, spec)

    if install:
        autoloader.install()

    logger.debug(f"[autoload] created {autoloader!r}")
    return autoloader
