"""Host symbol space with an undefined-symbol hook.

The symbol space plays the part of a language runtime's class table: code
asks it for a symbol by name, and on a miss it calls the registered
autoloaders before deciding the symbol does not exist. Each name is
autoloaded at most once; a second miss raises immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .errors import AliasCycleError
from .errors import SymbolNotFoundError

logger = logging.getLogger(__name__)

AutoloadHook = Callable[[str], Any]


class SymbolSpace:
    """Named symbols plus alias bindings, filled on demand by autoloaders.

    Usage:
        space = SymbolSpace()
        space.register_autoloader(autoloader.load)
        User = space["App.Models.User"]
    """

    def __init__(self, separator: str = "."):
        self.separator = separator
        self._symbols: dict[str, Any] = {}
        self._aliases: dict[str, str] = {}
        self._attempted: set[str] = set()
        self._autoloaders: list[AutoloadHook] = []

    def register_autoloader(self, hook: AutoloadHook) -> None:
        """Append hook to the autoloaders called on a miss. Duplicates are ignored."""
        if hook not in self._autoloaders:
            self._autoloaders.append(hook)

    def define(self, name: str, obj: Any) -> None:
        self._symbols[name] = obj

    def bind_alias(self, alias: str, real: str) -> None:
        """Make alias resolve to whatever real resolves to."""
        self._aliases[alias] = real
        logger.debug(f"[autoload:symbols] bound {alias} -> {real}")

    def is_defined(self, name: str) -> bool:
        """True if name is defined (following alias bindings). Never autoloads."""
        try:
            name = self._follow_aliases(name)
        except AliasCycleError:
            return False
        return name in self._symbols

    def lookup(self, name: str) -> Any:
        """Return the symbol, autoloading it on first miss.

        Raises:
            SymbolNotFoundError: Symbol still undefined after autoloading
            AliasCycleError: Alias bindings form a cycle
        """
        chain = [name]
        while True:
            if name in self._symbols:
                return self._symbols[name]

            if name not in self._aliases:
                self._autoload(name)

            if name in self._symbols:
                return self._symbols[name]

            if name not in self._aliases:
                raise SymbolNotFoundError(name)

            name = self._aliases[name]
            if name in chain:
                raise AliasCycleError(chain + [name])
            chain.append(name)

    def names(self) -> list[str]:
        return list(self._symbols)

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def _autoload(self, name: str) -> None:
        if name in self._attempted:
            return
        self._attempted.add(name)

        for hook in self._autoloaders:
            hook(name)
            if name in self._symbols or name in self._aliases:
                return

    def _follow_aliases(self, name: str) -> str:
        chain = [name]
        while name not in self._symbols and name in self._aliases:
            name = self._aliases[name]
            if name in chain:
                raise AliasCycleError(chain + [name])
            chain.append(name)
        return name

    def __getitem__(self, name: str) -> Any:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_defined(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.lookup(name)
        except SymbolNotFoundError:
            raise AttributeError(name) from None

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolSpace(symbols={len(self._symbols)}, aliases={len(self._aliases)})"
