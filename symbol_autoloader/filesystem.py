"""Filesystem boundary: probing for and loading source files.

`FileSystem` is the protocol the resolver and engine talk to. The concrete
`SourceFileSystem` executes Python files as fresh modules and publishes the
classes they define into a `SymbolSpace`.
"""

from __future__ import annotations

import hashlib
import importlib.machinery
import importlib.util
import inspect
import logging
import os
import sys
from types import ModuleType
from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from .symbols import SymbolSpace

logger = logging.getLogger(__name__)

MODULE_PREFIX = "_symbol_autoloader_"


class FileSystem(Protocol):
    """What the resolver needs from the filesystem."""

    def exists(self, path: str) -> bool: ...

    def load(self, path: str) -> object: ...


class SourceFileSystem:
    """Loads Python source files into a symbol space.

    A loaded file publishes symbols in one of two ways:
    - a module-level ``__symbols__`` mapping, defined as given;
    - otherwise every public class defined in the file, qualified with the
      module's ``__namespace__`` when it sets one.
    """

    def __init__(self, space: SymbolSpace):
        self.space = space

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def load(self, path: str) -> list[str]:
        """Execute the file at path and publish what it defines.

        Returns:
            Names defined in the symbol space by this load

        Raises:
            OSError: File could not be read
            ImportError: No loader could be created for the path
        """
        module = self._execute(path)
        published = self._publish(module)
        logger.debug(f"[autoload:load] {path} -> {', '.join(published) or '(nothing)'}")
        return published

    def _execute(self, path: str) -> ModuleType:
        module_name = MODULE_PREFIX + hashlib.sha256(path.encode()).hexdigest()[:12]
        # Explicit loader so files with any extension load as Python source
        loader = importlib.machinery.SourceFileLoader(module_name, path)
        spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot create a loader for source file: {path}", path=path)

        module = importlib.util.module_from_spec(spec)
        # Classes look themselves up in sys.modules (dataclasses, pickling)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _publish(self, module: ModuleType) -> list[str]:
        explicit = getattr(module, "__symbols__", None)
        if explicit is not None:
            for name, obj in explicit.items():
                self.space.define(name, obj)
            return list(explicit)

        namespace = getattr(module, "__namespace__", None)
        published = []
        for attr, obj in vars(module).items():
            if attr.startswith("_") or not inspect.isclass(obj):
                continue
            if obj.__module__ != module.__name__:
                continue
            name = f"{namespace}{self.space.separator}{attr}" if namespace else attr
            self.space.define(name, obj)
            published.append(name)
        return published

    def __repr__(self) -> str:
        return f"SourceFileSystem({self.space!r})"
