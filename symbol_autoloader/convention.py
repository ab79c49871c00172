"""Convention-based lookup of a symbol's source file.

A symbol name maps to a relative path by turning every namespace separator
and every underscore into a directory separator. Each candidate root is
probed first with the lower-cased path, then with the path as written:

    Foo.Bar_Baz under /app/  ->  /app/foo/bar/baz.py, then /app/Foo/Bar/Baz.py
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from collections.abc import Iterator

from .filesystem import FileSystem
from .registry import normalize_root

logger = logging.getLogger(__name__)


class ConventionResolver:
    """Derives and probes candidate files for a symbol."""

    def __init__(self, filesystem: FileSystem, separator: str = ".", extension: str = ".py"):
        self.filesystem = filesystem
        self.separator = separator
        self.extension = extension

    def class_path(self, symbol: str) -> str:
        """Relative path (without extension) for symbol."""
        return symbol.replace(self.separator, os.sep).replace("_", os.sep)

    def candidates(self, symbol: str, roots: Iterable[str]) -> Iterator[str]:
        """Yield candidate file paths in probe order."""
        relative = self.class_path(symbol)
        for root in roots:
            # An empty root stays empty, giving paths relative to the working directory
            if root:
                root = normalize_root(root)
            lowered = f"{root}{relative.lower()}{self.extension}"
            yield lowered
            exact = f"{root}{relative}{self.extension}"
            if exact != lowered:
                yield exact

    def locate(self, symbol: str, roots: Iterable[str], probes: list[str] | None = None) -> str | None:
        """Return the first existing candidate for symbol, or None.

        Args:
            symbol: Symbol name to convert
            roots: Candidate root directories, in search order
            probes: Optional list that receives every probed path

        Returns:
            Path of the first existing candidate, None if none exist
        """
        for path in self.candidates(symbol, roots):
            if probes is not None:
                probes.append(path)
            if self.filesystem.exists(path):
                return path
        return None

    def resolve(self, symbol: str, roots: Iterable[str], probes: list[str] | None = None) -> str | None:
        """Locate symbol's file and load it. Returns the loaded path or None."""
        path = self.locate(symbol, roots, probes)
        if path is None:
            logger.debug(f"[autoload:convention] {symbol} -> no candidate exists")
            return None

        logger.debug(f"[autoload:convention] {symbol} -> {path}")
        self.filesystem.load(path)
        return path
