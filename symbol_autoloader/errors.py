"""Exception types raised by the autoloader and its host symbol space.

The resolution engine itself never raises for an unresolvable symbol. These
errors surface at the edges: the symbol space's post-check, bundle
activation, and settings loading.
"""


class AutoloaderError(Exception):
    """Base class for all autoloader errors."""


class SymbolNotFoundError(AutoloaderError, LookupError):
    """Symbol is still undefined after every autoloader has run."""

    def __init__(self, symbol: str, message: str | None = None):
        self.symbol = symbol
        super().__init__(message or f"Symbol '{symbol}' not found")


class AliasCycleError(AutoloaderError):
    """Alias bindings in the symbol space form a cycle."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Alias cycle detected: {' -> '.join(chain)}")


class BundleNotFoundError(AutoloaderError, KeyError):
    """Activation was requested for a bundle that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Bundle '{self.name}' is not registered"


class BundleActivationError(AutoloaderError):
    """A bundle's start script raised while the bundle was being activated."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Failed to activate bundle '{name}': {reason}")


class ConfigurationError(AutoloaderError):
    """Settings file is malformed or fails schema validation."""
