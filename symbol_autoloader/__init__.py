"""Lazy symbol resolution.

Register rules once (direct mappings, aliases, namespace directories,
convention roots, bundles) and let symbols load from their source files the
first time they are looked up.
"""

from .autoloader import Autoloader
from .bootstrap import create_autoloader
from .bootstrap import load_config
from .bundles import BundleManager
from .bundles import ExtensionGate
from .bundles import NullGate
from .convention import ConventionResolver
from .engine import Outcome
from .engine import Resolution
from .engine import ResolutionEngine
from .errors import AliasCycleError
from .errors import AutoloaderError
from .errors import BundleActivationError
from .errors import BundleNotFoundError
from .errors import ConfigurationError
from .errors import SymbolNotFoundError
from .filesystem import FileSystem
from .filesystem import SourceFileSystem
from .registry import Registry
from .symbols import SymbolSpace

__all__ = [
    "Autoloader",
    "create_autoloader",
    "load_config",
    # Core
    "ConventionResolver",
    "Outcome",
    "Registry",
    "Resolution",
    "ResolutionEngine",
    # Collaborators
    "BundleManager",
    "ExtensionGate",
    "FileSystem",
    "NullGate",
    "SourceFileSystem",
    "SymbolSpace",
    # Errors
    "AliasCycleError",
    "AutoloaderError",
    "BundleActivationError",
    "BundleNotFoundError",
    "ConfigurationError",
    "SymbolNotFoundError",
]
