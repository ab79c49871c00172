"""Pydantic schemas for autoload settings."""

from pydantic import BaseModel
from pydantic import Field


class AutoloadsConfig(BaseModel):
    """Autoload rules, either top-level or declared by a bundle."""

    mappings: dict[str, str] = Field(default_factory=dict, description="Symbol -> file path")
    aliases: dict[str, str] = Field(default_factory=dict, description="Alias name -> real symbol name")
    convention_roots: list[str] = Field(default_factory=list, description="Directories searched by convention")
    namespaces: dict[str, str] = Field(default_factory=dict, description="Namespace prefix -> directory")


class BundleConfig(BaseModel):
    """A lazily activated bundle."""

    location: str = Field(..., description="Bundle root directory")
    autoloads: AutoloadsConfig = Field(
        default_factory=AutoloadsConfig,
        description="Rules registered when the bundle activates (relative paths are under location)",
    )


class AutoloadConfig(AutoloadsConfig):
    """Complete autoload settings."""

    separator: str = Field(default=".", min_length=1, description="Namespace separator in symbol names")
    extension: str = Field(default=".py", description="Source file extension")
    bundles: dict[str, BundleConfig] = Field(default_factory=dict, description="Bundles keyed by prefix")
