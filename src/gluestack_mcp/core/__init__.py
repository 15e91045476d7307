"""Component identity, discovery and resolution for the gluestack catalog."""

from .config import CatalogConfig, load_config
from .errors import (
    CatalogError,
    ConfigError,
    MissingLocalAssets,
    ParseFailure,
    RemoteUnavailable,
    UnknownComponent,
)
from .naming import to_directory_name
from .service import CatalogService

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogService",
    "ConfigError",
    "MissingLocalAssets",
    "ParseFailure",
    "RemoteUnavailable",
    "UnknownComponent",
    "load_config",
    "to_directory_name",
]
