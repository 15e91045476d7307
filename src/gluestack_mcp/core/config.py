"""
Catalog configuration.

Defaults point at the gluestack-ui v2 storybook sources. A project may
override them with a ``gluestack-mcp.toml`` file in its root::

    [remote]
    owner = "gluestack"
    repo = "gluestack-ui"
    ref = "main"
    path = "example/storybook-nativewind/src/components"

    [catalog]
    exclude = ["hooks", "docs-components", "AllComponents"]
    components_dir = "components"

Environment variables take precedence over the file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "gluestack-mcp.toml"

DEFAULT_EXCLUDE = ("hooks", "docs-components", "AllComponents")
DEFAULT_ENTRY_FILES = ("index.tsx", "index.ts", "index.jsx", "index.js")


@dataclass(frozen=True)
class CatalogConfig:
    """Where the catalog comes from and where its sources are mirrored."""

    owner: str = "gluestack"
    repo: str = "gluestack-ui"
    ref: str = "main"
    path: str = "example/storybook-nativewind/src/components"
    usage_file: str = "index.nw.stories.mdx"
    api_url: str = "https://api.github.com"
    raw_url: str = "https://raw.githubusercontent.com"
    token: str | None = None
    http_timeout: float = 30.0

    components_dir: Path = field(default_factory=lambda: Path.cwd() / "components")
    exclude: frozenset[str] = frozenset(DEFAULT_EXCLUDE)
    entry_files: tuple[str, ...] = DEFAULT_ENTRY_FILES
    override_usage_file: str = "usage.mdx"
    placeholder_usage: str = "No Usage found."

    @property
    def listing_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{self.path}"

    def usage_url(self, canonical: str) -> str:
        return (
            f"{self.raw_url}/{self.owner}/{self.repo}/refs/heads/{self.ref}"
            f"/{self.path}/{canonical}/{self.usage_file}"
        )


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e


def _string_list(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def _apply_file(config: CatalogConfig, data: dict[str, Any], project_root: Path) -> CatalogConfig:
    changes: dict[str, Any] = {}

    remote = data.get("remote", {})
    for key in ("owner", "repo", "ref", "path", "usage_file", "api_url", "raw_url"):
        if key in remote:
            changes[key] = str(remote[key])

    catalog = data.get("catalog", {})
    if "exclude" in catalog:
        changes["exclude"] = frozenset(_string_list(catalog["exclude"], "catalog.exclude"))
    if "entry_files" in catalog:
        changes["entry_files"] = _string_list(catalog["entry_files"], "catalog.entry_files")
    if "components_dir" in catalog:
        changes["components_dir"] = (project_root / catalog["components_dir"]).resolve()
    for key in ("override_usage_file", "placeholder_usage"):
        if key in catalog:
            changes[key] = str(catalog[key])

    return replace(config, **changes)


def _apply_env(config: CatalogConfig) -> CatalogConfig:
    changes: dict[str, Any] = {}

    if components_dir := os.environ.get("GLUESTACK_MCP_COMPONENTS_DIR"):
        changes["components_dir"] = Path(components_dir).resolve()
    if ref := os.environ.get("GLUESTACK_MCP_REF"):
        changes["ref"] = ref
    if timeout := os.environ.get("GLUESTACK_MCP_TIMEOUT"):
        try:
            changes["http_timeout"] = float(timeout)
        except ValueError as e:
            raise ConfigError(f"GLUESTACK_MCP_TIMEOUT must be a number, got {timeout!r}") from e

    token = os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
    if token:
        changes["token"] = token

    return replace(config, **changes)


def load_config(project_root: Path | None = None) -> CatalogConfig:
    """Build the catalog configuration for a project root.

    Priority (highest first):
    1. Environment variables
    2. ``gluestack-mcp.toml`` in the project root
    3. Built-in defaults
    """
    project_root = (project_root or Path.cwd()).resolve()
    config = CatalogConfig(components_dir=project_root / "components")

    config_path = project_root / CONFIG_FILENAME
    if config_path.exists():
        logger.debug("Loading %s", config_path)
        config = _apply_file(config, _read_config_file(config_path), project_root)

    config = _apply_env(config)

    if config.token is None:
        logger.debug("No GITHUB_TOKEN/GH_TOKEN set; GitHub API calls are rate limited")

    return config
