"""Tool handler functions.

Each handler takes the catalog service and the tool arguments and returns
the structured result as a plain dict. Domain errors propagate.
"""

from __future__ import annotations

from typing import Any

from ..core.service import CatalogService


def _component_name(arguments: dict[str, Any] | None) -> str:
    name = (arguments or {}).get("componentName")
    if not isinstance(name, str) or not name:
        raise ValueError("componentName is required")
    return name


async def list_components_handler(
    service: CatalogService, arguments: dict[str, Any] | None = None
) -> dict[str, Any]:
    result = await service.list_components()
    return result.model_dump()


async def get_component_code_handler(
    service: CatalogService, arguments: dict[str, Any] | None
) -> dict[str, Any]:
    result = await service.get_component_code(_component_name(arguments))
    return result.model_dump()


async def get_component_usage_handler(
    service: CatalogService, arguments: dict[str, Any] | None
) -> dict[str, Any]:
    result = await service.get_component_usage(_component_name(arguments))
    return result.model_dump(exclude_none=True)
