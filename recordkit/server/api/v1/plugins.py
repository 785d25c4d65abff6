"""
Plugins API Endpoints.

Registers, reads and (soft) deletes plugins. Every value goes through the
``Plugin`` entry setters, so invalid values are rejected with a 400 response
by the domain exception handlers.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from recordkit.core.logging_config import get_logger
from recordkit.core.models.domain import Plugin
from recordkit.core.models.io import PluginCreate, PluginRead
from recordkit.server.services.deps import PluginRepositoryDep

logger = get_logger(__name__)

router = APIRouter(tags=["plugins"])


def to_read(plugin: Plugin) -> PluginRead:
    return PluginRead.model_validate(plugin.get_source())


@router.post(
    "",
    response_model=PluginRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register Plugin",
    description="Register a new plugin. Names are unique, the SEO name is derived from the name.",
    response_description="The registered plugin with its generated ID.",
    responses={
        201: {"description": "Plugin registered successfully"},
        400: {"description": "Invalid plugin data, or the name already exists"},
    },
)
async def create_plugin(payload: PluginCreate, repository: PluginRepositoryDep) -> PluginRead:
    """
    Register a plugin.

    - **name**: Unique plugin name.
    - **class_path**: Plugin class path, e.g. ``Plugins\\Vendor\\Example\\Plugin``. Readonly once saved.
    - **priority**: Load priority between 0 and 100, 50 when omitted.
    - **enabled**: Disabled plugins are stored with status ``disabled``.
    """
    plugin = (
        Plugin()
        .set_name(payload.name)
        .set_vendor(payload.vendor)
        .set_class_path(payload.class_path)
        .set_priority(payload.priority)
        .set_menu_priority(payload.menu_priority)
        .set_description(payload.description)
    )
    if not payload.enabled:
        plugin.set_enabled(False)

    plugin = await repository.create(plugin)
    return to_read(plugin)


@router.get(
    "",
    response_model=List[PluginRead],
    summary="List Plugins",
    description="List all plugins that are not deleted, ordered by ID.",
)
async def list_plugins(repository: PluginRepositoryDep, limit: int = 100, offset: int = 0) -> List[PluginRead]:
    plugins = await repository.list(limit=limit, offset=offset)
    return [to_read(plugin) for plugin in plugins]


@router.get(
    "/{identifier}",
    response_model=PluginRead,
    summary="Get Plugin",
    description="Retrieve a plugin by its ID or by its unique name.",
    responses={
        200: {"description": "Plugin found"},
        404: {"description": "Plugin not found or deleted"},
    },
)
async def get_plugin(identifier: str, repository: PluginRepositoryDep) -> PluginRead:
    """
    Get a plugin. A numeric identifier is taken as the ID, anything else as the name.
    """
    plugin = await repository.load(int(identifier) if identifier.isdigit() else identifier)
    return to_read(plugin)


@router.delete(
    "/{plugin_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Plugin",
    description="Soft delete a plugin. The row stays in the database with status ``deleted``.",
    responses={
        204: {"description": "Plugin deleted"},
        404: {"description": "Plugin not found or already deleted"},
    },
)
async def delete_plugin(plugin_id: int, repository: PluginRepositoryDep) -> Response:
    plugin = await repository.load(plugin_id)
    await repository.delete(plugin)
    logger.info(f"Plugin {plugin_id} deleted through the API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
