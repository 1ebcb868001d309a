"""Building classification (KSO) API: thin routes delegating to BuildingClassificationService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from codelists.api.v1.dependencies import get_actor, get_building_classification_service
from codelists.application.use_cases import BuildingClassificationService
from codelists.schemas.building_classification import (
    BuildingClassificationRequest,
    BuildingClassificationResponse,
    BuildingClassificationTreeResponse,
)

router = APIRouter()

Service = Annotated[
    BuildingClassificationService, Depends(get_building_classification_service)
]
Actor = Annotated[str | None, Depends(get_actor)]


def _flat(nodes) -> list[BuildingClassificationResponse]:
    return [BuildingClassificationResponse.model_validate(n) for n in nodes]


@router.get("", response_model=list[BuildingClassificationResponse])
async def list_building_classifications(service: Service):
    """All nodes, flat, ordered by code."""
    return _flat(await service.find_all())


@router.get("/tree", response_model=list[BuildingClassificationTreeResponse])
async def get_tree(service: Service):
    """All roots with complete subtrees."""
    return [
        BuildingClassificationTreeResponse.model_validate(root)
        for root in await service.find_tree()
    ]


@router.get("/roots", response_model=list[BuildingClassificationResponse])
async def list_roots(service: Service):
    return _flat(await service.find_roots())


@router.get("/level/{level}", response_model=list[BuildingClassificationResponse])
async def list_by_level(level: int, service: Service):
    return _flat(await service.find_by_level(level))


@router.get("/possible-parents", response_model=list[BuildingClassificationResponse])
async def list_possible_parents(
    service: Service,
    level: int | None = Query(None, description="Level of the node being edited"),
):
    """Candidate parents for a node at level (nodes at level - 1)."""
    return _flat(await service.get_possible_parents(level))


@router.get("/search", response_model=list[BuildingClassificationResponse])
async def search_building_classifications(
    service: Service,
    query: str | None = Query(None, description="Substring of code or name"),
):
    return _flat(await service.search(query))


@router.get("/code/{code}", response_model=BuildingClassificationResponse)
async def get_by_code(code: str, service: Service):
    return BuildingClassificationResponse.model_validate(await service.find_by_code(code))


@router.get("/{node_id}", response_model=BuildingClassificationResponse)
async def get_building_classification(node_id: int, service: Service):
    return BuildingClassificationResponse.model_validate(await service.find_by_id(node_id))


@router.get("/{node_id}/subtree", response_model=BuildingClassificationTreeResponse)
async def get_subtree(node_id: int, service: Service):
    """One node with its complete subtree."""
    return BuildingClassificationTreeResponse.model_validate(
        await service.find_subtree(node_id)
    )


@router.get("/{node_id}/children", response_model=list[BuildingClassificationResponse])
async def list_children(node_id: int, service: Service):
    await service.find_by_id(node_id)
    return _flat(await service.find_children(node_id))


@router.post("", response_model=BuildingClassificationResponse, status_code=201)
async def create_building_classification(
    body: BuildingClassificationRequest, service: Service, actor: Actor
):
    """Create a node. Levels 2 to 4 need an existing parent_id."""
    created = await service.create(body.to_data(), actor)
    return BuildingClassificationResponse.model_validate(created)


@router.put("/{node_id}", response_model=BuildingClassificationResponse)
async def update_building_classification(
    node_id: int, body: BuildingClassificationRequest, service: Service, actor: Actor
):
    """Replace a node. Moving it under its own subtree is rejected (409)."""
    updated = await service.update(node_id, body.to_data(), actor)
    return BuildingClassificationResponse.model_validate(updated)


@router.delete("/{node_id}", status_code=204)
async def delete_building_classification(node_id: int, service: Service, actor: Actor):
    """Delete a leaf node. A node with children is refused (409)."""
    await service.delete(node_id, actor)
    return Response(status_code=204)
