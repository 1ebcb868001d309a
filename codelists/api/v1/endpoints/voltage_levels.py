"""Voltage level API: thin routes delegating to VoltageLevelService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from codelists.api.v1.dependencies import get_actor, get_voltage_level_service
from codelists.application.use_cases import VoltageLevelService
from codelists.schemas.voltage_level import VoltageLevelRequest, VoltageLevelResponse

router = APIRouter()


@router.get("", response_model=list[VoltageLevelResponse])
async def list_voltage_levels(
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
    valid_only: bool = Query(False, description="Only levels valid today"),
):
    """List voltage levels ordered by sort order, then code."""
    levels = (
        await service.find_all_currently_valid() if valid_only else await service.find_all()
    )
    return [VoltageLevelResponse.model_validate(v) for v in levels]


@router.get("/code/{code}", response_model=VoltageLevelResponse)
async def get_voltage_level_by_code(
    code: str,
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
):
    return VoltageLevelResponse.model_validate(await service.find_by_code(code))


@router.get("/{level_id}", response_model=VoltageLevelResponse)
async def get_voltage_level(
    level_id: int,
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
):
    return VoltageLevelResponse.model_validate(await service.find_by_id(level_id))


@router.post("", response_model=VoltageLevelResponse, status_code=201)
async def create_voltage_level(
    body: VoltageLevelRequest,
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
    actor: Annotated[str | None, Depends(get_actor)],
):
    created = await service.create(body.to_data(), actor)
    return VoltageLevelResponse.model_validate(created)


@router.put("/{level_id}", response_model=VoltageLevelResponse)
async def update_voltage_level(
    level_id: int,
    body: VoltageLevelRequest,
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
    actor: Annotated[str | None, Depends(get_actor)],
):
    updated = await service.update(level_id, body.to_data(), actor)
    return VoltageLevelResponse.model_validate(updated)


@router.delete("/{level_id}", status_code=204)
async def delete_voltage_level(
    level_id: int,
    service: Annotated[VoltageLevelService, Depends(get_voltage_level_service)],
    actor: Annotated[str | None, Depends(get_actor)],
):
    await service.delete(level_id, actor)
    return Response(status_code=204)
