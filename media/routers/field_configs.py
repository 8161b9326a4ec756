from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from app.core.auth import get_current_actor, require_admin
from media.domain.entities import FieldConfigCreate
from media.services.field_config_service import FieldConfigService
from shared.entities.actor import Actor
from shared.entities.field_config import FieldConfigOut
from shared.entities.help import ReferenceHelpOut
from shared.wiring import get_field_config_service

router = APIRouter(prefix="/v1/field-configs", tags=["field-configs"])

@router.get(
    "",
    summary="List field configurations",
    description="Optionally filtered by target entity type and bundle.",
    response_model=list[FieldConfigOut],
)
async def list_field_configs(
    entity_type: str | None = Query(None, description="e.g. `media`"),
    bundle: str | None = Query(None, description="e.g. a media type id"),
    svc: FieldConfigService = Depends(get_field_config_service),
):
    return await svc.list(entity_type=entity_type, bundle=bundle)

@router.get(
    "/{field_config_id}",
    summary="Get a field configuration",
    response_model=FieldConfigOut,
    responses={404: {"description": "Field config not found."}},
)
async def get_field_config(
    field_config_id: str = Path(..., description="`<entity_type>.<bundle>.<field_name>`"),
    svc: FieldConfigService = Depends(get_field_config_service),
):
    return await svc.get(field_config_id)

@router.post(
    "",
    summary="Create a field configuration (admin only)",
    description="The id is derived as `<entity_type>.<bundle>.<field_name>`. Media fields need an existing media type.",
    response_model=FieldConfigOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    responses={
        201: {"description": "Field config created."},
        404: {"description": "Target media type not found."},
        409: {"description": "Field config already exists."},
    },
)
async def create_field_config(
    payload: FieldConfigCreate,
    svc: FieldConfigService = Depends(get_field_config_service),
):
    return await svc.create(payload)

@router.delete(
    "/{field_config_id}",
    summary="Delete a field configuration",
    description=(
        "Deletion is decided by the field access evaluators: an explicit deny wins, "
        "otherwise an explicit allow is required. The source field of a media type is "
        "always denied. Returns `{ \"ok\": true }` on success."
    ),
    responses={
        200: {"description": "Deleted.", "content": {"application/json": {"example": {"ok": True}}}},
        401: {"description": "Not authenticated."},
        403: {"description": "Deletion not allowed.", "content": {"application/json": {"example": {"detail": "forbidden"}}}},
        404: {"description": "Field config not found."},
        500: {
            "description": "The field targets a media type that does not exist.",
            "content": {"application/json": {"example": {"detail": "configuration_integrity_fault"}}},
        },
    },
)
async def delete_field_config(
    field_config_id: str = Path(..., description="`<entity_type>.<bundle>.<field_name>`"),
    actor: Actor = Depends(get_current_actor),
    svc: FieldConfigService = Depends(get_field_config_service),
):
    await svc.delete(field_config_id, actor)
    return {"ok": True}

@router.get(
    "/{field_config_id}/reference-help",
    summary="Help text for a media reference field",
    description="Lists the media types a media reference field accepts. Other fields return 404.",
    response_model=ReferenceHelpOut,
    responses={404: {"description": "Field config not found or not a media reference."}},
)
async def get_reference_help(
    field_config_id: str = Path(..., description="`<entity_type>.<bundle>.<field_name>`"),
    svc: FieldConfigService = Depends(get_field_config_service),
):
    help_out = await svc.reference_help(field_config_id)
    if not help_out:
        raise HTTPException(status_code=404, detail="not a media reference field")
    return help_out
