from fastapi import APIRouter, HTTPException, Path

from media.domain.entities import FieldTypeDefinition, PreconfiguredFieldOption
from media.services.field_options import FIELD_TYPES, get_field_type, preconfigured_options

router = APIRouter(prefix="/v1/field-types", tags=["field-types"])

@router.get("", summary="List field types", response_model=list[FieldTypeDefinition])
async def list_field_types():
    return list(FIELD_TYPES.values())

@router.get(
    "/{field_type}/preconfigured-options",
    summary="Preconfigured options for a field type",
    description=(
        "Entity reference field types offer one option per referenceable entity type. "
        "The `media` option renders the referenced media entity by default "
        "(`entity_reference_entity_view`)."
    ),
    response_model=dict[str, PreconfiguredFieldOption],
    responses={404: {"description": "Unknown field type."}},
)
async def get_preconfigured_options(field_type: str = Path(..., description="Field type id")):
    definition = get_field_type(field_type)
    if not definition:
        raise HTTPException(status_code=404, detail="not found")
    return preconfigured_options(definition)
