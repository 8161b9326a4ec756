from fastapi import APIRouter, Depends, Path, status

from app.core.auth import require_admin
from media.domain.entities import MediaTypeCreate, MediaTypeUpdate
from media.services.media_type_service import MediaTypeService
from shared.entities.media_type import MediaTypeOut
from shared.wiring import get_media_type_service

router = APIRouter(prefix="/v1/media-types", tags=["media-types"])

_ADMIN_ERRORS = {
    401: {"description": "Not authenticated."},
    403: {"description": "Authenticated but not authorized (admin required)."},
}

@router.get(
    "",
    summary="List media types",
    description="Returns every media type with its source and protected source field id. **Auth:** None.",
    response_model=list[MediaTypeOut],
)
async def list_media_types(svc: MediaTypeService = Depends(get_media_type_service)):
    return await svc.list()

@router.get(
    "/{media_type_id}",
    summary="Get a media type",
    response_model=MediaTypeOut,
    responses={404: {"description": "Media type not found.", "content": {"application/json": {"example": {"detail": "media_type_not_found"}}}}},
)
async def get_media_type(
    media_type_id: str = Path(..., description="Media type machine name"),
    svc: MediaTypeService = Depends(get_media_type_service),
):
    return await svc.get(media_type_id)

@router.post(
    "",
    summary="Create a media type (admin only)",
    description=(
        "Creates a media type bound to one source. The source field "
        "(`media.<id>.<source_field>`) is created with it and cannot be deleted "
        "while the type exists.\n\n**Auth:** Admins only."
    ),
    response_model=MediaTypeOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    responses={
        201: {"description": "Media type created."},
        409: {"description": "A media type with this id already exists."},
        **_ADMIN_ERRORS,
    },
)
async def create_media_type(
    payload: MediaTypeCreate,
    svc: MediaTypeService = Depends(get_media_type_service),
):
    return await svc.create(payload)

@router.patch(
    "/{media_type_id}",
    summary="Update a media type (admin only)",
    description="Only `label` and `description` can change; the source is fixed at creation.",
    response_model=MediaTypeOut,
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Media type not found."}, **_ADMIN_ERRORS},
)
async def update_media_type(
    payload: MediaTypeUpdate,
    media_type_id: str = Path(..., description="Media type machine name"),
    svc: MediaTypeService = Depends(get_media_type_service),
):
    return await svc.update(media_type_id, payload)

@router.delete(
    "/{media_type_id}",
    summary="Delete a media type (admin only)",
    description=(
        "Deletes the media type and its field configurations. Refused with **409** "
        "while media items of this type exist. Returns `{ \"ok\": true }` on success."
    ),
    dependencies=[Depends(require_admin)],
    responses={
        200: {"description": "Deleted.", "content": {"application/json": {"example": {"ok": True}}}},
        404: {"description": "Media type not found."},
        409: {"description": "Media type still has media items.", "content": {"application/json": {"example": {"detail": "media_type_in_use"}}}},
        **_ADMIN_ERRORS,
    },
)
async def delete_media_type(
    media_type_id: str = Path(..., description="Media type machine name"),
    svc: MediaTypeService = Depends(get_media_type_service),
):
    await svc.delete(media_type_id)
    return {"ok": True}
