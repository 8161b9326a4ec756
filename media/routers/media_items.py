from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.core.auth import require_staff
from media.domain.entities import MediaItemCreate
from media.services.media_item_service import MediaItemService
from shared.entities.media import MediaItemOut, TemplateSuggestionsOut
from shared.wiring import get_media_item_service

router = APIRouter(prefix="/v1/media", tags=["media"])

@router.get(
    "",
    summary="List media items",
    response_model=list[MediaItemOut],
)
async def list_media(
    bundle: str | None = Query(None, description="Only items of this media type"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    svc: MediaItemService = Depends(get_media_item_service),
):
    return await svc.list(bundle=bundle, limit=limit, offset=offset)

@router.get(
    "/{media_id}",
    summary="Get a media item",
    response_model=MediaItemOut,
    responses={404: {"description": "Media item not found."}},
)
async def get_media(
    media_id: UUID = Path(..., description="Media item UUID"),
    svc: MediaItemService = Depends(get_media_item_service),
):
    return await svc.get(media_id)

@router.post(
    "",
    summary="Create a media item (staff only)",
    description=(
        "Creates a media item of the given media type. Remote video items need a URL "
        "from a supported provider (YouTube, Vimeo); its title becomes the label when "
        "none is given.\n\n**Auth:** Editors/Admins only."
    ),
    response_model=MediaItemOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
    responses={
        201: {"description": "Media item created."},
        401: {"description": "Not authenticated."},
        403: {"description": "Authenticated but not authorized (staff required)."},
        404: {"description": "Media type not found.", "content": {"application/json": {"example": {"detail": "media_type_not_found"}}}},
        422: {"description": "Remote URL not supported.", "content": {"application/json": {"example": {"detail": "unsupported_remote_media"}}}},
    },
)
async def create_media(
    payload: MediaItemCreate,
    svc: MediaItemService = Depends(get_media_item_service),
):
    return await svc.create(payload)

@router.delete(
    "/{media_id}",
    summary="Delete a media item (staff only)",
    description="Returns `{ \"ok\": true }` on success.",
    dependencies=[Depends(require_staff)],
    responses={
        200: {"description": "Deleted.", "content": {"application/json": {"example": {"ok": True}}}},
        404: {"description": "Media item not found."},
    },
)
async def delete_media(
    media_id: UUID = Path(..., description="Media item UUID"),
    svc: MediaItemService = Depends(get_media_item_service),
):
    await svc.delete(media_id)
    return {"ok": True}

@router.get(
    "/{media_id}/template-suggestions",
    summary="Template suggestions for rendering a media item",
    description=(
        "Returns template keys from most general to most specific: "
        "`media__<view_mode>`, `media__<bundle>`, `media__<bundle>__<view_mode>`. "
        "Dots in the view mode become underscores."
    ),
    response_model=TemplateSuggestionsOut,
    responses={404: {"description": "Media item not found."}},
)
async def get_template_suggestions(
    media_id: UUID = Path(..., description="Media item UUID"),
    view_mode: str = Query("full", min_length=1, max_length=64, description="e.g. `full`, `teaser.compact`"),
    svc: MediaItemService = Depends(get_media_item_service),
):
    return await svc.template_suggestions(media_id, view_mode)
