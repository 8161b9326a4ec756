from fastapi import APIRouter, HTTPException, Path

from media.services.help import HELP_TOPICS, help_topic
from shared.entities.help import HelpTopicOut

router = APIRouter(prefix="/v1/help", tags=["help"])

@router.get("", summary="List help topics", response_model=list[HelpTopicOut])
async def list_help_topics():
    return list(HELP_TOPICS.values())

@router.get(
    "/{topic}",
    summary="Get a help topic",
    response_model=HelpTopicOut,
    responses={404: {"description": "Unknown help topic."}},
)
async def get_help_topic(topic: str = Path(..., description="`media`, `media_types` or `media_items`")):
    found = help_topic(topic)
    if not found:
        raise HTTPException(status_code=404, detail="not found")
    return found
