import logging
import re
from typing import Optional

import requests

from app.core.config import settings
from media.domain.entities import RemoteMediaMetadata
from media.ports.outbound.remote_media_provider_port import RemoteMediaProviderPort

log = logging.getLogger(__name__)


class OEmbedProvider(RemoteMediaProviderPort):
    """Resolves a resource URL through a provider's oEmbed endpoint."""

    def __init__(self, name: str, endpoint: str, url_pattern: re.Pattern, timeout: int | None = None):
        self.name = name
        self.endpoint = endpoint
        self.url_pattern = url_pattern
        self.timeout = timeout or settings.oembed_timeout_seconds

    def can_handle(self, url: str) -> bool:
        return bool(self.url_pattern.search(url))

    def fetch_metadata(self, url: str) -> Optional[RemoteMediaMetadata]:
        if not self.can_handle(url):
            return None
        try:
            r = requests.get(self.endpoint, params={"url": url, "format": "json"}, timeout=self.timeout)
        except requests.RequestException:
            log.warning("oembed: %s request failed for %s", self.name, url, exc_info=True)
            return None
        if r.status_code != 200:
            log.info("oembed: %s answered %s for %s", self.name, r.status_code, url)
            return None
        try:
            data = r.json()
        except ValueError:
            log.warning("oembed: %s returned a non-JSON body for %s", self.name, url)
            return None

        return RemoteMediaMetadata(
            provider=data.get("provider_name") or self.name,
            url=url,
            title=data.get("title"),
            author_name=data.get("author_name"),
            thumbnail_url=data.get("thumbnail_url"),
            width=_as_int(data.get("width")),
            height=_as_int(data.get("height")),
            html=data.get("html"),
        )


def _as_int(value) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


_YT_RE = re.compile(
    r"(?:https?://)?(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)(?P<id>[A-Za-z0-9_-]{11})"
)
_VIMEO_RE = re.compile(r"(?:https?://)?(?:www\.)?vimeo\.com/(?:.*/)?(?P<id>\d+)")


def default_providers() -> list[OEmbedProvider]:
    return [
        OEmbedProvider("YouTube", "https://www.youtube.com/oembed", _YT_RE),
        OEmbedProvider("Vimeo", "https://vimeo.com/api/oembed.json", _VIMEO_RE),
    ]
