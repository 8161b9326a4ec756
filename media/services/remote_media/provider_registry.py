import logging
from typing import List, Optional

from media.domain.entities import RemoteMediaMetadata
from media.domain.errors import UnsupportedRemoteMedia
from media.ports.outbound.remote_media_provider_port import RemoteMediaProviderPort

log = logging.getLogger(__name__)


class ProviderRegistry:
    """Ordered list of oEmbed providers; the first one that claims a URL wins."""

    def __init__(self, providers: List[RemoteMediaProviderPort]):
        self._providers = providers

    def resolve_by_url(self, url: str) -> Optional[RemoteMediaProviderPort]:
        return next((p for p in self._providers if p.can_handle(url)), None)

    def fetch(self, url: str) -> Optional[RemoteMediaMetadata]:
        """
        Metadata for ``url``. Raises UnsupportedRemoteMedia when no provider
        handles it; returns None when the provider is known but the lookup failed.
        """
        provider = self.resolve_by_url(url)
        if provider is None:
            raise UnsupportedRemoteMedia(url)
        metadata = provider.fetch_metadata(url)
        if metadata is None:
            log.info("remote media: %s could not resolve %s", provider.name, url)
        return metadata
