from typing import Protocol, Optional
from media.domain.entities import RemoteMediaMetadata

class RemoteMediaProviderPort(Protocol):
    """Read-only oEmbed provider interface (URL-driven)."""

    name: str

    def can_handle(self, url: str) -> bool: ...
    def fetch_metadata(self, url: str) -> Optional[RemoteMediaMetadata]: ...
