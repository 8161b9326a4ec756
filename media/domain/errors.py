class MediaError(Exception):
    """Base class for media domain errors."""


class MediaTypeNotFound(MediaError):
    def __init__(self, media_type_id: str):
        super().__init__(f"media type {media_type_id!r} not found")
        self.media_type_id = media_type_id


class MediaTypeExists(MediaError):
    def __init__(self, media_type_id: str):
        super().__init__(f"media type {media_type_id!r} already exists")
        self.media_type_id = media_type_id


class MediaTypeInUse(MediaError):
    def __init__(self, media_type_id: str, item_count: int):
        super().__init__(
            f"media type {media_type_id!r} is used by {item_count} media item(s) and cannot be removed"
        )
        self.media_type_id = media_type_id
        self.item_count = item_count


class FieldConfigNotFound(MediaError):
    def __init__(self, field_config_id: str):
        super().__init__(f"field config {field_config_id!r} not found")
        self.field_config_id = field_config_id


class FieldConfigExists(MediaError):
    def __init__(self, field_config_id: str):
        super().__init__(f"field config {field_config_id!r} already exists")
        self.field_config_id = field_config_id


class MediaItemNotFound(MediaError):
    def __init__(self, media_id):
        super().__init__(f"media item {media_id} not found")
        self.media_id = media_id


class ConfigurationIntegrityFault(MediaError):
    """A field config points at a media type bundle that cannot be resolved."""

    def __init__(self, field_config_id: str, bundle: str):
        super().__init__(
            f"field config {field_config_id!r} targets media type {bundle!r}, which does not exist"
        )
        self.field_config_id = field_config_id
        self.bundle = bundle


class UnsupportedRemoteMedia(MediaError):
    def __init__(self, url: str):
        super().__init__(f"no remote media provider handles {url!r}")
        self.url = url


class AccessDenied(MediaError):
    def __init__(self, operation: str, target: str):
        super().__init__(f"{operation} on {target!r} is not allowed")
        self.operation = operation
        self.target = target
