import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from media.domain.errors import (
    AccessDenied,
    ConfigurationIntegrityFault,
    FieldConfigExists,
    FieldConfigNotFound,
    MediaItemNotFound,
    MediaTypeExists,
    MediaTypeInUse,
    MediaTypeNotFound,
    UnsupportedRemoteMedia,
)

log = logging.getLogger(__name__)

# domain error -> (status, detail)
ERROR_RESPONSES = {
    MediaTypeNotFound: (status.HTTP_404_NOT_FOUND, "media_type_not_found"),
    FieldConfigNotFound: (status.HTTP_404_NOT_FOUND, "not found"),
    MediaItemNotFound: (status.HTTP_404_NOT_FOUND, "not found"),
    MediaTypeExists: (status.HTTP_409_CONFLICT, "already_exists"),
    FieldConfigExists: (status.HTTP_409_CONFLICT, "already_exists"),
    MediaTypeInUse: (status.HTTP_409_CONFLICT, "media_type_in_use"),
    AccessDenied: (status.HTTP_403_FORBIDDEN, "forbidden"),
    UnsupportedRemoteMedia: (422, "unsupported_remote_media"),
    ConfigurationIntegrityFault: (status.HTTP_500_INTERNAL_SERVER_ERROR, "configuration_integrity_fault"),
}


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class, (status_code, detail) in ERROR_RESPONSES.items():
        app.add_exception_handler(exc_class, _handler(status_code, detail))


def _handler(status_code: int, detail: str):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            log.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(status_code=status_code, content={"detail": detail})
    return handle
