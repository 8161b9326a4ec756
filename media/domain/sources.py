"""
Media sources.

A source is the piece of logic that derives a media item's metadata and owns
exactly one field on its media type (the "source field"). Sources are a closed
set of variants; adding a new kind means adding a member to ``SourceKind`` and
an entry to ``SOURCE_DEFINITIONS``.
"""
from dataclasses import dataclass
from enum import Enum


class SourceKind(str, Enum):
    image = "image"
    remote_video = "remote_video"
    document = "document"
    audio_file = "audio_file"
    video_file = "video_file"

    def source_field_name(self) -> str:
        return SOURCE_DEFINITIONS[self].source_field_name

    @property
    def definition(self) -> "SourceDefinition":
        return SOURCE_DEFINITIONS[self]


@dataclass(frozen=True)
class SourceDefinition:
    label: str
    source_field_name: str
    field_type: str                      # field type used to create the source field
    remote: bool = False                 # source_value is a URL resolved by an oEmbed provider
    file_extensions: tuple[str, ...] = ()


SOURCE_DEFINITIONS: dict[SourceKind, SourceDefinition] = {
    SourceKind.image: SourceDefinition(
        label="Image",
        source_field_name="field_media_image",
        field_type="image",
        file_extensions=("png", "gif", "jpg", "jpeg", "webp"),
    ),
    SourceKind.remote_video: SourceDefinition(
        label="Remote video",
        source_field_name="field_media_oembed_video",
        field_type="string",
        remote=True,
    ),
    SourceKind.document: SourceDefinition(
        label="Document",
        source_field_name="field_media_document",
        field_type="file",
        file_extensions=("txt", "rtf", "doc", "docx", "ppt", "pptx", "xls", "xlsx", "pdf", "odf", "odg", "odp", "ods", "odt"),
    ),
    SourceKind.audio_file: SourceDefinition(
        label="Audio file",
        source_field_name="field_media_audio_file",
        field_type="file",
        file_extensions=("mp3", "wav", "aac"),
    ),
    SourceKind.video_file: SourceDefinition(
        label="Video file",
        source_field_name="field_media_video_file",
        field_type="file",
        file_extensions=("mp4",),
    ),
}
