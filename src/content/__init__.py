"""Content domain — stored content records and their store."""

from provisioner.content.models import (
    KNOWN_CONTENT_TYPES,
    ContentFormat,
    ContentRecord,
    ContentType,
    DocumentMetadata,
    ImageMetadata,
    LinkMetadata,
    ProvisionPayload,
    VideoMetadata,
)
from provisioner.content.store import ContentLookup, ContentStore

__all__ = [
    "KNOWN_CONTENT_TYPES",
    "ContentFormat",
    "ContentLookup",
    "ContentRecord",
    "ContentStore",
    "ContentType",
    "DocumentMetadata",
    "ImageMetadata",
    "LinkMetadata",
    "ProvisionPayload",
    "VideoMetadata",
]
