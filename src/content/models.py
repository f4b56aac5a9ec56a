"""Content domain models — pure Pydantic v2 data types.

A ``ContentRecord`` is what the store holds; a ``ProvisionPayload`` is the
delivery descriptor built from it on every request and never persisted.
The metadata models form a tagged union keyed by content kind.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class ContentType(StrEnum):
    """Kind of content a record points at."""

    PDF = "pdf"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"
    TEXT = "text"


KNOWN_CONTENT_TYPES: tuple[ContentType, ...] = tuple(ContentType)


class ContentFormat(StrEnum):
    """Fallback formats used when a url carries no extension."""

    PDF = "pdf"
    JPEG = "jpg"
    MP4 = "mp4"
    TXT = "txt"


class ContentRecord(BaseModel):
    """A stored piece of content.

    ``type`` is kept as the raw stored string; the resolver is the one
    that decides whether it names a known ``ContentType``.
    """

    id: str
    title: str | None = None
    description: str | None = None
    cover: str | None = None
    url: str | None = None
    type: str | None = None
    created_at: datetime
    total_likes: int = 0
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class DocumentMetadata(BaseModel):
    """Metadata for paged documents (pdf and text)."""

    author: str = "Unknown"
    pages: int
    encrypted: bool = False


class ImageMetadata(BaseModel):
    resolution: str = "1920x1080"
    aspect_ratio: str = "16:9"


class VideoMetadata(BaseModel):
    duration: int
    resolution: str = "1080p"


class LinkMetadata(BaseModel):
    trusted: bool


ProvisionMetadata = DocumentMetadata | ImageMetadata | VideoMetadata | LinkMetadata


class ProvisionPayload(BaseModel):
    """Delivery descriptor for a single content record."""

    id: str
    title: str | None = None
    cover: str | None = None
    created_at: datetime
    description: str | None = None
    total_likes: int = 0
    type: ContentType
    url: str
    format: str | None
    bytes: int = 0
    allow_download: bool
    is_embeddable: bool
    metadata: ProvisionMetadata
