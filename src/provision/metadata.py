"""Per-type provisioning table.

Pure functions from (content type, url, byte size) to the type-specific
payload fields.  Page counts and durations are byte-count heuristics,
not real format introspection.
"""

from __future__ import annotations

import posixpath
from typing import assert_never

from pydantic import BaseModel

from provisioner.content.models import (
    ContentFormat,
    ContentType,
    DocumentMetadata,
    ImageMetadata,
    LinkMetadata,
    ProvisionMetadata,
    VideoMetadata,
)

BYTES_PER_PAGE = 50_000
BYTES_PER_SECOND = 100_000
MIN_PAGES = 1
MIN_DURATION_SECONDS = 10


class ProvisionFields(BaseModel):
    """The part of a payload that depends on the content type."""

    url: str
    format: str | None
    bytes: int
    allow_download: bool
    is_embeddable: bool
    metadata: ProvisionMetadata


def extract_format(url: str | None, default: str) -> str:
    """Return the url's extension without the dot, or *default*."""
    if not url:
        return default
    return posixpath.splitext(url)[1][1:] or default


def document_metadata(size: int) -> DocumentMetadata:
    return DocumentMetadata(pages=max(MIN_PAGES, size // BYTES_PER_PAGE))


def image_metadata() -> ImageMetadata:
    return ImageMetadata()


def video_metadata(size: int) -> VideoMetadata:
    return VideoMetadata(duration=max(MIN_DURATION_SECONDS, size // BYTES_PER_SECOND))


def link_metadata(url: str | None) -> LinkMetadata:
    return LinkMetadata(trusted=bool(url) and "https" in url)


def build_fields(
    content_type: ContentType,
    url: str | None,
    size: int,
    signed_url: str,
    default_link: str,
) -> ProvisionFields:
    """Apply the provisioning table for one content type.

    Args:
        content_type: Validated content type.
        url: Raw url stored on the record (may be None).
        size: Probed byte size of the asset; ignored for links.
        signed_url: Signed form of ``url``; ignored for links.
        default_link: Url handed out for links that have none.

    Returns:
        The type-specific payload fields.
    """
    match content_type:
        case ContentType.PDF:
            return ProvisionFields(
                url=signed_url,
                format=ContentFormat.PDF.value,
                bytes=size,
                allow_download=True,
                is_embeddable=False,
                metadata=document_metadata(size),
            )
        case ContentType.IMAGE:
            return ProvisionFields(
                url=signed_url,
                format=extract_format(url, ContentFormat.JPEG.value),
                bytes=size,
                allow_download=True,
                is_embeddable=True,
                metadata=image_metadata(),
            )
        case ContentType.VIDEO:
            return ProvisionFields(
                url=signed_url,
                format=extract_format(url, ContentFormat.MP4.value),
                bytes=size,
                allow_download=False,
                is_embeddable=True,
                metadata=video_metadata(size),
            )
        case ContentType.LINK:
            return ProvisionFields(
                url=url or default_link,
                format=None,
                bytes=0,
                allow_download=False,
                is_embeddable=True,
                metadata=link_metadata(url),
            )
        case ContentType.TEXT:
            return ProvisionFields(
                url=signed_url,
                format=extract_format(url, ContentFormat.TXT.value),
                bytes=size,
                allow_download=True,
                is_embeddable=False,
                metadata=document_metadata(size),
            )
        case _:
            assert_never(content_type)
