"""Tests for content domain models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

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


class TestContentType:
    def test_known_types_in_order(self):
        assert [t.value for t in KNOWN_CONTENT_TYPES] == ["pdf", "image", "video", "link", "text"]

    def test_compares_equal_to_raw_string(self):
        assert ContentType.VIDEO == "video"
        assert "link" in KNOWN_CONTENT_TYPES
        assert "unsupported" not in KNOWN_CONTENT_TYPES

    def test_default_formats(self):
        assert ContentFormat.JPEG == "jpg"
        assert ContentFormat.MP4 == "mp4"
        assert ContentFormat.TXT == "txt"


class TestContentRecord:
    def test_minimal_record(self):
        record = ContentRecord(id="abc", created_at=datetime.now(tz=UTC))
        assert record.type is None
        assert record.url is None
        assert record.total_likes == 0
        assert record.is_deleted is False

    def test_keeps_unknown_type_string(self):
        record = ContentRecord(id="abc", type="hologram", created_at=datetime.now(tz=UTC))
        assert record.type == "hologram"

    def test_deleted_flag(self):
        now = datetime.now(tz=UTC)
        record = ContentRecord(id="abc", created_at=now, deleted_at=now)
        assert record.is_deleted is True

    def test_requires_created_at(self):
        with pytest.raises(ValidationError):
            ContentRecord(id="abc")  # type: ignore[call-arg]


class TestMetadataDefaults:
    def test_document(self):
        meta = DocumentMetadata(pages=3)
        assert meta.model_dump() == {"author": "Unknown", "pages": 3, "encrypted": False}

    def test_image(self):
        assert ImageMetadata().model_dump() == {"resolution": "1920x1080", "aspect_ratio": "16:9"}

    def test_video(self):
        assert VideoMetadata(duration=12).model_dump() == {"duration": 12, "resolution": "1080p"}


class TestProvisionPayload:
    def test_json_dump(self):
        payload = ProvisionPayload(
            id="abc",
            title="A link",
            created_at=datetime(2025, 1, 31, 23, 39, 54, tzinfo=UTC),
            type=ContentType.LINK,
            url="https://example.com",
            format=None,
            bytes=0,
            allow_download=False,
            is_embeddable=True,
            metadata=LinkMetadata(trusted=True),
        )
        data = payload.model_dump(mode="json")
        assert data["type"] == "link"
        assert data["format"] is None
        assert data["metadata"] == {"trusted": True}
        assert data["created_at"].startswith("2025-01-31T23:39:54")

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            ProvisionPayload(
                id="abc",
                created_at=datetime.now(tz=UTC),
                type="hologram",  # type: ignore[arg-type]
                url="x",
                format=None,
                allow_download=False,
                is_embeddable=False,
                metadata=LinkMetadata(trusted=False),
            )
