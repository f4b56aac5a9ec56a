"""Turn a content id into a delivery payload.

The resolver holds no per-request state.  The store, url signer, size
probe and reporting logger are injected at construction.
"""

from __future__ import annotations

import logging

from provisioner.config import DEFAULT_LINK, ProvisionerConfig
from provisioner.content.models import (
    KNOWN_CONTENT_TYPES,
    ContentRecord,
    ContentType,
    ProvisionPayload,
)
from provisioner.content.store import ContentLookup
from provisioner.errors import (
    ContentNotFoundError,
    InvalidContentError,
    InvalidInputError,
    UnsupportedTypeError,
)
from provisioner.provision.metadata import build_fields
from provisioner.provision.probe import SizeProbe, file_size
from provisioner.provision.signing import DEFAULT_EXPIRATION_SECONDS, UrlSigner

logger = logging.getLogger(__name__)


class ProvisionResolver:
    """Resolve content records into signed, type-specific payloads."""

    def __init__(
        self,
        store: ContentLookup,
        *,
        expiration_seconds: int | None = None,
        default_link: str = DEFAULT_LINK,
        signer: UrlSigner | None = None,
        size_probe: SizeProbe = file_size,
        reporter: logging.Logger | None = None,
    ) -> None:
        if signer is not None and expiration_seconds is not None:
            raise ValueError("Pass either signer or expiration_seconds, not both")
        self._store = store
        if signer is None:
            signer = UrlSigner(
                DEFAULT_EXPIRATION_SECONDS if expiration_seconds is None else expiration_seconds
            )
        self._signer = signer
        self._default_link = default_link
        self._size_probe = size_probe
        self._log = reporter or logger

    @classmethod
    def from_config(
        cls,
        store: ContentLookup,
        config: ProvisionerConfig,
        *,
        signer: UrlSigner | None = None,
        size_probe: SizeProbe = file_size,
        reporter: logging.Logger | None = None,
    ) -> ProvisionResolver:
        """Build a resolver using the ``[provision]`` config section.

        A *signer* passed in keeps its own expiration window.
        """
        return cls(
            store,
            default_link=config.provision.default_link,
            signer=signer or UrlSigner(config.provision.link_expiration_seconds),
            size_probe=size_probe,
            reporter=reporter,
        )

    def provision(self, content_id: str) -> ProvisionPayload:
        """Build the provision payload for *content_id*.

        Raises:
            InvalidInputError: The id is empty or not a string.
            ContentNotFoundError: No live record matches, or the lookup failed.
            InvalidContentError: The record has no content type.
            UnsupportedTypeError: The content type is not a known kind.
        """
        if not content_id or not isinstance(content_id, str):
            self._log.error("Invalid content id: %r", content_id)
            raise InvalidInputError(f"Content ID is invalid: {content_id!r}")

        self._log.info("Provisioning content for id=%s", content_id)
        content = self._lookup(content_id)
        content_type = self._validate_type(content)

        size = 0 if content_type is ContentType.LINK else self._probe(content.url)
        signed_url = "" if content_type is ContentType.LINK else self._signer.sign(content.url or "")
        fields = build_fields(content_type, content.url, size, signed_url, self._default_link)

        return ProvisionPayload(
            id=content.id,
            title=content.title,
            cover=content.cover,
            created_at=content.created_at,
            description=content.description,
            total_likes=content.total_likes,
            type=content_type,
            **fields.model_dump(exclude={"metadata"}),
            metadata=fields.metadata,
        )

    # ── Private helpers ──────────────────────────────────────────

    def _lookup(self, content_id: str) -> ContentRecord:
        try:
            content = self._store.find_by_id(content_id)
        except Exception as exc:
            # Lookup failures surface as not-found; the cause stays chained.
            self._log.error("Lookup failed for id=%s: %s", content_id, exc)
            raise ContentNotFoundError(f"Content lookup failed: {exc}") from exc

        if content is None:
            self._log.warning("Content not found for id=%s", content_id)
            raise ContentNotFoundError(f"Content not found: {content_id}")
        return content

    def _validate_type(self, content: ContentRecord) -> ContentType:
        if not content.type:
            self._log.warning("Missing content type for id=%s", content.id)
            raise InvalidContentError("Content type is missing")
        if content.type not in KNOWN_CONTENT_TYPES:
            self._log.warning(
                "Unsupported content type for id=%s, type=%s", content.id, content.type
            )
            raise UnsupportedTypeError(f"Unsupported content type: {content.type}")
        return ContentType(content.type)

    def _probe(self, url: str | None) -> int:
        if not url:
            return 0
        try:
            return self._size_probe(url)
        except Exception as exc:
            # Probe failures are non-fatal; the payload reports zero bytes.
            self._log.error("Size probe failed for %s: %s", url, exc)
            return 0
