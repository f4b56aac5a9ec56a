"""Time-limited delivery URLs.

The signature is an opaque random token, not a cryptographic proof.
The clock and token source are injectable so tests can pin both.
"""

from __future__ import annotations

import secrets
import time
from collections.abc import Callable

from provisioner.config import DEFAULT_LINK_EXPIRATION_SECONDS as DEFAULT_EXPIRATION_SECONDS


def random_token() -> str:
    """Return a short random token, unique per call."""
    return secrets.token_hex(8)


class UrlSigner:
    """Append ``expires`` and ``signature`` query parameters to a url."""

    def __init__(
        self,
        expiration_seconds: int = DEFAULT_EXPIRATION_SECONDS,
        clock: Callable[[], float] = time.time,
        token_factory: Callable[[], str] = random_token,
    ) -> None:
        if expiration_seconds <= 0:
            raise ValueError(f"expiration_seconds must be positive, got {expiration_seconds}")
        self.expiration_seconds = expiration_seconds
        self._clock = clock
        self._token_factory = token_factory

    def expires_at(self) -> int:
        """Epoch second at which a url signed now stops being valid."""
        return int(self._clock()) + self.expiration_seconds

    def sign(self, url: str) -> str:
        return f"{url}?expires={self.expires_at()}&signature={self._token_factory()}"
