"""Typed errors raised while provisioning content.

Every provisioning failure is a ``ProvisionError`` carrying a ``kind``
string that outer layers (the CLI, an API adapter) map to their own
status codes.  ``ContentStoreError`` is the data-access failure raised by
the content store; the resolver folds it into ``ContentNotFoundError``.
"""

from __future__ import annotations


class ProvisionError(Exception):
    """Base class for provisioning failures."""

    kind = "provision_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(ProvisionError):
    """The content id is missing or empty."""

    kind = "invalid_input"


class ContentNotFoundError(ProvisionError):
    """No live record matches the id, or the lookup itself failed."""

    kind = "not_found"


class InvalidContentError(ProvisionError):
    """The record exists but carries no content type."""

    kind = "invalid_content"


class UnsupportedTypeError(ProvisionError):
    """The record's content type is not one we know how to provision."""

    kind = "unsupported_type"


class ContentStoreError(Exception):
    """The content store could not be read."""
