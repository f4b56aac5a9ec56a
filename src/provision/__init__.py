"""Signed, type-specific delivery payloads for content."""

from provisioner.provision.metadata import ProvisionFields, build_fields, extract_format
from provisioner.provision.probe import SizeProbe, file_size
from provisioner.provision.resolver import DEFAULT_LINK, ProvisionResolver
from provisioner.provision.signing import DEFAULT_EXPIRATION_SECONDS, UrlSigner, random_token

__all__ = [
    "DEFAULT_EXPIRATION_SECONDS",
    "DEFAULT_LINK",
    "ProvisionFields",
    "ProvisionResolver",
    "SizeProbe",
    "UrlSigner",
    "build_fields",
    "extract_format",
    "file_size",
    "random_token",
]
