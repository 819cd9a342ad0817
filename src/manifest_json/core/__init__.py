"""Core utilities for manifest loading.

This package contains the type aliases, the exception hierarchy and the
schema validation shared by the store and the command-line interface.
"""

from .errors import IoError, KeyNotFoundError, ManifestError, NotFoundError, ParseError
from .types import Manifest, TypedManifest
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "IoError",
    "KeyNotFoundError",
    "Manifest",
    "ManifestError",
    "NotFoundError",
    "ParseError",
    "TypedManifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
