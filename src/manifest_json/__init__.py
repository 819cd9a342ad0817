"""Manifest JSON - read-only access to build tool manifests.

This package loads a manifest.json file (a flat mapping of logical asset
names to resolved output paths) and provides lookups and filtered views
by file extension or key pattern.
"""

# Core library interface
from .store import MANIFEST_FILE_NAME, ManifestStore

# Core utilities
from .core import IoError, KeyNotFoundError, ManifestError, NotFoundError, ParseError
from .core import Manifest, TypedManifest
from .core import validate_manifest, validate_manifest_with_error_details

# Key helpers
from .patterns import compile_key_pattern, filter_by_pattern, key_basename, key_extension

# CLI interface
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "ManifestStore",
    "MANIFEST_FILE_NAME",
    # Errors
    "ManifestError",
    "NotFoundError",
    "IoError",
    "ParseError",
    "KeyNotFoundError",
    # Core utilities
    "Manifest",
    "TypedManifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "compile_key_pattern",
    "filter_by_pattern",
    "key_basename",
    "key_extension",
    "main",
]
