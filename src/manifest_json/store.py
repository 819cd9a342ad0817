"""Read-only access to a build tool's manifest.json.

This module provides ManifestStore, which loads a manifest once and
answers lookups and filtered queries from memory.
"""

import json
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from jsonschema import ValidationError

from .core.errors import IoError, KeyNotFoundError, NotFoundError, ParseError
from .core.types import Manifest, TypedManifest
from .core.validator import describe_validation_error, validate_manifest
from .patterns import filter_by_pattern, key_extension

logger = logging.getLogger(__name__)

# Name of the manifest file looked up inside the given directory
MANIFEST_FILE_NAME = "manifest.json"


class ManifestStore:
    """In-memory view of a manifest file.

    The manifest is read and validated when the store is created; after
    that no further I/O happens and the loaded mapping never changes.
    Every query returns a new dictionary, so callers cannot alter the
    store through a result.

    Example:
        >>> store = ManifestStore("public/build")
        >>> store.get("app.js")
        'app.3f2a1c.js'
        >>> store.get_all_by_types(["js", "css"])
        {'js': {...}, 'css': {...}}
    """

    def __init__(self, directory: str | os.PathLike[str], file_name: str = MANIFEST_FILE_NAME):
        """Load the manifest found in a directory.

        Args:
            directory: Directory containing the manifest. Either "/" or "\\"
                may be used as separator.
            file_name: Name of the manifest file inside the directory

        Raises:
            NotFoundError: If the manifest file cannot be located
            IoError: If the manifest file cannot be read
            ParseError: If the file is not a JSON object of string values
        """
        self._path = self._resolve_manifest_path(directory, file_name)
        self._metadata = self._load_metadata(self._path)
        self._typed_metadata: TypedManifest = {}
        logger.debug("Loaded %d manifest entries from %s", len(self._metadata), self._path)

    @classmethod
    def from_dir(
        cls, directory: str | os.PathLike[str], file_name: str = MANIFEST_FILE_NAME
    ) -> "ManifestStore":
        """Create a store from a directory. Same as calling the class."""
        return cls(directory, file_name)

    @property
    def path(self) -> Path:
        """Absolute path of the loaded manifest file."""
        return self._path

    def has(self, key: str) -> bool:
        """Check whether the manifest contains a key."""
        return key in self._metadata

    def get(self, key: str) -> str:
        """Return the resolved path stored under a key.

        Raises:
            KeyNotFoundError: If the key is not in the manifest
        """
        try:
            return self._metadata[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get_all(self) -> Manifest:
        """Return every manifest entry in file order."""
        return dict(self._metadata)

    def get_all_by_type(self, file_type: str) -> Manifest:
        """Return the entries whose key has the given file extension.

        The comparison is exact and case-sensitive ("js" does not match
        "app.JS"). Results are computed once per extension and cached for
        the lifetime of the store.

        Args:
            file_type: Extension without the leading dot, e.g. "js"

        Returns:
            Matching entries in manifest order
        """
        if file_type not in self._typed_metadata:
            self._typed_metadata[file_type] = {
                key: value
                for key, value in self._metadata.items()
                if key_extension(key) == file_type
            }
            logger.debug(
                "Cached %d manifest entries for type %r",
                len(self._typed_metadata[file_type]),
                file_type,
            )

        return dict(self._typed_metadata[file_type])

    def get_all_by_types(self, file_types: Iterable[str]) -> TypedManifest:
        """Return get_all_by_type() for each extension, keyed by extension."""
        return {file_type: self.get_all_by_type(file_type) for file_type in file_types}

    def get_all_by_key(self, pattern: str) -> Manifest:
        """Return the entries whose whole key matches a glob.

        "*" matches any run of characters, everything else is literal and
        the match ignores case. For example "js/*" matches "js/app.js" and
        "JS/vendor/lib.js".
        """
        return filter_by_pattern(self._metadata, pattern)

    def get_all_by_key_basename(self, pattern: str) -> Manifest:
        """Return the entries whose key basename matches a glob.

        Uses the same syntax as get_all_by_key(), so "app.*" matches both
        "src/app.js" and "dist/app.css".
        """
        return filter_by_pattern(self._metadata, pattern, basename=True)

    def __contains__(self, key: object) -> bool:
        return key in self._metadata

    def __len__(self) -> int:
        return len(self._metadata)

    def __iter__(self) -> Iterator[str]:
        return iter(self._metadata)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r}, entries={len(self._metadata)})"

    @staticmethod
    def _resolve_manifest_path(directory: str | os.PathLike[str], file_name: str) -> Path:
        # Accept both separator conventions regardless of platform
        normalized = os.fspath(directory).replace("/", os.sep).replace("\\", os.sep)
        candidate = Path(normalized) / file_name

        # Symlink loops raise RuntimeError before Python 3.13
        # and a NUL character in the path raises ValueError
        try:
            return candidate.resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            raise NotFoundError(f"Manifest file {candidate} does not exist.") from e

    @staticmethod
    def _load_metadata(path: Path) -> Manifest:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise IoError(f"Could not read manifest file {path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise ParseError(f"Manifest file {path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise ParseError(f"Manifest file {path} is not valid JSON: {e}") from e
        except (ValueError, RecursionError) as e:
            # Oversized integer literals and very deep nesting
            raise ParseError(f"Manifest file {path} is not valid JSON: {e}") from e

        try:
            validate_manifest(data)
        except ValidationError as e:
            raise ParseError(f"Manifest file {path} is invalid. {describe_validation_error(e)}") from e

        return data  # type: ignore[no-any-return]
