"""Exceptions raised while loading and querying manifests.

Every exception derives from ManifestError so callers can catch the whole
family at once. Construction failures (NotFoundError, IoError, ParseError)
mean no store was created; KeyNotFoundError is the only error raised by a
store after it has loaded successfully.
"""


class ManifestError(Exception):
    """Base class for all manifest errors."""


class NotFoundError(ManifestError):
    """The manifest file does not exist or its directory is not accessible."""


class IoError(ManifestError):
    """The manifest file exists but could not be read."""


class ParseError(ManifestError, ValueError):
    """The manifest is not valid JSON or not a flat object of strings."""


class KeyNotFoundError(ManifestError, KeyError):
    """A requested key is not present in the manifest.

    Subclasses KeyError so lookups can be recovered from with the usual
    mapping idioms.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Manifest key "{key}" does not exist.')

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0])
