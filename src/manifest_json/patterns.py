"""Key helpers for manifest filtering.

This module splits manifest keys into basename and extension and turns
the limited glob syntax accepted by key queries into regular expressions.
"""

import re

from .core.types import Manifest

# Keys are written by build tools on any platform
KEY_SEPARATORS = ("/", "\\")


def key_basename(key: str) -> str:
    """Return the final path segment of a manifest key.

    Example:
        "js/vendor/app.js" -> "app.js"

    Args:
        key: Manifest key, possibly containing directory segments

    Returns:
        Text after the last separator, ignoring trailing separators
    """
    trimmed = key.rstrip("".join(KEY_SEPARATORS))
    cut = max(trimmed.rfind(sep) for sep in KEY_SEPARATORS)
    return trimmed[cut + 1:]


def key_extension(key: str) -> str:
    """Return the file extension of a manifest key, without the dot.

    The extension is everything after the last "." of the basename, so
    "js/app.min.js" -> "js" and "LICENSE" -> "".
    """
    basename = key_basename(key)
    if "." not in basename:
        return ""
    return basename.rpartition(".")[2]


def compile_key_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a key glob into a compiled regular expression.

    Only "*" is special and matches any run of characters. Everything else
    is matched literally, so "a+b.js" only matches the key "a+b.js".
    Matching is case-insensitive; use the result with fullmatch().

    Args:
        pattern: Glob such as "js/*" or "app.*"

    Returns:
        Compiled regular expression
    """
    escaped = re.escape(pattern)
    return re.compile(escaped.replace(r"\*", ".*"), re.IGNORECASE | re.DOTALL)


def filter_by_pattern(metadata: Manifest, pattern: str, basename: bool = False) -> Manifest:
    """Select the manifest entries whose key matches a glob.

    Args:
        metadata: Manifest to filter
        pattern: Glob matched against the whole key (or its basename)
        basename: Match against key_basename(key) instead of the full key

    Returns:
        New dictionary with the matching entries in manifest order
    """
    regex = compile_key_pattern(pattern)
    return {
        key: value
        for key, value in metadata.items()
        if regex.fullmatch(key_basename(key) if basename else key)
    }
