"""Type definitions for asset manifests.

A manifest is a flat JSON object mapping logical asset names to the
resolved output paths written by a build tool, e.g.::

    {"app.js": "app.3f2a1c.js", "css/site.css": "css/site.8b01e2.css"}
"""

from typing import TypeAlias

# Logical asset key -> resolved output path
Manifest: TypeAlias = dict[str, str]

# File extension (e.g. 'js') -> entries whose key has that extension
TypedManifest: TypeAlias = dict[str, Manifest]
