"""Command-line interface for querying manifests.

This module provides the CLI entry point for printing a manifest, or a
filtered part of it, as JSON.
"""

import argparse
import json
import sys
from typing import Any

from .core.errors import KeyNotFoundError, ManifestError
from .store import MANIFEST_FILE_NAME, ManifestStore


def query_manifest(store: ManifestStore, args: argparse.Namespace) -> Any:
    """Run the query selected on the command line against a store.

    Args:
        store: Loaded manifest
        args: Parsed command-line arguments

    Returns:
        JSON-serializable query result

    Raises:
        KeyNotFoundError: If --get names a missing key
    """
    if args.get is not None:
        return store.get(args.get)

    if args.has is not None:
        return store.has(args.has)

    if args.type:
        if len(args.type) == 1:
            return store.get_all_by_type(args.type[0])
        return store.get_all_by_types(args.type)

    if args.key is not None:
        return store.get_all_by_key(args.key)

    if args.basename is not None:
        return store.get_all_by_key_basename(args.basename)

    return store.get_all()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the manifest query tool."""
    parser = argparse.ArgumentParser(
        description="Query a build tool's manifest.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump the whole manifest
  manifest-json --path public/build

  # Resolve a single asset
  manifest-json --path public/build --get app.js

  # All scripts and stylesheets, grouped by extension
  manifest-json --path public/build --type js css

  # Every asset named app.* in any directory
  manifest-json --path public/build --basename "app.*"
        """,
    )

    parser.add_argument(
        "--path", required=True, help="Directory containing the manifest file"
    )

    parser.add_argument(
        "--file-name",
        default=MANIFEST_FILE_NAME,
        help=f"Name of the manifest file (default: {MANIFEST_FILE_NAME})",
    )

    query = parser.add_mutually_exclusive_group()
    query.add_argument("--get", metavar="KEY", help="Print the value stored under KEY")
    query.add_argument(
        "--has", metavar="KEY", help="Print whether KEY exists (exit status 1 if not)"
    )
    query.add_argument(
        "--type",
        metavar="EXT",
        nargs="+",
        help="Print entries whose key has extension EXT (space-separated)",
    )
    query.add_argument(
        "--key", metavar="PATTERN", help='Print entries whose key matches PATTERN ("*" wildcard)'
    )
    query.add_argument(
        "--basename",
        metavar="PATTERN",
        help="Print entries whose key basename matches PATTERN",
    )

    args = parser.parse_args(argv)

    try:
        store = ManifestStore(args.path, args.file_name)
    except ManifestError as e:
        print(f"Error: Failed to load manifest: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(store)} entries from {store.path}", file=sys.stderr)

    try:
        result = query_manifest(store, args)
    except KeyNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Output JSON to stdout
    json.dump(result, sys.stdout, indent=2)
    print()  # Add newline at end

    if result is False:
        sys.exit(1)


if __name__ == "__main__":
    main()
