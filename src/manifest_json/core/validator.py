"""JSON Schema validation for parsed manifests.

This module loads the bundled JSON Schema and checks that a decoded
manifest is a flat object whose values are all strings.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

# Path to the schema file shipped inside the package
SCHEMA_PATH = Path(__file__).parent / "schemas" / "manifest.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    The file is read once per process; later calls return the same
    dictionary, which callers must not modify.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(data: Any) -> None:
    """Validate decoded manifest data against the JSON Schema.

    Args:
        data: The value produced by json.loads for a manifest file

    Raises:
        ValidationError: If the data is not an object of string values
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=data, schema=schema)


def describe_validation_error(error: ValidationError) -> str:
    """Build a one-line description of where and why validation failed."""
    error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
    return f"Validation error at {error_path}: {error.message}"


def validate_manifest_with_error_details(data: Any) -> tuple[bool, str | None]:
    """Validate manifest data and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        data: The decoded manifest to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(data)
        return True, None
    except ValidationError as e:
        return False, describe_validation_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
