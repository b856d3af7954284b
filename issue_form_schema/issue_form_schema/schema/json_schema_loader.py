# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Schema loader for issue form document validation."""

import json
from pathlib import Path
from typing import Dict

from ..exceptions import DocumentError


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


def get_schema_path(schema_name: str) -> Path:
    """Get the path to a packaged JSON Schema file.

    Args:
        schema_name: Schema file name without extension (e.g. "issue_form")
    """
    return Path(__file__).parent / f"{schema_name}.json"


def load_schema(schema_name: str = "issue_form") -> dict:
    """Load a packaged JSON Schema file.

    Args:
        schema_name: Schema file name without extension

    Returns:
        Schema dictionary

    Raises:
        DocumentError: If the schema file is missing or is not valid JSON
    """
    if schema_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_name]

    schema_path = get_schema_path(schema_name)
    if not schema_path.exists():
        raise DocumentError(f"Schema file not found for '{schema_name}': {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentError(f"Invalid JSON in schema file {schema_path}: {e.msg}") from e

    _SCHEMA_CACHE[schema_name] = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
