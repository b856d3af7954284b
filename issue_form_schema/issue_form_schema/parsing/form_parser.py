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

"""Parsing of issue form documents into FormDocument objects.

An issue form document is a mapping with a ``body`` list of blocks::

    name: Bug Report
    labels: bug
    body:
      - type: textarea
        id: what-happened
        attributes:
          label: What happened?
        validations:
          required: true

Top-level keys other than ``body`` are kept as opaque metadata.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from ..exceptions import DocumentError, SchemaError, SchemaErrorKind
from ..models.field_definition import FieldDefinition, FieldKind
from ..models.form_document import FormDocument
from ..models.schema_model import DEFAULT_SCHEMA_ID, SchemaModel
from ..schema.json_schema_loader import load_schema
from .source_location import SourceMap, format_source, lookup_source
from .yaml_parser import YamlParser, yaml_parser

logger = logging.getLogger(__name__)


def _pointer(parts) -> str:
    return "".join(f"/{p}" for p in parts)


def check_document_structure(
    data: Any,
    source_map: Optional[SourceMap] = None,
    file_path: Optional[Path] = None,
) -> None:
    """Check the document shape against the packaged issue form JSON Schema.

    Raises:
        DocumentError: Listing every structural problem found
    """
    if not isinstance(data, dict):
        raise DocumentError(
            f"Form document root must be a mapping, got {type(data).__name__}"
            f"{format_source(lookup_source(source_map, '', file_path))}"
        )

    validator = jsonschema.Draft202012Validator(load_schema("issue_form"))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    if not errors:
        return

    lines = []
    for error in errors:
        loc = lookup_source(source_map, _pointer(error.absolute_path), file_path)
        lines.append(f"  - {error.message}{format_source(loc)}")
    raise DocumentError("Invalid form document:\n" + "\n".join(lines))


def _block_to_field(block: Dict[str, Any], index: int) -> FieldDefinition:
    attributes = block.get("attributes") or {}
    validations = block.get("validations") or {}
    kind = FieldKind.from_form_type(block["type"])

    field_id = block.get("id")
    if field_id is None and kind is FieldKind.MARKDOWN_NOTE:
        field_id = f"markdown-{index}"

    return FieldDefinition(
        id=field_id,
        kind=kind,
        label=attributes.get("label"),
        description=attributes.get("description"),
        placeholder=attributes.get("placeholder"),
        required=validations.get("required", False),
        render_mode=attributes.get("render"),
        value=attributes.get("value"),
    )


def _block_path(fields: List[FieldDefinition], exc: SchemaError) -> str:
    if exc.kind is SchemaErrorKind.EMPTY_SCHEMA or exc.field_id is None:
        return "/body"
    indices = [i for i, f in enumerate(fields) if f.id == exc.field_id]
    if not indices:
        return "/body"
    # a duplicate is reported at its second occurrence
    index = indices[1] if exc.kind is SchemaErrorKind.DUPLICATE_FIELD and len(indices) > 1 else indices[0]
    return f"/body/{index}"


def _with_location(exc: SchemaError, yaml_path: str, source_map, file_path) -> SchemaError:
    loc = lookup_source(source_map, yaml_path, file_path)
    return SchemaError(exc.kind, f"{exc}{format_source(loc)}", field_id=exc.field_id)


def parse_form_document(
    data: Any,
    schema_id: Optional[str] = None,
    source_map: Optional[SourceMap] = None,
    file_path: Optional[Union[str, Path]] = None,
) -> FormDocument:
    """Build a FormDocument from already-loaded document data.

    Args:
        data: Parsed document (mapping with a ``body`` list)
        schema_id: Identifier for the schema. Defaults to the document
            ``name``, then the file stem, then "form".
        source_map: Optional YAML source map used to locate errors
        file_path: Optional path of the source file, used in messages

    Raises:
        DocumentError: If the document has the wrong shape
        SchemaError: If the fields do not form a valid schema
    """
    path = Path(file_path) if file_path is not None else None
    check_document_structure(data, source_map, path)

    fields: List[FieldDefinition] = []
    for index, block in enumerate(data["body"]):
        try:
            fields.append(_block_to_field(block, index))
        except SchemaError as exc:
            raise _with_location(exc, f"/body/{index}", source_map, path) from exc

    if schema_id is None:
        name = data.get("name")
        if isinstance(name, str) and name.strip():
            schema_id = name.strip()
        elif path is not None:
            schema_id = path.stem
        else:
            schema_id = DEFAULT_SCHEMA_ID

    try:
        schema = SchemaModel.load(fields, schema_id=schema_id)
    except SchemaError as exc:
        raise _with_location(exc, _block_path(fields, exc), source_map, path) from exc

    metadata = {key: value for key, value in data.items() if key != "body"}
    logger.debug(f"Parsed form '{schema_id}' with metadata keys {list(metadata)}")
    return FormDocument(schema=schema, metadata=metadata, file_path=path)


def load_form_string(content: str, schema_id: Optional[str] = None) -> FormDocument:
    """Parse an issue form from YAML text."""
    data, source_map = yaml_parser.load_config_from_string_with_source(content)
    return parse_form_document(data, schema_id=schema_id, source_map=source_map)


def load_form_file(
    file_path: Union[str, Path],
    schema_id: Optional[str] = None,
    parser: Optional[YamlParser] = None,
) -> FormDocument:
    """Parse an issue form from a YAML file."""
    parser = parser or yaml_parser
    data, source_map = parser.load_config_with_source(file_path)
    return parse_form_document(data, schema_id=schema_id, source_map=source_map, file_path=file_path)
