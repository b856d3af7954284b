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

"""In-memory, immutable representation of a form's field definitions."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..exceptions import SchemaError, SchemaErrorKind
from .field_definition import FieldDefinition

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_ID = "form"

FieldSource = Union[FieldDefinition, Mapping[str, Any]]


class SchemaModel:
    """Ordered set of field definitions with O(1) lookup by id.

    Instances are read-only once loaded and can be shared between
    validation calls without locking.
    """

    __slots__ = ("_schema_id", "_fields", "_by_id", "_interactive")

    def __init__(self, fields: Tuple[FieldDefinition, ...], schema_id: str = DEFAULT_SCHEMA_ID):
        self._schema_id = schema_id
        self._fields = tuple(fields)
        self._by_id: Dict[str, FieldDefinition] = {f.id: f for f in self._fields}
        self._interactive = tuple(f for f in self._fields if f.is_interactive)

    @classmethod
    def load(cls, definition: Iterable[FieldSource], schema_id: Optional[str] = None) -> "SchemaModel":
        """Load and check a schema.

        Args:
            definition: Ordered field definitions, either FieldDefinition
                instances or plain mappings accepted by FieldDefinition.from_dict
            schema_id: Identifier recorded on validated submissions

        Returns:
            The loaded SchemaModel

        Raises:
            SchemaError: DUPLICATE_FIELD, MISSING_LABEL or EMPTY_SCHEMA, checked in that order
        """
        fields = tuple(
            item if isinstance(item, FieldDefinition) else FieldDefinition.from_dict(item)
            for item in definition
        )

        seen = set()
        for field in fields:
            if field.id in seen:
                raise SchemaError(
                    SchemaErrorKind.DUPLICATE_FIELD,
                    f"Duplicate field id '{field.id}'",
                    field_id=field.id,
                )
            seen.add(field.id)

        for field in fields:
            if field.is_interactive and (not isinstance(field.label, str) or not field.label.strip()):
                raise SchemaError(
                    SchemaErrorKind.MISSING_LABEL,
                    f"Field '{field.id}' ({field.kind.value}) requires a label",
                    field_id=field.id,
                )

        if not any(field.is_interactive for field in fields):
            raise SchemaError(SchemaErrorKind.EMPTY_SCHEMA, "Schema has no interactive fields")

        model = cls(fields, schema_id=schema_id or DEFAULT_SCHEMA_ID)
        logger.debug(
            f"Loaded schema '{model.schema_id}': {len(fields)} fields, "
            f"{len(model.interactive_fields)} interactive"
        )
        return model

    @property
    def schema_id(self) -> str:
        return self._schema_id

    @property
    def fields(self) -> Tuple[FieldDefinition, ...]:
        return self._fields

    @property
    def interactive_fields(self) -> Tuple[FieldDefinition, ...]:
        """Fields that accept a submitted value, in schema order."""
        return self._interactive

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(f.id for f in self._fields)

    def get(self, field_id: str, default: Optional[FieldDefinition] = None) -> Optional[FieldDefinition]:
        return self._by_id.get(field_id, default)

    def __getitem__(self, field_id: str) -> FieldDefinition:
        return self._by_id[field_id]

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._by_id

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaModel):
            return NotImplemented
        return self._schema_id == other._schema_id and self._fields == other._fields

    def __hash__(self) -> int:
        return hash((self._schema_id, self._fields))

    def __repr__(self) -> str:
        return f"SchemaModel(schema_id={self._schema_id!r}, fields={list(self.field_ids)!r})"
