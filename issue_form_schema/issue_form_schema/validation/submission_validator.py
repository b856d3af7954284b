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

"""Validation of form submissions against a loaded SchemaModel."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..config import engine_config
from ..exceptions import FieldError, FieldErrorKind, ValidationErrors
from ..models.schema_model import SchemaModel

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class ValidatedSubmission:
    """An accepted submission: trimmed values keyed by field id, in schema order."""

    schema_id: str
    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not isinstance(self.values, MappingProxyType):
            object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, field_id: str) -> str:
        return self.values[field_id]

    def __contains__(self, field_id: object) -> bool:
        return field_id in self.values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedSubmission):
            return NotImplemented
        return self.schema_id == other.schema_id and dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash((self.schema_id, tuple(self.values.items())))

    def to_dict(self) -> Dict[str, str]:
        return dict(self.values)


class SubmissionValidator:
    """Checks submissions against a schema.

    Every interactive field is checked, even after a failure, so the
    returned error list is complete in a single pass.
    """

    def __init__(self, max_length: Any = _UNSET):
        """Initialize the validator.

        Args:
            max_length: Maximum length of a trimmed value. None means
                unconstrained. If omitted, uses the global engine config.
        """
        if max_length is _UNSET:
            max_length = engine_config.max_value_length
        if max_length is not None and (isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0):
            raise ValueError(f"max_length must be a non-negative integer or None, got: {max_length!r}")
        self.max_length: Optional[int] = max_length

    def validate(self, schema: SchemaModel, submission: Mapping[str, Any]) -> ValidatedSubmission:
        """Validate a submission.

        Args:
            schema: Loaded schema to validate against
            submission: Mapping of field id to raw value

        Returns:
            ValidatedSubmission with trimmed values for the fields present

        Raises:
            ValidationErrors: With every offending field, in schema order
        """
        errors: List[FieldError] = []
        values: Dict[str, str] = {}

        for definition in schema.interactive_fields:
            raw = submission.get(definition.id, _UNSET)

            if raw is _UNSET or raw is None:
                if definition.required:
                    errors.append(
                        FieldError(definition.id, FieldErrorKind.MISSING_REQUIRED, f"'{definition.label}' is required")
                    )
                continue

            if not isinstance(raw, str):
                errors.append(
                    FieldError(
                        definition.id,
                        FieldErrorKind.INVALID_TYPE,
                        f"Invalid type: expected str, got {type(raw).__name__}",
                    )
                )
                continue

            value = raw.strip()
            if definition.required and not value:
                errors.append(
                    FieldError(definition.id, FieldErrorKind.MISSING_REQUIRED, f"'{definition.label}' is required")
                )
                continue

            if self.max_length is not None and len(value) > self.max_length:
                errors.append(
                    FieldError(
                        definition.id,
                        FieldErrorKind.TOO_LONG,
                        f"Value is {len(value)} characters long, maximum is {self.max_length}",
                    )
                )
                continue

            values[definition.id] = value

        ignored = [key for key in submission if not self._is_interactive(schema, key)]
        if ignored:
            logger.debug(f"Ignoring undeclared submission keys for '{schema.schema_id}': {ignored}")

        if errors:
            logger.debug(f"Submission for '{schema.schema_id}' rejected with {len(errors)} error(s)")
            raise ValidationErrors(errors)

        return ValidatedSubmission(schema_id=schema.schema_id, values=values)

    @staticmethod
    def _is_interactive(schema: SchemaModel, field_id: Any) -> bool:
        definition = schema.get(field_id)
        return definition is not None and definition.is_interactive


def validate(schema: SchemaModel, submission: Mapping[str, Any], max_length: Any = _UNSET) -> ValidatedSubmission:
    """Validate a submission with a one-off SubmissionValidator."""
    return SubmissionValidator(max_length=max_length).validate(schema, submission)
