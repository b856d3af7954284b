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

"""Custom exceptions for the issue form schema engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class SchemaErrorKind(str, Enum):
    """Reasons a form schema is rejected at load time."""

    DUPLICATE_FIELD = "duplicate-field"
    MISSING_LABEL = "missing-label"
    EMPTY_SCHEMA = "empty-schema"
    REQUIRED_NOTE = "required-note"
    UNKNOWN_KIND = "unknown-kind"
    MISSING_ID = "missing-id"
    INVALID_REQUIRED = "invalid-required"


class FieldErrorKind(str, Enum):
    """Reasons a single submitted value is rejected."""

    MISSING_REQUIRED = "missing-required"
    TOO_LONG = "too-long"
    INVALID_TYPE = "invalid-type"


@dataclass(frozen=True)
class FieldError:
    """A problem with one field of a submission."""

    id: str
    kind: FieldErrorKind
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.id}: {self.message}"
        return f"{self.id}: {self.kind.value}"


class FormSchemaEngineError(Exception):
    """Base exception for issue form schema errors."""
    pass


class SchemaError(FormSchemaEngineError):
    """Exception raised when a field schema is malformed."""

    def __init__(self, kind: SchemaErrorKind, message: str, field_id: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.field_id = field_id


class DocumentError(FormSchemaEngineError):
    """Exception raised when a form source document cannot be read or has the wrong shape."""
    pass


class ValidationErrors(FormSchemaEngineError):
    """Exception raised when a submission fails validation.

    Carries every offending field, in schema order, so callers can report
    all problems at once.
    """

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        details = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"Submission failed validation ({len(self.errors)} error(s)):\n{details}")

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(error.id for error in self.errors)
