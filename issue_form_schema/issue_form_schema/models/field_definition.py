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

"""Field definitions for issue form schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from ..exceptions import SchemaError, SchemaErrorKind


class FieldKind(str, Enum):
    """Kind of a form field. Determines the expected shape of its value."""

    SHORT_TEXT = "short-text"
    LONG_TEXT = "long-text"
    MARKDOWN_NOTE = "markdown-note"

    @property
    def is_interactive(self) -> bool:
        return self is not FieldKind.MARKDOWN_NOTE

    @classmethod
    def from_form_type(cls, form_type: str) -> "FieldKind":
        """Map an issue form block ``type`` (input, textarea, markdown) to a kind."""
        try:
            return _FORM_TYPES[form_type]
        except KeyError:
            raise SchemaError(
                SchemaErrorKind.UNKNOWN_KIND,
                f"Unknown form block type: '{form_type}'. Valid types: {sorted(_FORM_TYPES)}",
            ) from None

    @classmethod
    def coerce(cls, value: Union["FieldKind", str]) -> "FieldKind":
        """Accept a FieldKind, its value string, or an issue form type name."""
        if isinstance(value, FieldKind):
            return value
        if isinstance(value, str):
            for kind in cls:
                if kind.value == value:
                    return kind
            if value in _FORM_TYPES:
                return _FORM_TYPES[value]
        valid = [kind.value for kind in cls] + sorted(_FORM_TYPES)
        raise SchemaError(SchemaErrorKind.UNKNOWN_KIND, f"Invalid field kind: {value!r}. Valid kinds: {valid}")


_FORM_TYPES = {
    "input": FieldKind.SHORT_TEXT,
    "textarea": FieldKind.LONG_TEXT,
    "markdown": FieldKind.MARKDOWN_NOTE,
}


@dataclass(frozen=True)
class FieldDefinition:
    """One input slot of a form.

    ``render_mode`` and ``value`` are display hints for an external renderer
    and are carried through without interpretation.
    """

    id: str
    kind: FieldKind
    label: Optional[str] = None
    description: Optional[str] = None
    placeholder: Optional[str] = None
    required: bool = False
    render_mode: Optional[str] = None
    value: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise SchemaError(SchemaErrorKind.MISSING_ID, f"Field id must be a non-empty string, got: {self.id!r}")
        object.__setattr__(self, "kind", FieldKind.coerce(self.kind))
        if not isinstance(self.required, bool):
            raise SchemaError(
                SchemaErrorKind.INVALID_REQUIRED,
                f"Field '{self.id}' has invalid required flag: expected bool, got {type(self.required).__name__}",
                field_id=self.id,
            )

        if not self.kind.is_interactive and self.required:
            raise SchemaError(
                SchemaErrorKind.REQUIRED_NOTE,
                f"Field '{self.id}' is a {self.kind.value} and cannot be required",
                field_id=self.id,
            )

    @property
    def is_interactive(self) -> bool:
        return self.kind.is_interactive

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldDefinition":
        """Build a definition from a plain mapping.

        ``render`` is accepted as an alias of ``render_mode``.
        """
        if "kind" not in data:
            raise SchemaError(
                SchemaErrorKind.UNKNOWN_KIND,
                f"Field '{data.get('id')}' has no kind",
                field_id=data.get("id"),
            )
        render_mode = data.get("render_mode", data.get("render"))
        required = data.get("required")
        return cls(
            id=data.get("id"),
            kind=data["kind"],
            label=data.get("label"),
            description=data.get("description"),
            placeholder=data.get("placeholder"),
            required=False if required is None else required,
            render_mode=render_mode,
            value=data.get("value"),
        )
