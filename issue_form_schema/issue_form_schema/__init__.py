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

"""Form schema engine for declarative issue report forms.

Loads an issue form (a ``body`` list of ``input``, ``textarea`` and
``markdown`` blocks) into an immutable SchemaModel and validates
submissions against it.
"""

__version__ = "0.1.0"

from .exceptions import (
    DocumentError,
    FieldError,
    FieldErrorKind,
    FormSchemaEngineError,
    SchemaError,
    SchemaErrorKind,
    ValidationErrors,
)
from .models import FieldDefinition, FieldKind, FormDocument, SchemaModel
from .parsing import load_form_file, load_form_string, parse_form_document
from .validation import SubmissionValidator, ValidatedSubmission, validate

__all__ = [
    "DocumentError",
    "FieldDefinition",
    "FieldError",
    "FieldErrorKind",
    "FieldKind",
    "FormDocument",
    "FormSchemaEngineError",
    "SchemaError",
    "SchemaErrorKind",
    "SchemaModel",
    "SubmissionValidator",
    "ValidatedSubmission",
    "ValidationErrors",
    "load_form_file",
    "load_form_string",
    "parse_form_document",
    "validate",
]
