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

from pathlib import Path

import pytest

from issue_form_schema import FieldKind, SchemaModel
from issue_form_schema.parsing import YamlParser


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def bug_report_path() -> Path:
    return FIXTURES_DIR / "bug_report.yml"


@pytest.fixture
def bug_report_schema() -> SchemaModel:
    return SchemaModel.load(
        [
            {"id": "intro", "kind": FieldKind.MARKDOWN_NOTE, "value": "Thanks for the report!"},
            {"id": "email", "kind": "short-text", "label": "Email Provider", "required": False},
            {"id": "what-happened", "kind": "long-text", "label": "What happened?", "required": True},
            {"id": "logs", "kind": "long-text", "label": "Relevant log output", "render": "shell"},
        ],
        schema_id="bug-report",
    )


@pytest.fixture
def uncached_parser() -> YamlParser:
    return YamlParser(cache_enabled=False)
