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

import textwrap

import pytest

from issue_form_schema import (
    DocumentError,
    FieldKind,
    FormDocument,
    SchemaError,
    SchemaErrorKind,
    load_form_file,
    load_form_string,
    parse_form_document,
    validate,
)


def test_bug_report_form(bug_report_path, uncached_parser):
    document = load_form_file(bug_report_path, parser=uncached_parser)

    assert isinstance(document, FormDocument)
    assert document.name == "Bug Report"
    assert document.labels == ["bug"]
    assert document.description == "Create a bug report to help us improve."
    assert document.file_path == bug_report_path

    schema = document.schema
    assert schema.schema_id == "Bug Report"
    assert schema.field_ids == ("markdown-0", "email", "version", "what-happened", "logs")
    assert schema["markdown-0"].kind is FieldKind.MARKDOWN_NOTE
    assert schema["markdown-0"].value.startswith("Thanks for taking the time")
    assert schema["email"].kind is FieldKind.SHORT_TEXT
    assert schema["email"].placeholder == "ex. example.com"
    assert schema["what-happened"].required
    assert not schema["version"].required
    assert schema["logs"].kind is FieldKind.LONG_TEXT
    assert schema["logs"].render_mode == "shell"


def test_bug_report_submission(bug_report_path, uncached_parser):
    schema = load_form_file(bug_report_path, parser=uncached_parser).schema
    result = validate(schema, {"what-happened": "crash on startup"}, max_length=None)
    assert result.schema_id == "Bug Report"
    assert result.to_dict() == {"what-happened": "crash on startup"}


def test_metadata_passes_through_untouched():
    document = parse_form_document(
        {
            "name": "Feature",
            "labels": ["enhancement", "triage"],
            "assignees": ["octocat"],
            "x-custom": {"nested": [1, 2]},
            "body": [{"type": "input", "id": "summary", "attributes": {"label": "Summary"}}],
        }
    )
    assert dict(document.metadata) == {
        "name": "Feature",
        "labels": ["enhancement", "triage"],
        "assignees": ["octocat"],
        "x-custom": {"nested": [1, 2]},
    }
    assert document.labels == ["enhancement", "triage"]
    with pytest.raises(TypeError):
        document.metadata["name"] = "changed"


def test_schema_id_fallbacks(tmp_path):
    body = {"body": [{"type": "textarea", "id": "details", "attributes": {"label": "Details"}}]}
    assert parse_form_document(body).schema.schema_id == "form"
    assert parse_form_document(body, schema_id="custom").schema.schema_id == "custom"

    path = tmp_path / "feature_request.yml"
    path.write_text("body:\n  - type: input\n    id: a\n    attributes:\n      label: A\n", encoding="utf-8")
    assert load_form_file(path).schema.schema_id == "feature_request"


def test_comma_separated_labels():
    document = load_form_string(
        textwrap.dedent(
            """\
            name: Bug
            labels: "bug, needs-triage"
            body:
              - type: input
                id: summary
                attributes:
                  label: Summary
            """
        )
    )
    assert document.labels == ["bug", "needs-triage"]


def test_markdown_blocks_get_synthetic_ids():
    document = parse_form_document(
        {
            "body": [
                {"type": "markdown", "attributes": {"value": "Intro"}},
                {"type": "input", "id": "summary", "attributes": {"label": "Summary"}},
                {"type": "markdown", "attributes": {"value": "Outro"}},
            ]
        }
    )
    assert document.schema.field_ids == ("markdown-0", "summary", "markdown-2")


def test_duplicate_id_reports_location():
    content = textwrap.dedent(
        """\
        name: Dup
        body:
          - type: input
            id: email
            attributes:
              label: Email
          - type: input
            id: email
            attributes:
              label: Email again
        """
    )
    with pytest.raises(SchemaError) as exc_info:
        load_form_string(content)
    assert exc_info.value.kind is SchemaErrorKind.DUPLICATE_FIELD
    assert exc_info.value.field_id == "email"
    assert "line=7" in str(exc_info.value)
    assert "yaml_path=/body/1" in str(exc_info.value)


def test_missing_label_reports_file_location(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text(
        textwrap.dedent(
            """\
            body:
              - type: markdown
                attributes:
                  value: hi
              - type: textarea
                id: details
            """
        ),
        encoding="utf-8",
    )
    with pytest.raises(SchemaError) as exc_info:
        load_form_file(path)
    assert exc_info.value.kind is SchemaErrorKind.MISSING_LABEL
    assert f"source= {path}:5:" in str(exc_info.value)


def test_empty_body_is_empty_schema():
    with pytest.raises(SchemaError) as exc_info:
        parse_form_document({"name": "Nothing", "body": []})
    assert exc_info.value.kind is SchemaErrorKind.EMPTY_SCHEMA


def test_required_markdown_rejected():
    with pytest.raises(SchemaError) as exc_info:
        parse_form_document(
            {
                "body": [
                    {"type": "markdown", "attributes": {"value": "x"}, "validations": {"required": True}},
                    {"type": "input", "id": "a", "attributes": {"label": "A"}},
                ]
            }
        )
    assert exc_info.value.kind is SchemaErrorKind.REQUIRED_NOTE
    assert "yaml_path=/body/0" in str(exc_info.value)


def test_interactive_block_without_id_rejected():
    with pytest.raises(SchemaError) as exc_info:
        parse_form_document({"body": [{"type": "input", "attributes": {"label": "A"}}]})
    assert exc_info.value.kind is SchemaErrorKind.MISSING_ID


def test_unknown_block_type_is_document_error():
    content = textwrap.dedent(
        """\
        body:
          - type: dropdown
            id: choice
            attributes:
              label: Pick one
        """
    )
    with pytest.raises(DocumentError) as exc_info:
        load_form_string(content)
    assert "dropdown" in str(exc_info.value)
    assert "yaml_path=/body/0/type" in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        "name: No body\n",
        "",
        "body: not-a-list\n",
        "body:\n  - id: missing-type\n",
        "body:\n  - type: input\n    id: a\n    validations:\n      required: 'yes'\n",
    ],
)
def test_wrong_shape_is_document_error(content):
    with pytest.raises(DocumentError):
        load_form_string(content)


def test_root_must_be_mapping():
    with pytest.raises(DocumentError) as exc_info:
        load_form_string("- a\n- b\n")
    assert "root must be a mapping" in str(exc_info.value)


def test_malformed_yaml_is_document_error():
    with pytest.raises(DocumentError):
        load_form_string("body: [\n")


def test_missing_file_is_document_error(tmp_path, uncached_parser):
    with pytest.raises(DocumentError):
        load_form_file(tmp_path / "missing.yml", parser=uncached_parser)


def test_non_string_top_level_keys_pass_through():
    content = textwrap.dedent(
        """\
        name: Workflow
        on: push
        2: two
        body:
          - type: input
            id: a
            attributes:
              label: A
        """
    )
    document = load_form_string(content)
    assert document.metadata[True] == "push"
    assert document.metadata[2] == "two"
    assert document.name == "Workflow"
    assert document.schema.field_ids == ("a",)
