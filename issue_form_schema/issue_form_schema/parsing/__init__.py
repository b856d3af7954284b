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

"""Loading issue form documents from YAML."""

from .source_location import SourceLocation, format_source, lookup_source
from .yaml_parser import YamlParser, yaml_parser
from .form_parser import check_document_structure, load_form_file, load_form_string, parse_form_document

__all__ = [
    "SourceLocation",
    "YamlParser",
    "check_document_structure",
    "format_source",
    "load_form_file",
    "load_form_string",
    "lookup_source",
    "parse_form_document",
    "yaml_parser",
]
