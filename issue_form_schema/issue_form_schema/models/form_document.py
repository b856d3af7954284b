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

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from .schema_model import SchemaModel


@dataclass(frozen=True)
class FormDocument:
    """A parsed issue form: its field schema plus untouched top-level metadata.

    ``metadata`` holds every top-level key except ``body`` (e.g. ``name``,
    ``labels``, ``description``) for the issue tracker to consume.
    """

    schema: SchemaModel
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    file_path: Optional[Path] = None

    def __post_init__(self):
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def name(self) -> Optional[str]:
        return self.metadata.get("name")

    @property
    def description(self) -> Optional[str]:
        return self.metadata.get("description")

    @property
    def labels(self) -> List[str]:
        labels = self.metadata.get("labels")
        if labels is None:
            return []
        # issue forms allow either a list or a comma separated string
        if isinstance(labels, str):
            return [label.strip() for label in labels.split(",") if label.strip()]
        return [str(label) for label in labels]
