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

"""YAML loader for issue form documents, with caching and source maps."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Union

from ..config import engine_config
from ..exceptions import DocumentError
from .source_location import SourceMap

logger = logging.getLogger(__name__)


class YamlParser:
    """YAML parser with optional caching of file contents."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to cache loaded files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else engine_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def build_source_map(cls, content: str) -> SourceMap:
        """Map JSON-pointer paths (e.g. ``/body/2/id``) to 1-based line/column.

        Built from the composed node tree so the data returned by safe_load
        keeps its plain shape.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # syntax errors are reported by safe_load
            return source_map

        if root is None:
            return source_map

        def _walk(node, path: str) -> None:
            mark = node.start_mark
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def load_config_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML file and return (data, source_map).

        Raises:
            DocumentError: If the file is missing, unreadable or not valid YAML
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentError(f"Form file not found: {path}")

        if not path.is_file():
            raise DocumentError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading form from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading form file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentError(f"Failed to read form file {path}: {exc}") from exc

        try:
            loaded = self._parse(content)
        except DocumentError as exc:
            raise DocumentError(f"Failed to parse YAML file {path}: {exc}") from exc

        if self.cache_enabled:
            self._cache[path] = loaded
        return loaded

    def load_config_from_string_with_source(self, content: str) -> Tuple[Any, SourceMap]:
        """Load YAML from string content and return (data, source_map)."""
        return self._parse(content)

    def load_config(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML content; an empty document becomes an empty dict

        Raises:
            DocumentError: If file cannot be read or parsed
        """
        data, _ = self.load_config_with_source(file_path)
        return data

    def load_config_from_string(self, content: str) -> Any:
        """Load YAML from string content.

        Raises:
            DocumentError: If content cannot be parsed
        """
        data, _ = self._parse(content)
        return data

    def clear_cache(self):
        """Clear the file cache."""
        self._cache.clear()
        logger.debug("Form cache cleared")

    def _parse(self, content: str) -> Tuple[Any, SourceMap]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentError(f"Failed to parse YAML content: {exc}") from exc
        if data is None:
            data = {}
        return data, self.build_source_map(content)


# Global parser instance
yaml_parser = YamlParser()
