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

"""Configuration management for the issue form schema engine."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_engine_logging

logger = logging.getLogger(__name__)

MAX_VALUE_LENGTH_ENV = 'ISSUE_FORM_MAX_VALUE_LENGTH'


def _max_value_length(raw: Optional[str]) -> Optional[int]:
    """Parse the value length limit; invalid settings fall back to unconstrained."""
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {MAX_VALUE_LENGTH_ENV}={raw!r}: not an integer")
        return None
    if value < 0:
        logger.warning(f"Ignoring {MAX_VALUE_LENGTH_ENV}={raw!r}: must not be negative")
        return None
    return value


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


@dataclass
class EngineConfig:
    """Configuration class for the issue form schema engine."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = False

    # maximum length of a submitted value; None means unconstrained
    max_value_length: Optional[int] = None

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('ISSUE_FORM_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('ISSUE_FORM_PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv('ISSUE_FORM_CACHE_ENABLED', 'true').lower() == 'true',
            max_value_length=_max_value_length(os.getenv(MAX_VALUE_LENGTH_ENV)),
        )

    def set_logging(self, propagate: bool = False) -> logging.Logger:
        """Attach stdout/stderr handlers to the package logger.

        Args:
            propagate: Also pass engine records on to the host's root handlers
        """
        return configure_engine_logging(
            level=_level(self.log_level, logging.INFO),
            stderr_level=_level(self.print_level, logging.ERROR),
            propagate=propagate,
        )


# Global configuration instance
engine_config = EngineConfig.from_env()
