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

"""Logging setup for applications embedding the engine.

Handlers are attached to the ``issue_form_schema`` package logger only, so
the host application's root logging configuration is left alone.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "issue_form_schema"


class _EngineStreamHandler(logging.StreamHandler):
    """Stream handler owned by the engine; replaced on reconfiguration."""


def configure_engine_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Send engine records below *stderr_level* to stdout and the rest to stderr.

    Calling this again replaces the handlers installed by a previous call;
    handlers added by the host application are kept.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, _EngineStreamHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    formatter = formatter or logging.Formatter("%(name)s - %(levelname)s - %(message)s")
    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = _EngineStreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(lambda record: record.levelno < stderr_level)
    stderr_handler = _EngineStreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
