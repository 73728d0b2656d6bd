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

"""Configuration management for the YAML linter."""

import os
import logging
from dataclasses import dataclass, field
from typing import List

from .utils.logging_utils import configure_stream_logging


def _split_paths(value: str) -> List[str]:
    return [p for p in value.split(os.pathsep) if p]


@dataclass
class LintConfig:
    """Configuration class for a lint run."""
    log_level: str = "WARNING"
    file_pattern: str = "*.yml"

    # prefixes searched when resolving @resource aliases
    resource_prefixes: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> 'LintConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('YAML_LINT_LOG_LEVEL', 'WARNING'),
            file_pattern=os.getenv('YAML_LINT_FILE_PATTERN', '*.yml'),
            resource_prefixes=(
                _split_paths(os.getenv('YAML_LINT_RESOURCE_PATH', ''))
                + _split_paths(os.getenv('AMENT_PREFIX_PATH', ''))
            ),
        )

    def set_logging(self, verbosity: int = 0) -> logging.Logger:
        """Setup logging based on configuration.

        Each verbosity step lowers the threshold by one level, down to DEBUG.
        """
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        if verbosity:
            level = max(logging.DEBUG, min(level, logging.WARNING) - 10 * verbosity)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_stream_logging(level=level, formatter=formatter)

        return logging.getLogger('yaml_lint')


# Global configuration instance
lint_config = LintConfig.from_env()
