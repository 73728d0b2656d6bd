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

"""Custom exceptions for the YAML syntax linter."""

from typing import Optional


class YamlLintError(Exception):
    """Base exception for yaml-lint related errors."""
    pass


class UsageError(YamlLintError):
    """Exception raised when the command is invoked without usable input."""
    pass


class UnreadablePathError(YamlLintError):
    """Exception raised when a file or directory argument cannot be read."""

    def __init__(self, path: str, reason: str = "is not readable"):
        super().__init__(f'File or directory "{path}" {reason}')
        self.path = path


class ResourceNotFoundError(YamlLintError):
    """Exception raised when a resource alias cannot be resolved to a directory."""

    def __init__(self, alias: str, reason: Optional[str] = None):
        message = f'Unable to find resource "{alias}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.alias = alias


class YamlSyntaxError(YamlLintError):
    """Exception raised by the parser adapter when content is not valid YAML.

    Carries the 1-based line of the failure and the parser message stripped of
    its location suffix.
    """

    def __init__(self, line_number: int, raw_message: str, source_label: Optional[str] = None):
        location = f" in {source_label}" if source_label else ""
        super().__init__(f"{raw_message}{location} at line {line_number}")
        self.line_number = line_number
        self.raw_message = raw_message
        self.source_label = source_label
