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

"""Aggregated result of a lint run."""

from typing import List, Optional


class LintSummary:
    """Container for the outcome of all inputs checked in one invocation."""

    def __init__(self):
        self.checked = 0
        self.total_failures = 0
        self.failed_sources: List[Optional[str]] = []

    def add_success(self):
        self.checked += 1

    def add_failure(self, source_label: Optional[str] = None):
        """Record one input that failed to parse.

        Args:
            source_label: Path of the failing input, None for stdin
        """
        self.checked += 1
        self.total_failures += 1
        self.failed_sources.append(source_label)

    @property
    def exit_code(self) -> int:
        return 1 if self.total_failures > 0 else 0
