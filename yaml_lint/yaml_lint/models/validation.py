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

"""Value types passed between input resolution, parsing and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass(frozen=True)
class ValidationInput:
    """One unit of content to check, with the path it came from (if any)."""

    content: bytes
    source_label: Optional[str] = None


@dataclass(frozen=True)
class ParseSuccess:
    documents: List[Any] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    line_number: int  # 1-based, may point outside the content
    raw_message: str

    @property
    def ok(self) -> bool:
        return False


ParseOutcome = Union[ParseSuccess, ParseFailure]
