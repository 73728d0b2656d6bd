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

"""Source context extraction and KO block rendering."""

from typing import List, Optional, Tuple, Union

from ..file_io.output import STYLE_ERROR, Output
from ..models import ParseFailure

CONTEXT_RADIUS = 3


def _as_text(content: Union[bytes, str]) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def get_context(
    content: Union[bytes, str], line_number: int, radius: int = CONTEXT_RADIUS
) -> List[Tuple[int, str]]:
    """Return the (line number, text) pairs around a failing line.

    Lines are split on "\\n" only, so a carriage return stays part of the
    line text. The window is clipped to the content, and is empty when
    line_number points well outside it.

    Args:
        content: Full source that failed to parse
        line_number: 1-based line reported by the parser
        radius: Lines shown before and after the failing line

    Returns:
        Consecutive 1-based line numbers with their text
    """
    lines = _as_text(content).split("\n")

    position = max(0, line_number - radius)
    end = min(len(lines), line_number - 1 + radius)

    return [(index + 1, lines[index]) for index in range(position, end)]


def render_failure(
    output: Output,
    content: Union[bytes, str],
    failure: ParseFailure,
    source_label: Optional[str] = None,
    radius: int = CONTEXT_RADIUS,
) -> None:
    """Write the KO header and the annotated source window for a failure."""
    line_number = failure.line_number

    output.write("KO", STYLE_ERROR)
    if source_label:
        output.writeln(f" in {source_label} (line {line_number})")
    else:
        output.writeln(f" (line {line_number})")

    for number, code in get_context(content, line_number, radius):
        # the parser message is only shown when its line is inside the window
        is_failing_line = number == line_number
        if is_failing_line:
            output.write(">>", STYLE_ERROR)
        else:
            output.write("  ")
        output.writeln(f" {number:<6} {code}")
        if is_failing_line:
            output.write(f">> {failure.raw_message}", STYLE_ERROR)
            output.writeln(" ")
