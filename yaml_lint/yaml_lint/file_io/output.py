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

"""Line-oriented output sinks with semantic styles.

The linter writes through the Output interface so the same rendering code can
target a terminal (ConsoleOutput) or memory (BufferedOutput).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

from rich.console import Console
from rich.text import Text

STYLE_SUCCESS = "success"
STYLE_ERROR = "error"

# rich style definitions for the semantic styles
CONSOLE_STYLES = {
    STYLE_SUCCESS: "green",
    STYLE_ERROR: "white on red",
}


class Output(ABC):
    """Destination for rendered lint output."""

    @abstractmethod
    def write(self, text: str, style: Optional[str] = None) -> None:
        """Write text without ending the current line."""

    @abstractmethod
    def writeln(self, text: str = "", style: Optional[str] = None) -> None:
        """Write text and end the current line."""


class ConsoleOutput(Output):
    """Output backed by a rich Console."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        ansi: Optional[bool] = None,
        console: Optional[Console] = None,
    ):
        """Initialize console output.

        Args:
            stream: Stream to write to (default: stdout)
            ansi: True forces colours, False disables them, None auto-detects
            console: Preconfigured Console, overrides stream and ansi
        """
        if console is None:
            options = {}
            if ansi is True:
                options.update(force_terminal=True, color_system="standard", no_color=False)
            elif ansi is False:
                options["color_system"] = None
            console = Console(
                file=stream,
                highlight=False,
                markup=False,
                emoji=False,
                soft_wrap=True,
                **options,
            )
        self.console = console

    def _text(self, text: str, style: Optional[str]) -> Text:
        return Text(text, style=CONSOLE_STYLES.get(style, "") if style else "")

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(self._text(text, style), end="")

    def writeln(self, text: str = "", style: Optional[str] = None) -> None:
        self.console.print(self._text(text, style))


class BufferedOutput(Output):
    """In-memory output that keeps both plain text and style segments."""

    def __init__(self):
        self.styled_lines: List[List[Tuple[str, Optional[str]]]] = []
        self._current: List[Tuple[str, Optional[str]]] = []

    def write(self, text: str, style: Optional[str] = None) -> None:
        if text:
            self._current.append((text, style))

    def writeln(self, text: str = "", style: Optional[str] = None) -> None:
        self.write(text, style)
        self.styled_lines.append(self._current)
        self._current = []

    @property
    def lines(self) -> List[str]:
        """Completed lines as plain text."""
        return ["".join(segment for segment, _ in line) for line in self.styled_lines]

    def getvalue(self) -> str:
        text = "".join(line + "\n" for line in self.lines)
        return text + "".join(segment for segment, _ in self._current)
