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

"""Syntax linter: validates YAML inputs and renders OK/KO reports."""

import logging
from typing import Iterable, Optional, Union

from ..file_io.output import STYLE_SUCCESS, Output
from ..models import ValidationInput
from ..parsers.yaml_parser import SyntaxParser, check_syntax
from .context import CONTEXT_RADIUS, render_failure
from .report import LintSummary

logger = logging.getLogger(__name__)


class SyntaxLinter:
    """Validate YAML content with an injected parser and report to an output.

    `errors` counts the inputs that failed since the linter was created.
    """

    def __init__(self, parser: SyntaxParser, output: Output, context_radius: int = CONTEXT_RADIUS):
        self.parser = parser
        self.output = output
        self.context_radius = context_radius
        self.errors = 0

    def validate(self, content: Union[bytes, str], source_label: Optional[str] = None) -> bool:
        """Validate one piece of content.

        Args:
            content: YAML source
            source_label: Path shown in the report, None for stdin

        Returns:
            True when the content parsed, False on a syntax error
        """
        outcome = check_syntax(self.parser, content, source_label)

        if outcome.ok:
            self.output.write("OK", STYLE_SUCCESS)
            self.output.writeln(f" in {source_label}" if source_label else "")
            return True

        logger.debug(
            "Syntax error in %s at line %d: %s",
            source_label or "<stdin>", outcome.line_number, outcome.raw_message,
        )
        render_failure(self.output, content, outcome, source_label, self.context_radius)
        self.errors += 1
        return False

    def lint(self, inputs: Iterable[ValidationInput]) -> LintSummary:
        """Validate every input in order and aggregate the results."""
        summary = LintSummary()

        for item in inputs:
            if self.validate(item.content, item.source_label):
                summary.add_success()
            else:
                summary.add_failure(item.source_label)

        logger.info(
            "Checked %d input(s), %d with syntax errors", summary.checked, summary.total_failures
        )
        return summary
