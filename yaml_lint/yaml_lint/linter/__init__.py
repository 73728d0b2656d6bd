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

"""Linter package for YAML syntax validation."""

from typing import Iterable, Optional

from ..file_io.output import ConsoleOutput, Output
from ..models import ValidationInput
from ..parsers.yaml_parser import SyntaxParser, yaml_parser
from .report import LintSummary
from .syntax_linter import SyntaxLinter

__all__ = ['lint_inputs', 'LintSummary', 'SyntaxLinter']


def lint_inputs(
    inputs: Iterable[ValidationInput],
    parser: Optional[SyntaxParser] = None,
    output: Optional[Output] = None,
) -> LintSummary:
    """Lint a sequence of YAML inputs.
    
    Args:
        inputs: Inputs to validate, consumed in order
        parser: Parser to use (default: the PyYAML based parser)
        output: Where to write the report (default: stdout)
        
    Returns:
        LintSummary for the whole sequence
    """
    linter = SyntaxLinter(
        parser if parser is not None else yaml_parser,
        output if output is not None else ConsoleOutput(),
    )
    return linter.lint(inputs)
