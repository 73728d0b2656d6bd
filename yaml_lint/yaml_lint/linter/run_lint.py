#!/usr/bin/env python3
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

"""CLI entry point for linting YAML files."""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional, TextIO

from ..exceptions import YamlLintError
from ..file_io.output import ConsoleOutput
from ..lint_config import lint_config
from ..parsers.yaml_parser import yaml_parser
from ..resolvers import resolve_inputs
from .syntax_linter import SyntaxLinter

logger = logging.getLogger(__name__)

HELP_EPILOG = """\
The command lints a yaml file and outputs to stdout the first encountered
syntax error.

  %(prog)s filename

The command gets the contents of filename and validates its syntax.

  %(prog)s dirname

The command finds all yaml files in dirname and validates the syntax of each
yaml file.

  %(prog)s @package/sub/dir

The command resolves the resource alias to a directory and validates every
yaml file in it.

  cat filename | %(prog)s

The command gets the yaml file contents from stdin and validates its syntax.
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='yaml-lint',
        description='Lints a yaml file and outputs encountered errors',
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'filename',
        nargs='?',
        default=None,
        help='File, directory or @resource alias to lint (default: read stdin)',
    )
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        '--ansi',
        dest='ansi',
        action='store_const',
        const=True,
        default=None,
        help='Force coloured output',
    )
    color.add_argument(
        '--no-ansi',
        dest='ansi',
        action='store_const',
        const=False,
        help='Disable coloured output',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Log progress to stderr (-vv for debug)',
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for the linter CLI.

    Returns:
        0 when every input is valid YAML, 1 otherwise
    """
    args = build_arg_parser().parse_args(argv)
    lint_config.set_logging(args.verbose)

    linter = SyntaxLinter(yaml_parser, ConsoleOutput(stream=stdout, ansi=args.ansi))

    try:
        summary = linter.lint(
            resolve_inputs(args.filename, stdin=stdin, pattern=lint_config.file_pattern)
        )
    except YamlLintError as exc:
        logger.debug("Aborting lint run", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return summary.exit_code


if __name__ == '__main__':
    sys.exit(main())
