"""Shared test fixtures and configuration."""

import logging
import sys
from pathlib import Path

# Add yaml_lint/ to Python path so `from yaml_lint.xxx` imports work without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "yaml_lint"))

import pytest

from yaml_lint.file_io.output import BufferedOutput
from yaml_lint.linter.syntax_linter import SyntaxLinter
from yaml_lint.parsers.yaml_parser import YamlParser

VALID_YAML = "a: 1\nb: 2\n"
INVALID_YAML = "a: 1\nb: [1,2\n"


@pytest.fixture
def output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def parser() -> YamlParser:
    return YamlParser()


@pytest.fixture
def linter(parser: YamlParser, output: BufferedOutput) -> SyntaxLinter:
    return SyntaxLinter(parser, output)


@pytest.fixture
def yaml_tree(tmp_path: Path) -> Path:
    """Directory with one valid and one invalid *.yml file plus noise."""
    root = tmp_path / "config"
    root.mkdir()
    (root / "good.yml").write_text(VALID_YAML)
    (root / "bad.yml").write_text(INVALID_YAML)
    (root / "ignored.yaml").write_text(INVALID_YAML)
    (root / "notes.txt").write_text("not yaml: [")
    return root


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
