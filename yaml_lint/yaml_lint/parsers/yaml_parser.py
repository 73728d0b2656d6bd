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

"""YAML syntax parser built on PyYAML's scanner and parser stages."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Union

import yaml
from yaml.composer import Composer
from yaml.constructor import SafeConstructor
from yaml.error import MarkedYAMLError
from yaml.parser import Parser
from yaml.reader import ReaderError
from yaml.resolver import Resolver
from yaml.tokens import Token

from ..exceptions import YamlSyntaxError
from ..models import ParseFailure, ParseOutcome, ParseSuccess

logger = logging.getLogger(__name__)

Content = Union[bytes, str]


class SyntaxParser(ABC):
    """Two-stage parser contract: tokenize the content, then parse the tokens.

    Both stages raise YamlSyntaxError on malformed input.
    """

    @abstractmethod
    def tokenize(self, content: Content, source_label: Optional[str] = None) -> Sequence[Any]:
        pass

    @abstractmethod
    def parse(self, tokens: Sequence[Any]) -> Any:
        pass


class _TokenReplay:
    """Scanner stand-in that hands out an already scanned token list."""

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = list(tokens)
        self._index = 0

    def check_token(self, *choices) -> bool:
        if self._index >= len(self._tokens):
            return False
        if not choices:
            return True
        return isinstance(self._tokens[self._index], choices)

    def peek_token(self) -> Optional[Token]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def get_token(self) -> Optional[Token]:
        if self._index < len(self._tokens):
            token = self._tokens[self._index]
            self._index += 1
            return token
        return None


class _TokenLoader(_TokenReplay, Parser, Composer, SafeConstructor, Resolver):

    def __init__(self, tokens: Sequence[Token]):
        _TokenReplay.__init__(self, tokens)
        Parser.__init__(self)
        Composer.__init__(self)
        SafeConstructor.__init__(self)
        Resolver.__init__(self)


def _display_text(content: Content) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def _mark_name(exc: yaml.YAMLError) -> Optional[str]:
    # PyYAML names unnamed streams "<unicode string>" or "<byte string>"
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    name = getattr(mark, "name", None)
    if name and not name.startswith("<"):
        return name
    return None


def _to_syntax_error(
    exc: yaml.YAMLError, content: Content, source_label: Optional[str]
) -> YamlSyntaxError:
    """Translate a PyYAML error into a YamlSyntaxError with a 1-based line."""
    if isinstance(exc, MarkedYAMLError):
        mark = exc.problem_mark if exc.problem_mark is not None else exc.context_mark
        line_number = mark.line + 1 if mark is not None else -1
        parts = [part for part in (exc.context, exc.problem, exc.note) if part]
        raw_message = ", ".join(parts) if parts else str(exc)
    elif isinstance(exc, ReaderError):
        # PyYAML reports reader failures by character offset only
        line_number = _display_text(content)[:max(0, exc.position)].count("\n") + 1
        raw_message = str(exc).split("\n", 1)[0]
    else:
        line_number = -1
        raw_message = str(exc)

    return YamlSyntaxError(line_number, raw_message, source_label)


class YamlParser(SyntaxParser):
    """YAML parser exposing the scanner and the parser as separate stages."""

    def tokenize(self, content: Content, source_label: Optional[str] = None) -> List[Token]:
        """Scan the whole stream into a token list.

        Args:
            content: Raw YAML bytes (encoding is detected by PyYAML) or text
            source_label: Name reported in token marks, usually the file path

        Returns:
            List of PyYAML tokens, from StreamStartToken to StreamEndToken

        Raises:
            YamlSyntaxError: If the stream cannot be decoded or scanned
        """
        loader = None
        try:
            loader = yaml.SafeLoader(content)
            if source_label:
                loader.name = source_label
            tokens = []
            while loader.check_token():
                tokens.append(loader.get_token())
            logger.debug("Scanned %d tokens from %s", len(tokens), source_label or "<stdin>")
            return tokens
        except yaml.YAMLError as exc:
            raise _to_syntax_error(exc, content, source_label) from exc
        finally:
            if loader is not None:
                loader.dispose()

    def parse(self, tokens: Sequence[Token]) -> List[Any]:
        """Build the documents described by a token list.

        Args:
            tokens: Tokens produced by tokenize()

        Returns:
            One constructed value per YAML document in the stream

        Raises:
            YamlSyntaxError: If the token sequence is not a valid YAML stream
        """
        loader = _TokenLoader(tokens)
        try:
            documents = []
            while loader.check_data():
                documents.append(loader.get_data())
            return documents
        except yaml.YAMLError as exc:
            raise _to_syntax_error(exc, "", _mark_name(exc)) from exc
        finally:
            loader.dispose()


def check_syntax(
    parser: SyntaxParser, content: Content, source_label: Optional[str] = None
) -> ParseOutcome:
    """Run both parser stages and report the result as a ParseOutcome.

    Only YamlSyntaxError is turned into a ParseFailure; anything else raised by
    the parser propagates to the caller.
    """
    try:
        documents = parser.parse(parser.tokenize(content, source_label))
    except YamlSyntaxError as exc:
        return ParseFailure(line_number=exc.line_number, raw_message=exc.raw_message)

    return ParseSuccess(documents=documents if isinstance(documents, list) else [documents])


# Global parser instance
yaml_parser = YamlParser()
