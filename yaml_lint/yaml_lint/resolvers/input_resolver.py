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

"""Turn the command-line argument into the inputs to validate."""

import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, Union

from ..exceptions import UnreadablePathError, UsageError
from ..lint_config import lint_config
from ..models import ValidationInput
from .resource_locator import PackageResourceLocator, ResourceLocator

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024


def is_interactive_stream(stream) -> bool:
    """Tell whether a stream is attached to a terminal rather than a pipe or file."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        # closed or detached streams cannot be a live terminal
        return False


def read_stream(stream: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> bytes:
    """Read a stream to end-of-stream and return its bytes."""
    chunks = []
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        chunks.append(chunk.encode("utf-8") if isinstance(chunk, str) else chunk)
    return b"".join(chunks)


def find_yaml_files(directory: Union[str, Path], pattern: str) -> List[Path]:
    """Recursively find the regular files under `directory` matching `pattern`."""
    return sorted(path for path in Path(directory).rglob(pattern) if path.is_file())


def _resolve_paths(filename: str, locator: Optional[ResourceLocator], pattern: str) -> List[Path]:
    is_alias = filename.startswith("@")

    if not is_alias and not os.access(filename, os.R_OK):
        raise UnreadablePathError(filename)

    path = Path(filename)
    if path.is_file():
        return [path]
    if path.is_dir():
        return find_yaml_files(path, pattern)
    if not is_alias:
        raise UnreadablePathError(filename, "is neither a file nor a directory")

    if locator is None:
        locator = PackageResourceLocator()
    return find_yaml_files(locator.locate(filename), pattern)


def resolve_inputs(
    filename: Optional[str] = None,
    *,
    stdin: Optional[BinaryIO] = None,
    locator: Optional[ResourceLocator] = None,
    pattern: Optional[str] = None,
    is_interactive: Callable[[object], bool] = is_interactive_stream,
) -> Iterator[ValidationInput]:
    """Yield the inputs designated by `filename`.

    Args:
        filename: File, directory or @resource alias; None reads stdin
        stdin: Stream used when no filename is given (default: sys.stdin)
        locator: Resolver for @resource aliases
        pattern: File name pattern used in directories (default from config)
        is_interactive: Predicate telling whether stdin is a terminal

    Raises:
        UsageError: If no filename is given and stdin is a terminal
        UnreadablePathError: If the path cannot be read
        ResourceNotFoundError: If an alias cannot be resolved
    """
    if not filename:
        stream = stdin if stdin is not None else getattr(sys.stdin, "buffer", sys.stdin)
        if stream is None or is_interactive(stream):
            raise UsageError("Please provide a filename or pipe YAML content to stdin.")
        logger.debug("Reading YAML content from stdin")
        yield ValidationInput(read_stream(stream))
        return

    paths = _resolve_paths(filename, locator, pattern or lint_config.file_pattern)
    logger.info("Found %d file(s) to lint in %s", len(paths), filename)

    for path in paths:
        label = filename if path == Path(filename) else str(path)
        yield ValidationInput(path.read_bytes(), label)
