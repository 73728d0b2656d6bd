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

"""Resolve @resource aliases to directories."""

import importlib.util
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..exceptions import ResourceNotFoundError
from ..lint_config import lint_config

logger = logging.getLogger(__name__)


class ResourceLocator(ABC):
    @abstractmethod
    def locate(self, alias: str) -> Path:
        """Return the directory an alias points to.

        Raises:
            ResourceNotFoundError: If the alias cannot be resolved
        """


class PackageResourceLocator(ResourceLocator):
    """Locate `@<package>[/<sub/path>]` aliases.

    A package is looked up under each prefix, first in the install layout
    `<prefix>/share/<package>`, then as `<prefix>/<package>`, and finally as
    an importable Python package.
    """

    def __init__(self, prefixes: Optional[List[str]] = None):
        if prefixes is None:
            prefixes = lint_config.resource_prefixes
        self.prefixes = [Path(p) for p in prefixes]

    def locate(self, alias: str) -> Path:
        if not alias.startswith("@"):
            raise ResourceNotFoundError(alias, 'aliases must start with "@"')

        name, _, sub_path = alias[1:].partition("/")
        if not name:
            raise ResourceNotFoundError(alias, "missing package name")

        root = self._find_package_root(name)
        if root is None:
            raise ResourceNotFoundError(alias, f'package "{name}" not found')

        directory = root / sub_path if sub_path else root
        if not directory.is_dir():
            raise ResourceNotFoundError(alias, f'"{directory}" is not a directory')

        logger.debug("Resolved %s to %s", alias, directory)
        return directory

    def _find_package_root(self, name: str) -> Optional[Path]:
        for prefix in self.prefixes:
            for candidate in (prefix / "share" / name, prefix / name):
                if candidate.is_dir():
                    return candidate

        return self._find_python_package(name)

    @staticmethod
    def _find_python_package(name: str) -> Optional[Path]:
        try:
            spec = importlib.util.find_spec(name)
        except (ImportError, ValueError):
            return None

        if spec is None or not spec.submodule_search_locations:
            return None
        return Path(list(spec.submodule_search_locations)[0])
