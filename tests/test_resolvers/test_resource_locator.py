"""Tests for @resource alias resolution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yaml_lint.exceptions import ResourceNotFoundError
from yaml_lint.resolvers import PackageResourceLocator


@pytest.fixture
def install_prefix(tmp_path: Path) -> Path:
    prefix = tmp_path / "install"
    (prefix / "share" / "demo_pkg" / "config").mkdir(parents=True)
    return prefix


class TestPackageResourceLocator:
    def test_share_layout(self, install_prefix: Path) -> None:
        locator = PackageResourceLocator(prefixes=[str(install_prefix)])
        assert locator.locate("@demo_pkg") == install_prefix / "share" / "demo_pkg"

    def test_sub_path(self, install_prefix: Path) -> None:
        locator = PackageResourceLocator(prefixes=[str(install_prefix)])
        assert locator.locate("@demo_pkg/config") == install_prefix / "share" / "demo_pkg" / "config"

    def test_plain_prefix_layout(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "other_pkg").mkdir(parents=True)
        locator = PackageResourceLocator(prefixes=[str(tmp_path / "src")])
        assert locator.locate("@other_pkg") == tmp_path / "src" / "other_pkg"

    def test_first_prefix_wins(self, tmp_path: Path, install_prefix: Path) -> None:
        (tmp_path / "overlay" / "share" / "demo_pkg").mkdir(parents=True)
        locator = PackageResourceLocator(prefixes=[str(tmp_path / "overlay"), str(install_prefix)])
        assert locator.locate("@demo_pkg") == tmp_path / "overlay" / "share" / "demo_pkg"

    def test_python_package_fallback(self) -> None:
        locator = PackageResourceLocator(prefixes=[])
        assert locator.locate("@json") == Path(json.__file__).parent

    def test_missing_sub_path(self, install_prefix: Path) -> None:
        locator = PackageResourceLocator(prefixes=[str(install_prefix)])
        with pytest.raises(ResourceNotFoundError, match="is not a directory"):
            locator.locate("@demo_pkg/missing")

    def test_unknown_package(self) -> None:
        locator = PackageResourceLocator(prefixes=[])
        with pytest.raises(ResourceNotFoundError, match='package "nope_nope_pkg" not found'):
            locator.locate("@nope_nope_pkg")

    def test_module_is_not_a_package(self) -> None:
        locator = PackageResourceLocator(prefixes=[])
        with pytest.raises(ResourceNotFoundError):
            locator.locate("@argparse")

    @pytest.mark.parametrize("alias", ["demo_pkg", "@", "@/config"])
    def test_malformed_alias(self, alias: str, install_prefix: Path) -> None:
        locator = PackageResourceLocator(prefixes=[str(install_prefix)])
        with pytest.raises(ResourceNotFoundError):
            locator.locate(alias)

    def test_defaults_to_configured_prefixes(
        self, install_prefix: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from yaml_lint.lint_config import lint_config

        monkeypatch.setattr(lint_config, "resource_prefixes", [str(install_prefix)])
        assert PackageResourceLocator().locate("@demo_pkg").name == "demo_pkg"
