"""Tests for extract/ops.py: file, package and module extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbind.config.models import ExtractConfig
from docbind.core.errors import ConfigError
from docbind.extract import (
    DocPair,
    extract_file,
    extract_module,
    extract_package,
    iter_packages,
)


class TestExtractPackage:
    """A package is one directory; subdirectories are not entered."""

    def test_go_root_package(self, go_testdata: Path) -> None:
        pairs = list(extract_package(go_testdata))

        assert pairs == [
            DocPair("Fetcher", "Fetcher is a main fetcher for this module\n"),
            DocPair(
                "Fetcher.FetchOrders",
                "FetchOrders fetching orders for me.\nThere is also second line\n",
            ),
            DocPair("Fetcher.FetchNoComments", ""),
            DocPair("F1", "F1 comment\n"),
            DocPair("F2", "F2 comment\n"),
            DocPair(
                "Fetcher.FetchEmails",
                "FetchEmails is for fetching emails.\n\nThis file is placed in second file.\n",
            ),
            DocPair("Fetcher.fetchUsers", "fetchUsers is private function.\n"),
            DocPair("NewFetcher", "NewFetcher builds a Fetcher.\n"),
            DocPair("Undocumented", ""),
            DocPair("Single", "Single is documented by its group.\n"),
            DocPair("Left", "Left comment\n"),
            DocPair("Right", ""),
        ]

    def test_python_root_package(self, python_testdata: Path) -> None:
        pairs = dict(extract_package(python_testdata))

        assert pairs == {
            "F1": "F1 comment\n",
            "F2": "F2 comment\n",
            "G1": "G1 comment\n",
            "G2": "G2 comment\n",
            "H1": "",
            "H2": "",
            "Fetcher": "Fetcher is a main fetcher for this module\n",
            "Fetcher.fetch_orders": "fetch_orders fetching orders for me.\nThere is also second line\n",
            "Fetcher.fetch_no_comments": "",
            "Fetcher.name": "name is a documented property.\n",
            "fetch_emails": "fetch_emails is for fetching emails.\n\nThis function is placed in second file.\n",
            "_fetch_users": "_fetch_users is private function.\n",
            "undocumented": "",
        }

    def test_prefix_is_applied(self, go_testdata: Path) -> None:
        pairs = list(extract_package(go_testdata / "client", "client/"))

        assert pairs == [
            DocPair("client/Client", "Client is client from package `client`\n"),
            DocPair("client/Client.Do", "Do some stuff\n"),
        ]

    def test_non_source_files_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# readme\n")
        (tmp_path / "main.go").write_text("package main\n\n// Main runs.\nfunc Main() {}\n")

        assert list(extract_package(tmp_path)) == [DocPair("Main", "Main runs.\n")]

    def test_disabled_language_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "a.go").write_text("package a\n\nfunc A() {}\n")
        (tmp_path / "b.py").write_text("def b():\n    pass\n")

        pairs = list(extract_package(tmp_path, config=ExtractConfig(languages=["python"])))

        assert pairs == [DocPair("b", "")]

    def test_syntax_error_propagates(self, tmp_path: Path) -> None:
        (tmp_path / "bad.go").write_text("package bad\n\nfunc Broken( {\n")

        with pytest.raises(SyntaxError) as exc_info:
            list(extract_package(tmp_path))

        assert exc_info.value.filename == str(tmp_path / "bad.go")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(extract_package(tmp_path / "missing"))

    def test_unknown_language_raises_config_error(self, tmp_path: Path) -> None:
        config = ExtractConfig(languages=["cobol"])

        with pytest.raises(ConfigError, match="unknown language"):
            list(extract_package(tmp_path, config=config))


class TestExtractFile:
    def test_single_file(self, go_testdata: Path) -> None:
        pairs = list(extract_file(go_testdata / "module1" / "module1.go", "module1/"))

        assert pairs[0] == DocPair("module1/Module1Func", "Module1Func is a module one function\n")
        assert len(pairs) == 4

    def test_unsupported_extension_raises(self, go_testdata: Path) -> None:
        with pytest.raises(ValueError, match="Unsupported file extension"):
            list(extract_file(go_testdata / "empty" / "nested" / "README.md"))


class TestIterPackages:
    """Directory walk order and prefixes."""

    def test_prefixes_in_walk_order(self, go_testdata: Path) -> None:
        prefixes = [prefix for _directory, prefix in iter_packages(go_testdata)]

        assert prefixes == [
            "",
            "client/",
            "empty/",
            "empty/nested/",
            "module1/",
            "module1/module2/",
            "module1/module2/module3/",
            "module1/module2/module4/",
        ]

    def test_excluded_directories_are_pruned(self, go_testdata: Path) -> None:
        prefixes = [prefix for _d, prefix in iter_packages(go_testdata, exclude_dirs=["module2"])]

        assert prefixes == ["", "client/", "empty/", "empty/nested/", "module1/"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(iter_packages(tmp_path / "missing"))


class TestExtractModule:
    """A module is every package under a root, each with its prefix."""

    def test_go_module(self, go_testdata: Path) -> None:
        pairs = dict(extract_module(go_testdata))

        assert pairs["Fetcher"] == "Fetcher is a main fetcher for this module\n"
        assert pairs["client/Client"] == "Client is client from package `client`\n"
        assert pairs["client/Client.Do"] == "Do some stuff\n"
        assert pairs["module1/Client"] == "And this Client is from module1\n"
        assert pairs["module1/Client.Do"] == "Comment for another Do\n"
        assert pairs["module1/module2/Interface"] == "Interface is a main interface\n"
        assert (
            pairs["module1/module2/module4/Implementation.Implements"]
            == "Implements is an implementation of Implementation in module 4\n"
        )

    def test_go_module_paths(self, go_testdata: Path) -> None:
        paths = [pair.path for pair in extract_module(go_testdata)]

        assert len(paths) == len(set(paths))
        assert paths[-4:] == [
            "module1/module2/module3/Implementation",
            "module1/module2/module3/Implementation.Implements",
            "module1/module2/module4/Implementation",
            "module1/module2/module4/Implementation.Implements",
        ]

    def test_python_module(self, python_testdata: Path) -> None:
        pairs = dict(extract_module(python_testdata))

        assert pairs["client/Client.do"] == "Do some stuff\n"
        assert pairs["module1/module1_func"] == "module1_func is a module one function\n"
        assert pairs["module1/module2/SomeType"] == "SomeType is some type\n"
        assert pairs["module1/module2/Interface.implements"] == ""

    def test_exclude_dirs_from_config(self, go_testdata: Path) -> None:
        config = ExtractConfig(exclude_dirs=["module1"])

        prefixes = {pair.path.rpartition("/")[0] for pair in extract_module(go_testdata, config=config)}

        assert prefixes == {"", "client"}

    def test_extraction_is_lazy(self, tmp_path: Path) -> None:
        (tmp_path / "a.go").write_text("package a\n\nfunc A() {}\n")
        (tmp_path / "z.go").write_text("package a\n\nfunc Broken( {\n")

        pairs = extract_module(tmp_path)

        assert next(pairs) == DocPair("A", "")
        with pytest.raises(SyntaxError):
            next(pairs)
