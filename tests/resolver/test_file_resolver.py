# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_file_resolver.py
#   file_relpath : tests/resolver/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File resolution: expansion of inputs and include/exclude filtering."""

from __future__ import annotations

from pathlib import Path

import pytest

from headerfix.file_resolver import expand_paths, filter_paths, resolve_file_list
from tests.conftest import make_config, write_text_exact


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    for rel in ("src/A.cs", "src/B.cs", "src/notes.txt", "src/gen/G.cs", "obj/O.cs"):
        write_text_exact(tmp_path / rel, "class X {}\n")
    return tmp_path


def test_directories_expand_recursively(tree: Path) -> None:
    found: list[Path] = expand_paths(["src"], tree)

    assert {p.relative_to(tree).as_posix() for p in found} == {
        "src/A.cs",
        "src/B.cs",
        "src/notes.txt",
        "src/gen/G.cs",
    }


def test_globs_are_relative_to_base(tree: Path) -> None:
    found: list[Path] = expand_paths(["src/*.cs"], tree)

    assert [p.name for p in found] == ["A.cs", "B.cs"]


def test_missing_paths_are_skipped(tree: Path) -> None:
    assert expand_paths(["does/not/exist.cs"], tree) == []


def test_default_include_keeps_only_cs_files(tree: Path) -> None:
    files: list[Path] = resolve_file_list(["."], make_config(), base=tree)

    assert [p.relative_to(tree.resolve()).as_posix() for p in files] == [
        "obj/O.cs",
        "src/A.cs",
        "src/B.cs",
        "src/gen/G.cs",
    ]


def test_exclude_patterns_use_gitignore_semantics(tree: Path) -> None:
    files: list[Path] = resolve_file_list(
        ["."], make_config(exclude_patterns=["obj/", "gen/"]), base=tree
    )

    assert [p.name for p in files] == ["A.cs", "B.cs"]


def test_empty_include_keeps_everything(tree: Path) -> None:
    files: list[Path] = filter_paths(
        expand_paths(["src"], tree), include_patterns=[], exclude_patterns=[], base=tree
    )

    assert "notes.txt" in {p.name for p in files}


def test_results_are_unique_and_sorted(tree: Path) -> None:
    files: list[Path] = resolve_file_list(["src/A.cs", "src", "src/A.cs"], make_config(), base=tree)

    assert files == sorted(set(files))
    assert len([p for p in files if p.name == "A.cs"]) == 1


def test_absolute_globs_are_expanded(tree: Path) -> None:
    found: list[Path] = expand_paths([f"{tree.as_posix()}/src/*.cs"], tree / "obj")

    assert [p.name for p in found] == ["A.cs", "B.cs"]


def test_absolute_glob_through_resolve_file_list(tree: Path) -> None:
    pattern: str = f"{tree.as_posix()}/src/**/*.cs"
    files: list[Path] = resolve_file_list([pattern], make_config(), base=tree)

    assert [p.name for p in files] == ["A.cs", "B.cs", "G.cs"]
