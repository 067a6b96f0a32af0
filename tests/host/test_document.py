# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_document.py
#   file_relpath : tests/host/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source documents: BOM handling, newline detection and trivia reattachment."""

from __future__ import annotations

from pathlib import Path

from headerfix.core.trivia import Trivia, TriviaKind, kinds_of
from headerfix.host.document import SourceDocument, detect_newline
from tests.conftest import parametrize, write_text_exact


@parametrize(
    "text, expected",
    [
        ("a\r\nb\n", "\r\n"),
        ("a\nb\r\n", "\n"),
        ("a\rb", "\r"),
        ("no newline", "\r\n"),
        ("", "\r\n"),
    ],
)
def test_detect_newline(text: str, expected: str) -> None:
    assert detect_newline(text) == expected


def test_split_keeps_bom_out_of_trivia() -> None:
    doc = SourceDocument(Path("Foo.cs"), "\ufeff// c\r\n\r\nusing X;")

    bom, trivia, body = doc.split()

    assert bom == "\ufeff"
    assert kinds_of(trivia) == (
        TriviaKind.LINE_COMMENT,
        TriviaKind.END_OF_LINE,
        TriviaKind.END_OF_LINE,
    )
    assert body == "using X;"


def test_with_leading_trivia_roundtrip() -> None:
    """Reattaching the same trivia reproduces the original text."""
    text = "\ufeff  // c\n#region R\nnamespace N {}\n"
    doc = SourceDocument(Path("Foo.cs"), text)

    assert doc.with_leading_trivia(doc.leading_trivia).text == text


def test_with_leading_trivia_replaces_only_the_prefix() -> None:
    doc = SourceDocument(Path("Foo.cs"), "// old\n\nclass C {}\n")

    new = doc.with_leading_trivia((Trivia.line_comment("// new"), Trivia.end_of_line("\n")))

    assert new.text == "// new\nclass C {}\n"
    assert new.path == doc.path
    assert doc.text == "// old\n\nclass C {}\n"


def test_from_path_does_not_translate_newlines(tmp_path: Path) -> None:
    f: Path = write_text_exact(tmp_path / "Foo.cs", "// c\r\n\r\nclass C {}\r\n")

    doc = SourceDocument.from_path(f)

    assert doc.text == "// c\r\n\r\nclass C {}\r\n"
    assert doc.name == "Foo.cs"
    assert doc.newline == "\r\n"
