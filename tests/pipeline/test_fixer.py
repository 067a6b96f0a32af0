# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_fixer.py
#   file_relpath : tests/pipeline/test_fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-document fixes through a host."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from headerfix.core.errors import FixCancelledError
from headerfix.core.lexer import lex_leading_trivia
from headerfix.core.settings import HeaderSettings
from headerfix.core.trivia import TriviaSequence, trivia_to_text
from headerfix.host.document import SourceDocument
from headerfix.host.filesystem import FileHeaderHost
from headerfix.pipeline.fixer import FixResult, fix_document, transform, write_result
from headerfix.pipeline.status import FixOutcome, HeaderStatus
from tests.conftest import make_settings, mark_pipeline, read_text_exact, write_text_exact

SETTINGS: HeaderSettings = make_settings("Copyright (c) Acme.", wrap=True, company="Acme")


class StringHost:
    """Minimal host over bare strings, named ``Buffer.cs``."""

    def get_leading_trivia(self, document: str) -> TriviaSequence:
        return lex_leading_trivia(document)[0]

    def get_settings(self, document: str) -> HeaderSettings:
        return SETTINGS

    def get_filename(self, document: str) -> str:
        return "Buffer.cs"

    def get_newline(self, document: str) -> str:
        return "\n"

    def with_leading_trivia(self, document: str, trivia: TriviaSequence) -> str:
        end: int = lex_leading_trivia(document)[1]
        return trivia_to_text(trivia) + document[end:]


@pytest.fixture
def host() -> FileHeaderHost:
    return FileHeaderHost(lambda _p: SETTINGS)


def test_transform_through_any_host() -> None:
    updated, spliced = transform("class C {}\n", StringHost())

    assert updated == (
        '// <copyright file="Buffer.cs" company="Acme">\n'
        "// Copyright (c) Acme.\n"
        "// </copyright>\n"
        "\n"
        "class C {}\n"
    )
    assert spliced.scan.present is False


def test_transform_checks_cancellation_first() -> None:
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(FixCancelledError):
        transform("class C {}", StringHost(), cancel=cancel)


@mark_pipeline
def test_insert_into_crlf_document(host: FileHeaderHost) -> None:
    doc = SourceDocument(Path("Foo.cs"), "using System;\r\n")

    result: FixResult = fix_document(doc, host)

    assert result.status is HeaderStatus.MISSING
    assert result.outcome is FixOutcome.INSERTED
    assert result.updated_text == (
        '// <copyright file="Foo.cs" company="Acme">\r\n'
        "// Copyright (c) Acme.\r\n"
        "// </copyright>\r\n"
        "\r\n"
        "using System;\r\n"
    )


@mark_pipeline
def test_replace_keeps_bom_and_body(host: FileHeaderHost) -> None:
    doc = SourceDocument(Path("Foo.cs"), "\ufeff// Old header\n\n#region R\nclass C {}\n")

    result: FixResult = fix_document(doc, host)

    assert result.status is HeaderStatus.PRESENT
    assert result.outcome is FixOutcome.REPLACED
    assert result.boundary == 3
    assert result.updated_text.startswith('\ufeff// <copyright file="Foo.cs" company="Acme">\n')
    assert result.updated_text.endswith("// </copyright>\n\n#region R\nclass C {}\n")


@mark_pipeline
def test_second_fix_is_unchanged(host: FileHeaderHost) -> None:
    first: FixResult = fix_document(SourceDocument(Path("Foo.cs"), "class C {}\n"), host)
    second: FixResult = fix_document(SourceDocument(Path("Foo.cs"), first.updated_text), host)

    assert first.changed
    assert not second.changed
    assert second.outcome is FixOutcome.UNCHANGED
    assert second.diff() == ""


@mark_pipeline
@pytest.mark.parametrize("wrap", [False, True])
def test_crlf_template_is_stable_on_crlf_documents(wrap: bool) -> None:
    """A template read from a CRLF config file does not grow the header on each run."""
    crlf_host = FileHeaderHost(lambda _p: make_settings("A\r\nB", wrap=wrap))

    first: FixResult = fix_document(SourceDocument(Path("Foo.cs"), "class C {}\r\n"), crlf_host)
    second: FixResult = fix_document(SourceDocument(Path("Foo.cs"), first.updated_text), crlf_host)

    assert "// A\r\n// B\r\n" in first.updated_text
    assert "\r\r" not in first.updated_text
    assert second.updated_text == first.updated_text
    assert second.outcome is FixOutcome.UNCHANGED


def test_diff_mentions_both_sides(host: FileHeaderHost) -> None:
    result: FixResult = fix_document(SourceDocument(Path("Foo.cs"), "// x\n\nclass C {}\n"), host)

    patch: str = result.diff()

    assert "Foo.cs (current)" in patch
    assert "-// x\n" in patch
    assert "+// Copyright (c) Acme.\n" in patch


def test_write_result_only_writes_changes(tmp_path: Path, host: FileHeaderHost) -> None:
    f: Path = write_text_exact(tmp_path / "Foo.cs", "class C {}\r\n")

    result: FixResult = fix_document(SourceDocument.from_path(f), host)
    assert write_result(result) is True
    assert read_text_exact(f) == result.updated_text

    again: FixResult = fix_document(SourceDocument.from_path(f), host)
    assert write_result(again) is False
