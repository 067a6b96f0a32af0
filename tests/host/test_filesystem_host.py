# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_filesystem_host.py
#   file_relpath : tests/host/test_filesystem_host.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`FileHeaderHost`: settings per path and protocol conformance."""

from __future__ import annotations

from pathlib import Path

from headerfix.core.settings import HeaderSettings
from headerfix.host.document import SourceDocument
from headerfix.host.filesystem import FileHeaderHost
from headerfix.host.protocols import HeaderHost
from tests.conftest import make_config, make_settings


def test_from_config_uses_expanded_copyright_text() -> None:
    host = FileHeaderHost.from_config(
        make_config(
            company_name="Acme",
            copyright_text="(c) {companyName} {year}",
            variables={"year": "2025"},
        )
    )
    doc = SourceDocument(Path("src/Foo.cs"), "class C {}")

    settings: HeaderSettings = host.get_settings(doc)

    assert settings.copyright_template == "(c) Acme 2025"
    assert settings.company_name == "Acme"
    assert host.get_filename(doc) == "Foo.cs"


def test_custom_resolver_is_called_per_path() -> None:
    seen: list[Path] = []

    def _resolver(path: Path) -> HeaderSettings:
        seen.append(path)
        return make_settings(company=path.stem)

    host = FileHeaderHost(_resolver)
    a = SourceDocument(Path("A.cs"), "")
    b = SourceDocument(Path("B.cs"), "")

    assert host.get_settings(a).company_name == "A"
    assert host.get_settings(b).company_name == "B"
    assert seen == [Path("A.cs"), Path("B.cs")]


def test_newline_follows_document() -> None:
    host = FileHeaderHost(lambda _p: make_settings())

    assert host.get_newline(SourceDocument(Path("a.cs"), "x\ny")) == "\n"
    assert host.get_newline(SourceDocument(Path("a.cs"), "x\r\ny")) == "\r\n"


def test_satisfies_host_protocol() -> None:
    host: HeaderHost[SourceDocument] = FileHeaderHost(lambda _p: make_settings())
    doc = SourceDocument(Path("a.cs"), "// c\n\nx")

    updated = host.with_leading_trivia(doc, host.get_leading_trivia(doc))

    assert updated == doc
