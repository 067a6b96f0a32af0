# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_idempotence_property.py
#   file_relpath : tests/pipeline/test_idempotence_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: fixing a document is a fixed point and keeps the body intact.

Documents are generated from a handful of realistic leading-trivia fragments, an
optional BOM, a newline style and a body.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from headerfix.host.document import SourceDocument
from headerfix.host.filesystem import FileHeaderHost
from headerfix.pipeline.fixer import FixResult, fix_document
from tests.conftest import make_settings

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

HOST = FileHeaderHost(lambda _p: make_settings("Copyright (c) Acme.\nAll rights reserved."))

FRAGMENTS: list[str] = [
    "// comment{nl}",
    "//{nl}",
    "{nl}",
    "    ",
    "/* block */{nl}",
    "/// <summary>doc</summary>{nl}",
    "#region Header{nl}",
]


@st.composite
def s_document(draw: st.DrawFn) -> str:
    nl: str = draw(st.sampled_from(["\n", "\r\n"]))
    bom: str = draw(st.sampled_from(["", "\ufeff"]))
    fragments: list[str] = draw(st.lists(st.sampled_from(FRAGMENTS), max_size=8))
    body: str = draw(st.sampled_from(["", "using System;{nl}", "namespace N {{ }}{nl}"]))
    return bom + "".join(f.format(nl=nl) for f in fragments) + body.format(nl=nl)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(text=s_document())
def test_fix_is_a_fixed_point(text: str) -> None:
    """A second fix never changes what the first one produced."""
    first: FixResult = fix_document(SourceDocument(Path("Foo.cs"), text), HOST)
    second: FixResult = fix_document(SourceDocument(Path("Foo.cs"), first.updated_text), HOST)

    assert second.updated_text == first.updated_text


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(text=s_document())
def test_body_and_bom_are_preserved(text: str) -> None:
    doc = SourceDocument(Path("Foo.cs"), text)
    result: FixResult = fix_document(doc, HOST)

    updated = SourceDocument(doc.path, result.updated_text)
    assert updated.bom == doc.bom
    assert updated.split()[2] == doc.split()[2]
