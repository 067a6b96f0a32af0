# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff rendering: visible line terminators, line numbers and color switch."""

from __future__ import annotations

from headerfix.utils.diff import render_patch

PATCH = "--- a\r\n+++ b\r\n@@ -1 +1 @@\r\n-// old\r\n+// new\r\n"


def test_render_patch_accepts_str_and_list() -> None:
    """Both a diff string and a list of lines render the same."""
    as_text: str = render_patch(PATCH, color=False)
    as_list: str = render_patch(PATCH.splitlines(keepends=True), color=False)

    assert as_text == as_list


def test_line_terminators_are_visible() -> None:
    out: str = render_patch(PATCH, color=False)

    assert out.splitlines()[3] == "-// old\\r\\n"


def test_line_numbers() -> None:
    out: str = render_patch(PATCH, show_line_numbers=True, color=False)

    assert out.splitlines()[0] == "0001|--- a\\r\\n"
    assert out.splitlines()[-1] == "0005|+// new\\r\\n"


def test_plain_output_has_no_escape_codes() -> None:
    assert "\x1b[" not in render_patch(PATCH, color=False)


def test_render_patch_empty_input_is_safe() -> None:
    assert render_patch("") == ""
