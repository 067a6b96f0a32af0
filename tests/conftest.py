# topmark:header:start
#
#   project      : HeaderFix
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the HeaderFix test suite.

Sets up TRACE-level logging for test runs and provides typed wrappers around
pytest decorators plus small builders shared by several test packages.

Notes:
    Build configs with `headerfix.config.MutableConfig`, then `freeze()` into a
    `headerfix.config.Config`. Do not mutate a frozen `Config`; `thaw()` it,
    edit the builder and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from headerfix.config import MutableConfig
from headerfix.config import logging as hf_logging
from headerfix.core.settings import HeaderSettings
from headerfix.core.trivia import Trivia, TriviaKind

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from headerfix.config import Config
    from headerfix.core.trivia import TriviaSequence

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_headerfix_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``HEADERFIX_LOG_LEVEL``.
    """
    monkeypatch.delenv(hf_logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session."""
    hf_logging.setup_logging(level=hf_logging.TRACE_LEVEL)


# --------------------------------------------------------------------------
# Builders
# --------------------------------------------------------------------------

#: Short names used by table-driven trivia tests.
KIND_CODES: dict[str, TriviaKind] = {
    "C": TriviaKind.LINE_COMMENT,
    "W": TriviaKind.WHITESPACE,
    "E": TriviaKind.END_OF_LINE,
    "O": TriviaKind.OTHER,
}

_SAMPLE_TEXT: dict[TriviaKind, str] = {
    TriviaKind.LINE_COMMENT: "// comment",
    TriviaKind.WHITESPACE: "    ",
    TriviaKind.END_OF_LINE: "\r\n",
    TriviaKind.OTHER: "#region Header",
}


def trivia_from_codes(codes: Iterable[str]) -> TriviaSequence:
    """Build a trivia sequence from kind codes (``"C"``, ``"W"``, ``"E"``, ``"O"``).

    Args:
        codes (Iterable[str]): One code per trivia unit.

    Returns:
        TriviaSequence: Trivia with representative text for each kind.
    """
    out: list[Trivia] = []
    for code in codes:
        kind: TriviaKind = KIND_CODES[code]
        out.append(Trivia(kind, _SAMPLE_TEXT[kind]))
    return tuple(out)


def make_settings(
    template: str = "Copyright (c) Acme. All rights reserved.",
    *,
    wrap: bool = True,
    company: str = "Acme",
) -> HeaderSettings:
    """Return `HeaderSettings` with readable defaults for tests."""
    return HeaderSettings(
        copyright_template=template,
        use_structured_wrap=wrap,
        company_name=company,
    )


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): `MutableConfig` fields to set.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def write_text_exact(path: Path, text: str) -> Path:
    """Write ``text`` as UTF-8 without newline translation and return ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return path


def read_text_exact(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()
