# topmark:header:start
#
#   project      : HeaderFix
#   file         : colored_enum.py
#   file_relpath : src/headerfix/utils/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a colorizer for human-facing output.

The enum ``.value`` stays a plain string; the colorizer (normally a yachalk
``ChalkBuilder``) is exposed separately through ``.color``.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)

    Outcome.OK.value            # 'ok'
    Outcome.OK.color("hello")   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated for display."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its text and colorizer.

        Args:
            text (str): Value of the member.
            color (Colorizer): Colorizer used by `colored`.

        Returns:
            ColoredStrEnum: The new member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    def colored(self, text: str | None = None) -> str:
        """Return ``text`` (default: the member value) decorated with the member color."""
        return self._color(self._value_ if text is None else text)
