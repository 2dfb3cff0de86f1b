# topmark:header:start
#
#   project      : UIStream
#   file         : colored_enum.py
#   file_relpath : src/uistream/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enum used for human-facing verdicts.

Grade verdicts and element validation outcomes are rendered by the CLI with a
color per member. `ColoredStrEnum` keeps the member value a plain string (so
JSON output and comparisons stay simple) and stores the colorizer separately.

Example:
    ```python
    from yachalk import chalk

    class Verdict(ColoredStrEnum):
        PASS = ("pass", chalk.green)
        FAIL = ("fail", chalk.red_bright)

    print(Verdict.PASS.value)            # 'pass'
    print(Verdict.PASS.color("ok"))      # green "ok"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join the given arguments."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the member.
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def styled(self) -> str:
        """Return the member value rendered with its own colorizer."""
        return self._color(self._value_)
