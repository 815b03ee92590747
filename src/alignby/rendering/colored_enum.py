# topmark:header:start
#
#   project      : AlignBy
#   file         : colored_enum.py
#   file_relpath : src/alignby/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` is a `str, Enum` whose members carry a human-readable text
value plus a colorizer (typically a `yachalk` style). The status axes of the
pipeline and the outcome buckets of the reporter are built on it, so the CLI
can print a label in its color without a separate lookup table.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        ALIGNED = ("aligned", chalk.green)
        MALFORMED = ("malformed directive", chalk.red_bright)

    print(Outcome.ALIGNED.value)            # 'aligned'
    print(Outcome.ALIGNED.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`; AlignBy calls colorizers
    with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated, space-joined rendering of ``args``."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The colorizer is stored next to ``_value_`` rather than inside it, which keeps
    hashing, equality and ``repr`` identical to a plain string enum.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self) -> str:
        """Return the member's text value, colorized."""
        return self._color(self._value_)
