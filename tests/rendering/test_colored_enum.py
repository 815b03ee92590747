# topmark:header:start
#
#   project      : AlignBy
#   file         : test_colored_enum.py
#   file_relpath : tests/rendering/test_colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Behavior of `ColoredStrEnum` members."""

from __future__ import annotations

from alignby.pipeline.outcomes import Outcome
from alignby.pipeline.status import AlignStatus, WriteStatus
from alignby.rendering.colored_enum import ColoredStrEnum


class _Demo(ColoredStrEnum):
    LOUD = ("loud", lambda *args, sep=" ": "<" + sep.join(str(a) for a in args) + ">")


def test_member_behaves_like_its_text() -> None:
    assert _Demo.LOUD == "loud"
    assert _Demo.LOUD.value == "loud"
    assert _Demo("loud") is _Demo.LOUD
    assert {_Demo.LOUD: 1}["loud"] == 1


def test_render_applies_the_member_colorizer() -> None:
    assert _Demo.LOUD.render() == "<loud>"
    assert _Demo.LOUD.color("x") == "<x>"


def test_status_values_are_distinct_per_axis() -> None:
    for enum_cls in (AlignStatus, WriteStatus, Outcome):
        values: list[str] = [m.value for m in enum_cls]
        assert len(values) == len(set(values))
