"""Unit tests for core/utils/indent.py"""

import pytest

from dominator_static.core.utils.indent import Indent


@pytest.mark.parametrize("depth,expected", [
    (0, ""),
    (1, "  "),
    (3, "      "),
])
def test_indent_renders_two_spaces_per_level(depth, expected):
    """str(Indent(n)) is two spaces per level."""
    assert str(Indent(depth)) == expected


def test_inc_returns_new_value():
    """inc produces a deeper Indent and leaves the original unchanged."""
    base = Indent(1)
    deeper = base.inc()
    assert deeper == Indent(2)
    assert base == Indent(1)
    assert base.inc(3).depth == 4


def test_negative_depth_rejected():
    """A negative depth is a programming error."""
    with pytest.raises(ValueError):
        Indent(-1)
