import pytest

from adapters.formatter.grouping_formatter import GroupingFormatter
from contracts import CalculatorState, DisplayLines
from ports.formatter import Formatter


def test_grouping_formatter_satisfies_port():
    assert isinstance(GroupingFormatter(), Formatter)


@pytest.mark.parametrize("operand,expected", [
    ("5", "5"),
    ("1234", "1,234"),
    ("1234567", "1,234,567"),
    ("-1234", "-1,234"),
    ("1234.5678", "1,234.5678"),
    ("1234.", "1,234."),
    (".5", "0.5"),
    ("0.10", "0.10"),
    ("007", "7"),
    ("Infinity", "∞"),
    ("-Infinity", "-∞"),
    ("NaN", "NaN"),
    ("1e+21", "1,000,000,000,000,000,000,000"),
])
def test_format_operand(operand, expected):
    assert GroupingFormatter().format_operand(operand) == expected


def test_format_absent_operand_gives_no_output():
    assert GroupingFormatter().format_operand(None) is None


def test_decimal_part_is_not_rounded():
    formatter = GroupingFormatter()

    assert formatter.format_operand("0.30000000000000004") == "0.30000000000000004"


def test_custom_grouping_separator():
    formatter = GroupingFormatter(grouping_separator=" ")

    assert formatter.format_operand("9876543.21") == "9 876 543.21"


def test_render_pending_operation():
    state = CalculatorState(previous_operand="1234", operation="*", current_operand="56")

    assert GroupingFormatter().render(state) == DisplayLines(previous="1,234 *", current="56")


def test_render_initial_state():
    lines = GroupingFormatter().render(CalculatorState())

    assert lines.previous == " "
    assert lines.current is None
