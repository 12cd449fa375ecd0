"""Tests for value formatting and escaping."""

import pytest

from gohgen.blocks import GeneratorState, ValueType
from gohgen.errors import UnsupportedValueTypeError
from gohgen.formatter import VALUE_FORMATS, format_escaped, format_value


@pytest.fixture
def state() -> GeneratorState:
    return GeneratorState(buffer_name="w")


class TestFormatValue:
    """Plain writes for Value blocks."""

    @pytest.mark.parametrize("value_type, expected", [
        (ValueType.STRING, "w.WriteString(name)"),
        (ValueType.BYTES, "w.Write(name)"),
        (ValueType.INT, "Goh.FormatInt(int64(name), w)"),
        (ValueType.UINT, "Goh.FormatUint(uint64(name), w)"),
        (ValueType.BOOL, "Goh.FormatBool(name, w)"),
        (ValueType.ANY, "Goh.FormatAny(name, w)"),
    ])
    def test_statement_per_type(self, state, value_type, expected):
        assert format_value(state, "name", value_type) == expected
        assert state.statements == [expected]

    def test_content_is_trimmed(self, state):
        assert format_value(state, "  user.Name\n", ValueType.STRING) == "w.WriteString(user.Name)"

    def test_empty_content_is_noop(self, state):
        assert format_value(state, " \t\n", ValueType.BOOL) is None
        assert state.statements == []
        assert state.constant_length == 0

    def test_unknown_type_is_silently_skipped(self, state):
        assert format_value(state, "x", "float") is None
        assert format_value(state, "x", 42) is None
        assert state.statements == []

    def test_bool_adds_constant_length(self, state):
        format_value(state, "ok", ValueType.BOOL)
        format_value(state, "done", ValueType.BOOL)
        assert state.constant_length == 10

    def test_other_types_add_nothing(self, state):
        for value_type in (ValueType.STRING, ValueType.BYTES, ValueType.INT, ValueType.UINT, ValueType.ANY):
            format_value(state, "x", value_type)
        assert state.constant_length == 0

    def test_uses_state_buffer_name(self):
        state = GeneratorState(buffer_name="out")
        assert format_value(state, "n", ValueType.INT) == "Goh.FormatInt(int64(n), out)"


class TestFormatEscaped:
    """Escaped writes for EscapedValue and Literal blocks."""

    @pytest.mark.parametrize("value_type, expected", [
        (ValueType.STRING, "Goh.EscapeHTML(name, w)"),
        (ValueType.BYTES, "Goh.EscapeHTML(Goh.Bytes2String(name), w)"),
        (ValueType.INT, "Goh.FormatInt(int64(name), w)"),
        (ValueType.UINT, "Goh.FormatUint(uint64(name), w)"),
        (ValueType.BOOL, "Goh.FormatBool(name, w)"),
        (ValueType.ANY, "Goh.FormatAny(name, w)"),
    ])
    def test_statement_per_type(self, state, value_type, expected):
        assert format_escaped(state, "name", value_type) == expected

    def test_bool_adds_constant_length(self, state):
        format_escaped(state, "ok", ValueType.BOOL)
        assert state.constant_length == 5

    def test_unknown_type_aborts(self, state):
        with pytest.raises(UnsupportedValueTypeError, match="Unsupported value type"):
            format_escaped(state, "x", "float")

    def test_empty_content_wins_over_unknown_type(self, state):
        assert format_escaped(state, "   ", "float") is None


class TestValueFormats:
    """The shared dispatch table."""

    def test_covers_every_value_type(self):
        assert set(VALUE_FORMATS) == set(ValueType)

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            VALUE_FORMATS[ValueType.STRING] = VALUE_FORMATS[ValueType.ANY]

    def test_only_strings_and_bytes_differ(self):
        differing = {vt for vt, fmt in VALUE_FORMATS.items() if fmt.plain != fmt.escaped}
        assert differing == {ValueType.STRING, ValueType.BYTES}
