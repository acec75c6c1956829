"""Unit tests for the public API functions."""

from __future__ import annotations

import types

from structured_formatter import (
    DynamicValue,
    FileType,
    FormatResult,
    FormatterConfig,
    build,
    children,
    format_text,
    indent_lines,
    render,
    render_text,
    set_expanded,
)


class TestTreeFunctions:
    def test_build_root(self) -> None:
        value = DynamicValue.from_python({"a": 1})
        root = build(value)
        assert root.value == value
        assert root.key is None
        assert root.expanded

    def test_children_of_mapping(self) -> None:
        root = build(DynamicValue.from_python({"x": 1, "y": 2}))
        assert [c.key for c in children(root)] == ["x", "y"]

    def test_children_of_sequence(self) -> None:
        root = build(DynamicValue.from_python(["a", "b"]))
        assert [c.key for c in children(root)] == ["[0]", "[1]"]

    def test_render_is_lazy(self) -> None:
        root = build(DynamicValue.from_python([1]))
        assert isinstance(render(root), types.GeneratorType)

    def test_render_text(self) -> None:
        root = build(DynamicValue.from_python({"a": True}))
        assert render_text(root) == '\n  "a": true'

    def test_render_text_with_config(self) -> None:
        root = build(DynamicValue.from_python({"a": True}))
        assert render_text(root, FormatterConfig(indent_unit=1)) == '\n "a": true'

    def test_set_expanded_round_trip(self) -> None:
        root = build(DynamicValue.from_python({"a": [1, 2]}))
        original = render_text(root)
        set_expanded(root, False)
        assert render_text(root) == ""
        set_expanded(root, True)
        assert render_text(root) == original

    def test_set_expanded_on_scalar_does_not_raise(self) -> None:
        root = build(DynamicValue.from_python(None))
        set_expanded(root, False)
        assert root.expanded


class TestTextFunctions:
    def test_indent_lines(self) -> None:
        assert indent_lines("a:\n  - b\n") == "a:\n  - b\n"

    def test_format_text_json(self) -> None:
        result = format_text('{"a": 1}')
        assert isinstance(result, FormatResult)
        assert result.view is not None

    def test_format_text_invalid(self) -> None:
        assert format_text("[1,", FileType.JSON).error == "Invalid JSON."

    def test_no_state_between_calls(self) -> None:
        r1 = format_text("a:\nb:", FileType.YAML)
        r2 = format_text("a:\nb:", FileType.YAML)
        assert r1.text == r2.text == "a:\n  b:"
