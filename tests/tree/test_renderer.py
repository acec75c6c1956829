"""Tests for TreeRenderer: line text, laziness, collapse, and indentation."""

from __future__ import annotations

import types

import pytest

from structured_formatter.config import FormatterConfig
from structured_formatter.tree.builder import TreeBuilder
from structured_formatter.tree.renderer import TreeRenderer, format_key, line_text
from structured_formatter.tree.values import DynamicValue

SCENARIO = {"a": 1, "b": [True, None, "x"]}

SCENARIO_TEXT = "\n".join(
    [
        "",
        '  "a": 1',
        '  "b": ',
        '    "[0]": true',
        '    "[1]": null',
        '    "[2]": "x"',
    ]
)


@pytest.fixture
def renderer() -> TreeRenderer:
    return TreeRenderer()


@pytest.fixture
def builder() -> TreeBuilder:
    return TreeBuilder()


# ---------------------------------------------------------------------------
# Line text
# ---------------------------------------------------------------------------


class TestLineText:
    def test_format_key_present(self) -> None:
        assert format_key("name") == '"name": '

    def test_format_key_absent(self) -> None:
        assert format_key(None) == ""

    def test_scalar_line_has_key_and_value(self, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python({"a": "x"}))
        (child,) = builder.children(root)
        assert line_text(child) == '"a": "x"'

    def test_container_line_has_no_value(self, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python({"a": {"b": 1}}))
        (child,) = builder.children(root)
        assert line_text(child) == '"a": '

    def test_bare_scalar_root(self, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python(3.0))
        assert line_text(root) == "3"


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    def test_returns_lazy_generator(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        assert isinstance(renderer.render(root), types.GeneratorType)

    def test_levels_and_texts(self, renderer: TreeRenderer, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        lines = [(line.level, line.text) for line in renderer.render(root)]
        assert lines == [
            (0, ""),
            (1, '"a": 1'),
            (1, '"b": '),
            (2, '"[0]": true'),
            (2, '"[1]": null'),
            (2, '"[2]": "x"'),
        ]

    def test_restartable(self, renderer: TreeRenderer, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        assert list(renderer.render(root)) == list(renderer.render(root))

    def test_start_level(self, renderer: TreeRenderer, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python({"a": 1}))
        assert [line.level for line in renderer.render(root, level=3)] == [3, 4]

    def test_collapsed_root_yields_only_itself(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        root.expanded = False
        lines = list(renderer.render(root))
        assert len(lines) == 1
        assert lines[0].indicator == "▶"

    def test_collapse_override_hides_subtree(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        lines = list(renderer.render(root, overrides={("b",): False}))
        assert [line.text for line in lines] == ["", '"a": 1', '"b": ']
        assert lines[-1].expanded is False

    def test_collapsed_scalar_flag_is_ignored(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python({"a": 1}))
        full = list(renderer.render(root))
        lines = list(renderer.render(root, overrides={("a",): False}))
        assert [line.text for line in lines] == [line.text for line in full]

    def test_empty_containers_render_single_line(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python({"a": {}, "b": []}))
        assert [line.text for line in renderer.render(root)] == ["", '"a": ', '"b": ']

    def test_paths_reported(self, renderer: TreeRenderer, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python({"b": [True]}))
        assert [line.path for line in renderer.render(root)] == [(), ("b",), ("b", 0)]


# ---------------------------------------------------------------------------
# Textual and visual indentation
# ---------------------------------------------------------------------------


class TestIndentation:
    def test_render_text_scenario(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python(SCENARIO))
        assert renderer.render_text(root) == SCENARIO_TEXT

    def test_render_text_custom_unit(self, builder: TreeBuilder) -> None:
        renderer = TreeRenderer(config=FormatterConfig(indent_unit=4))
        root = builder.build(DynamicValue.from_python({"a": [1]}))
        assert renderer.render_text(root) == '\n    "a": \n        "[0]": 1'

    def test_multiline_string_stays_on_one_line(
        self, renderer: TreeRenderer, builder: TreeBuilder
    ) -> None:
        root = builder.build(DynamicValue.from_python({"a": "x\ny", "b": 1}))
        assert renderer.render_text(root) == '\n  "a": "x\\ny"\n  "b": 1'

    def test_pixel_offset(self, renderer: TreeRenderer, builder: TreeBuilder) -> None:
        root = builder.build(DynamicValue.from_python({"a": [1]}))
        offsets = [renderer.pixel_offset(line) for line in renderer.render(root)]
        assert offsets == [0, 20, 40]
