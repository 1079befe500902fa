"""Tests for list, alias, value, binop, in/not-in, constant and join rendering."""

from __future__ import annotations

import pytest

from sqlaqt.errors import ConfigurationError, StructuralError
from sqlaqt.renderer import Renderer
from sqlaqt.settings import RenderSettings


class TestList:
    def test_default_separator(self, renderer: Renderer) -> None:
        assert renderer.render(["-list", ["-name", "a"], ["-name", "b"]]).sql == "a, b"

    def test_configured_separator(self, settings: RenderSettings) -> None:
        renderer = Renderer(settings.model_copy(update={"list_separator": ","}))
        assert renderer.render(["-list", ["-name", "a"], ["-name", "b"]]).sql == "a,b"

    def test_values_bound_in_order(self, renderer: Renderer) -> None:
        result = renderer.render(["-list", ["-value", "x"], ["-name", "a"], ["-value", 2]])
        assert result.sql == "?, a, ?"
        assert result.binds == ["x", 2]


class TestAlias:
    def test_array_form(self, backtick_renderer: Renderer) -> None:
        result = backtick_renderer.render(["-alias", ["-name", "me", "foo"], "f"])
        assert result.sql == "`me`.`foo` AS f"

    def test_hash_form(self, renderer: Renderer) -> None:
        result = renderer.render({"type": "alias", "ident": ["-name", "foo"], "as": "f"})
        assert result.sql == "foo AS f"

    def test_alias_not_quoted(self, backtick_renderer: Renderer) -> None:
        assert backtick_renderer.render(["-alias", ["-name", "a"], "Total"]).sql == "`a` AS Total"

    def test_missing_alias(self, renderer: Renderer) -> None:
        with pytest.raises(StructuralError):
            renderer.render(["-alias", ["-name", "a"]])


class TestValue:
    @pytest.mark.parametrize("literal", ["O'Reilly", 0, 1.5, None, True, "'; DROP TABLE t; --"])
    def test_never_inlined(self, renderer: Renderer, literal: object) -> None:
        result = renderer.render(["-value", literal])
        assert result.sql == "?"
        assert result.binds == [literal]

    def test_configured_placeholder(self, settings: RenderSettings) -> None:
        renderer = Renderer(settings.model_copy(update={"placeholder": "%s"}))
        result = renderer.render_expression(["==", ["-name", "a"], ["-value", 1]])
        assert result.sql == "a = %s"

    def test_requires_one_literal(self, renderer: Renderer) -> None:
        with pytest.raises(StructuralError):
            renderer.render(["-value"])


class TestBinop:
    @pytest.mark.parametrize(
        "op,token",
        [("==", "="), ("=", "="), ("!=", "!="), ("<", "<"), (">=", ">="), ("not_like", "NOT LIKE")],
    )
    def test_operator_mapping(self, renderer: Renderer, op: str, token: str) -> None:
        result = renderer.render_expression([op, ["-name", "a"], ["-value", 1]])
        assert result.sql == f"a {token} ?"

    def test_name_on_both_sides(self, renderer: Renderer) -> None:
        result = renderer.render_expression(["==", ["-name", "t", "id"], ["-name", "u", "id"]])
        assert result.sql == "t.id = u.id"
        assert result.binds == []


class TestIn:
    def test_in(self, renderer: Renderer) -> None:
        result = renderer.render_expression(["-in", ["-name", "x"], ["-value", 1], ["-value", 2]])
        assert result.sql == "x IN (?, ?)"
        assert result.binds == [1, 2]

    def test_not_in(self, renderer: Renderer) -> None:
        result = renderer.render_expression(["-not_in", ["-name", "x"], ["-value", 5]])
        assert result.sql == "x NOT IN (?)"
        assert result.binds == [5]

    @pytest.mark.parametrize("tag", ["-in", "-not_in"])
    @pytest.mark.parametrize("field", [["-name", "x"], ["-name", "t", "x"], ["-value", 7]])
    def test_empty_list_is_false(self, renderer: Renderer, tag: str, field: list) -> None:
        result = renderer.render_expression([tag, field])
        assert result.sql == "0 = 1"
        assert result.binds == []

    def test_quoted_field(self, backtick_renderer: Renderer) -> None:
        result = backtick_renderer.render_expression(["-in", ["-name", "x"], ["-value", 1]])
        assert result.sql == "`x` IN (?)"

    def test_requires_field(self, renderer: Renderer) -> None:
        with pytest.raises(StructuralError):
            renderer.render_expression(["-in"])


class TestConstants:
    def test_true(self, renderer: Renderer) -> None:
        assert renderer.render(["-true"]).sql == "1 = 1"

    def test_false(self, renderer: Renderer) -> None:
        assert renderer.render(["-false"]).sql == "0 = 1"


class TestJoin:
    def test_on(self, renderer: Renderer) -> None:
        ast = {
            "type": "join",
            "tablespec": ["-name", "t"],
            "on": ["==", ["-name", "t", "id"], ["-name", "u", "id"]],
        }
        assert renderer.render(ast).sql == "JOIN t ON (t.id = u.id)"

    def test_on_with_group(self, renderer: Renderer) -> None:
        ast = {
            "type": "join",
            "tablespec": ["-name", "t"],
            "on": [
                ["==", ["-name", "t", "id"], ["-name", "u", "id"]],
                ["-or", [">", ["-name", "t", "n"], ["-value", 1]], ["-false"]],
            ],
        }
        result = renderer.render(ast)
        assert result.sql == "JOIN t ON (t.id = u.id AND (t.n > ? OR 0 = 1))"
        assert result.binds == [1]

    def test_using(self, backtick_renderer: Renderer) -> None:
        ast = {"type": "join", "tablespec": ["-name", "t"], "using": ["-name", "id"]}
        assert backtick_renderer.render(ast).sql == "JOIN `t` USING (`id`)"

    def test_using_list(self, renderer: Renderer) -> None:
        ast = {
            "type": "join",
            "tablespec": ["-alias", ["-name", "orders"], "o"],
            "using": ["-list", ["-name", "id"], ["-name", "region"]],
        }
        assert renderer.render(ast).sql == "JOIN orders AS o USING (id, region)"

    def test_neither_on_nor_using(self, renderer: Renderer) -> None:
        with pytest.raises(ConfigurationError, match="No 'on' or 'using'"):
            renderer.render({"type": "join", "tablespec": ["-name", "t"]})

    def test_both_on_and_using(self, renderer: Renderer) -> None:
        ast = {
            "type": "join",
            "tablespec": ["-name", "t"],
            "on": ["==", ["-name", "a"], ["-name", "b"]],
            "using": ["-name", "id"],
        }
        with pytest.raises(ConfigurationError, match="only one"):
            renderer.render(ast)

    def test_missing_tablespec(self, renderer: Renderer) -> None:
        with pytest.raises(StructuralError, match="tablespec"):
            renderer.render({"type": "join", "using": ["-name", "id"]})

    def test_array_form_rejected(self, renderer: Renderer) -> None:
        with pytest.raises(StructuralError, match="join must be a mapping"):
            renderer.render(["-join", ["-name", "u"], ["-name", "id"]])
