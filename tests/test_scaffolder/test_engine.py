"""Tests for the ``{{variable}}`` substitution engine."""

from __future__ import annotations

import pytest

from boots.scaffolder.engine import TemplateEngine


pytestmark = pytest.mark.unit


class TestRender:
    def test_replaces_registered_tokens(self) -> None:
        engine = TemplateEngine({"project_name": "my-api"})
        assert engine.render("name = \"{{project_name}}\"") == 'name = "my-api"'

    def test_replaces_every_occurrence(self) -> None:
        engine = TemplateEngine({"x": "1"})
        assert engine.render("{{x}}-{{x}}-{{x}}") == "1-1-1"

    def test_unknown_token_passes_through(self) -> None:
        assert TemplateEngine().render("{{unset}}") == "{{unset}}"

    def test_unknown_token_passes_through_alongside_known(self) -> None:
        engine = TemplateEngine({"a": "A"})
        assert engine.render("{{a}} {{unset}}") == "A {{unset}}"

    def test_single_pass(self) -> None:
        engine = TemplateEngine({"a": "{{b}}", "b": "X"})
        assert engine.render("{{a}}") == "{{b}}"

    def test_single_pass_independent_of_insertion_order(self) -> None:
        engine = TemplateEngine({"b": "X", "a": "{{b}}"})
        assert engine.render("{{a}}{{b}}") == "{{b}}X"

    def test_key_prefix_does_not_shadow_longer_key(self) -> None:
        engine = TemplateEngine({"name": "a", "name_snake": "b"})
        assert engine.render("{{name_snake}}/{{name}}") == "b/a"

    def test_whitespace_inside_braces_is_not_a_token(self) -> None:
        engine = TemplateEngine({"name": "a"})
        assert engine.render("{{ name }}") == "{{ name }}"

    def test_empty_value(self) -> None:
        engine = TemplateEngine({"deps": ""})
        assert engine.render("[deps]\n{{deps}}\n") == "[deps]\n\n"

    def test_jsx_double_braces_untouched(self) -> None:
        engine = TemplateEngine({"project_name": "board"})
        source = "<div style={{ padding: '2rem' }}><h1>{{project_name}}</h1></div>"
        assert engine.render(source) == "<div style={{ padding: '2rem' }}><h1>board</h1></div>"

    def test_regex_metacharacters_in_keys_and_values(self) -> None:
        engine = TemplateEngine({"a.b": r"\1$0"})
        assert engine.render("{{a.b}} {{aXb}}") == r"\1$0 {{aXb}}"


class TestBindings:
    def test_set_returns_self_and_overwrites(self) -> None:
        engine = TemplateEngine({"k": "old"})
        assert engine.set("k", "new") is engine
        assert engine.render("{{k}}") == "new"

    def test_variables_is_a_copy(self) -> None:
        engine = TemplateEngine({"k": "v"})
        engine.variables["k"] = "mutated"
        assert engine.variables == {"k": "v"}

    def test_constructor_copies_mapping(self) -> None:
        source = {"k": "v"}
        engine = TemplateEngine(source)
        source["k"] = "changed"
        assert engine.render("{{k}}") == "v"
