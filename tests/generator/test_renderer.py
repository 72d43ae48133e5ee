# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Jinja2 template registry."""

from pathlib import Path

import pytest

from apiforge.generator.config import Configuration, Rename, TemplateFile
from apiforge.generator.errors import ResolveError, ResolveErrorKind
from apiforge.generator.renderer import (
    ARRAY_TEMPLATE,
    OPTIONAL_TEMPLATE,
    JinjaRenderer,
    file_name_template_name,
    rename_template_name,
)

# ###############
# Test Helpers
# ###############


def _configuration(**overrides: object) -> Configuration:
    """Return a Rust-flavoured configuration with *overrides* applied."""
    data: dict[str, object] = {
        "integer_type": "i64",
        "string_type": "String",
        "boolean_type": "bool",
        "array_type": "Vec<{{ value }}>",
        "optional_type": "Option<{{ value }}>",
    }
    data.update(overrides)
    return Configuration.model_validate(data)


# ###############
# Rendering
# ###############


class TestRender:
    def test_render(self) -> None:
        renderer = JinjaRenderer({"greeting": "Hello {{ name }}!"})
        assert renderer.render("greeting", {"name": "world"}) == "Hello world!"

    def test_no_html_escaping(self) -> None:
        renderer = JinjaRenderer({"t": "{{ value }}"})
        assert renderer.render("t", {"value": "Vec<Option<&str>>"}) == "Vec<Option<&str>>"

    def test_trailing_newline_is_kept(self) -> None:
        renderer = JinjaRenderer({"t": "struct {{ name }};\n"})
        assert renderer.render("t", {"name": "Foo"}) == "struct Foo;\n"

    def test_unknown_template(self) -> None:
        renderer = JinjaRenderer({})
        with pytest.raises(ResolveError) as exc_info:
            renderer.render("missing", {})
        assert exc_info.value.kind is ResolveErrorKind.MISSING_TEMPLATE

    def test_undefined_placeholder_fails(self) -> None:
        renderer = JinjaRenderer({"t": "{{ nope }}"})
        with pytest.raises(ResolveError) as exc_info:
            renderer.render("t", {})
        assert exc_info.value.kind is ResolveErrorKind.RENDER_FAILED
        assert exc_info.value.value == "t"

    def test_expression_error_fails_as_render_error(self) -> None:
        renderer = JinjaRenderer({"t": "{{ 1 // 0 }}"})
        with pytest.raises(ResolveError) as exc_info:
            renderer.render("t", {})
        assert exc_info.value.kind is ResolveErrorKind.RENDER_FAILED
        assert "ZeroDivisionError" in str(exc_info.value)

    def test_filter_type_error_fails_as_render_error(self) -> None:
        renderer = JinjaRenderer({"t": "{{ value | round }}"})
        with pytest.raises(ResolveError) as exc_info:
            renderer.render("t", {"value": "text"})
        assert exc_info.value.kind is ResolveErrorKind.RENDER_FAILED

    def test_syntax_error_fails_at_registration(self) -> None:
        with pytest.raises(ResolveError) as exc_info:
            JinjaRenderer({"broken": "{% for x in %}"})
        assert exc_info.value.kind is ResolveErrorKind.RENDER_FAILED

    def test_has_template(self) -> None:
        renderer = JinjaRenderer({"t": "x"})
        assert renderer.has_template("t")
        assert not renderer.has_template("u")


# ###############
# Registry built from a configuration
# ###############


class TestFromConfiguration:
    def test_registers_wrappers(self, tmp_path: Path) -> None:
        renderer = JinjaRenderer.from_configuration(_configuration(), tmp_path)
        assert renderer.render(ARRAY_TEMPLATE, {"value": "u8"}) == "Vec<u8>"
        assert renderer.render(OPTIONAL_TEMPLATE, {"value": "u8"}) == "Option<u8>"

    def test_registers_template_files(self, tmp_path: Path) -> None:
        (tmp_path / "dto.rs.j2").write_text("pub struct {{ dto.name.original }};\n", encoding="utf-8")
        config = _configuration(
            template_files=[
                {"template_path": "dto.rs.j2", "target_path": "{{ dto.name.snake_case }}.rs", "resolve_strategy": "x"}
            ]
        )
        renderer = JinjaRenderer.from_configuration(config, tmp_path)
        data = {"dto": {"name": {"original": "ChatPhoto", "snake_case": "chat_photo"}}}
        assert renderer.render("dto.rs.j2", data) == "pub struct ChatPhoto;\n"
        assert renderer.render(file_name_template_name("dto.rs.j2"), data) == "chat_photo.rs"

    def test_template_in_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "rust").mkdir()
        (tmp_path / "rust" / "mod.rs.j2").write_text("mod x;", encoding="utf-8")
        config = _configuration(
            template_files=[TemplateFile(template_path="rust/mod.rs.j2", target_path="mod.rs", resolve_strategy="x")]
        )
        renderer = JinjaRenderer.from_configuration(config, tmp_path)
        assert renderer.render("rust/mod.rs.j2", {}) == "mod x;"

    def test_missing_template_file(self, tmp_path: Path) -> None:
        config = _configuration(
            template_files=[TemplateFile(template_path="missing.j2", target_path="out", resolve_strategy="x")]
        )
        with pytest.raises(ResolveError) as exc_info:
            JinjaRenderer.from_configuration(config, tmp_path)
        assert exc_info.value.kind is ResolveErrorKind.MISSING_TEMPLATE
        assert exc_info.value.value == "missing.j2"

    def test_first_rename_rule_wins(self, tmp_path: Path) -> None:
        config = _configuration(renames=[Rename(from_="type", to="kind"), Rename(from_="type", to="type_")])
        renderer = JinjaRenderer.from_configuration(config, tmp_path)
        assert renderer.render(rename_template_name("type"), {}) == "kind"

    @pytest.mark.parametrize("reserved", ["array", "optional"])
    def test_template_file_may_not_shadow_wrapper(self, tmp_path: Path, reserved: str) -> None:
        (tmp_path / reserved).write_text("{{ dtos }}", encoding="utf-8")
        config = _configuration(
            template_files=[TemplateFile(template_path=reserved, target_path="out", resolve_strategy="x")]
        )
        with pytest.raises(ResolveError) as exc_info:
            JinjaRenderer.from_configuration(config, tmp_path)
        assert exc_info.value.kind is ResolveErrorKind.TEMPLATE_NAME_CONFLICT
        assert exc_info.value.value == reserved

    def test_file_name_template_may_not_shadow_content_template(self, tmp_path: Path) -> None:
        (tmp_path / "dto").write_text("content", encoding="utf-8")
        (tmp_path / "dto_name").write_text("other content", encoding="utf-8")
        config = _configuration(
            template_files=[
                TemplateFile(template_path="dto", target_path="dto.rs", resolve_strategy="x"),
                TemplateFile(template_path="dto_name", target_path="name.rs", resolve_strategy="x"),
            ]
        )
        with pytest.raises(ResolveError) as exc_info:
            JinjaRenderer.from_configuration(config, tmp_path)
        assert exc_info.value.kind is ResolveErrorKind.TEMPLATE_NAME_CONFLICT
        assert exc_info.value.value == "dto_name"

    def test_same_template_file_twice_is_allowed(self, tmp_path: Path) -> None:
        (tmp_path / "mod.j2").write_text("mod", encoding="utf-8")
        entry = TemplateFile(template_path="mod.j2", target_path="mod.rs", resolve_strategy="x")
        renderer = JinjaRenderer.from_configuration(_configuration(template_files=[entry, entry]), tmp_path)
        assert renderer.render("mod.j2", {}) == "mod"
