"""Tests for template loading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from tmplr.errors import MissingInputError, RenderError, TemplateLoadError
from tmplr.templates import build_environment, load_template, render_template


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def _render(template, variables) -> str:
    buffer = io.StringIO()
    render_template(template, variables, buffer)
    return buffer.getvalue()


def test_load_template_without_path_raises():
    with pytest.raises(MissingInputError, match="No input file provided!"):
        load_template(None)
    with pytest.raises(MissingInputError):
        load_template("")


def test_load_template_missing_file_raises(tmp_path: Path):
    with pytest.raises(TemplateLoadError, match="missing.txt"):
        load_template(tmp_path / "missing.txt")


def test_load_template_syntax_error_reports_line(tmp_path: Path):
    path = _write(tmp_path / "bad.txt", "line one\n{% if name %}\nunterminated\n")
    with pytest.raises(TemplateLoadError, match="Error parsing the input file"):
        load_template(path)


def test_load_template_keeps_trailing_newline(tmp_path: Path):
    path = _write(tmp_path / "hello.txt", "Hello, {{ name }}!\n")
    template = load_template(path)
    assert _render(template, {"name": "World"}) == "Hello, World!\n"


def test_load_template_supports_conditionals_and_loops(tmp_path: Path):
    path = _write(
        tmp_path / "list.txt",
        "{% if title %}{{ title }}:{% endif %}{% for c in letters %} {{ c }}{% endfor %}",
    )
    template = load_template(path)
    assert _render(template, {"title": "abc", "letters": "abc"}) == "abc: a b c"


def test_load_template_resolves_includes_next_to_template(tmp_path: Path):
    _write(tmp_path / "footer.txt", "-- {{ name }}")
    path = _write(tmp_path / "main.txt", "body\n{% include 'footer.txt' %}")
    template = load_template(path)
    assert _render(template, {"name": "ops"}) == "body\n-- ops"


def test_load_template_missing_include_fails_at_render(tmp_path: Path):
    path = _write(tmp_path / "main.txt", "{% include 'nope.txt' %}")
    template = load_template(path)
    with pytest.raises(RenderError, match="nope.txt"):
        _render(template, {})


def test_load_template_autoescape(tmp_path: Path):
    path = _write(tmp_path / "page.html", "<p>{{ body }}</p>")
    escaped = load_template(path, autoescape=True)
    raw = load_template(path)
    assert _render(escaped, {"body": "<b>"}) == "<p>&lt;b&gt;</p>"
    assert _render(raw, {"body": "<b>"}) == "<p><b></p>"


def test_build_environment_settings(tmp_path: Path):
    env = build_environment(tmp_path, autoescape=True)
    assert env.keep_trailing_newline is True
    assert env.autoescape is True
