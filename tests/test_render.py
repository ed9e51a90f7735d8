import pytest

from markdown_engine.render import Dialect, build_parser, render


def test_dialect_parse_is_case_insensitive() -> None:
    assert Dialect.parse("GitHub") is Dialect.GITHUB
    assert Dialect.parse(" common ") is Dialect.COMMON


def test_dialect_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Dialect.parse("wiki")


def test_dialect_labels() -> None:
    assert str(Dialect.COMMON) == "Common"
    assert str(Dialect.GITHUB) == "GitHub"


def test_common_rendering() -> None:
    assert render("**bold**") == "<p><strong>bold</strong></p>\n"


def test_strikethrough_only_in_github() -> None:
    assert "<s>gone</s>" in render("~~gone~~", Dialect.GITHUB)
    assert "<s>" not in render("~~gone~~", Dialect.COMMON)


def test_tables_only_in_github() -> None:
    text = "| a |\n|---|\n| 1 |"

    assert "<table>" in render(text, Dialect.GITHUB)
    assert "<table>" not in render(text, Dialect.COMMON)


def test_task_lists_in_github() -> None:
    html = render("- [ ] todo\n- [x] done", Dialect.GITHUB)

    assert 'type="checkbox"' in html
    assert "checked" in html


def test_parser_is_cached() -> None:
    assert build_parser(Dialect.GITHUB) is build_parser(Dialect.GITHUB)
