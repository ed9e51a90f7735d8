from markdown_engine.tables import (
    align_table,
    contains_markdown_table,
    format_tables,
    is_table_divider,
    is_table_header,
    iter_table_spans,
)

TABLE = "| Name | Qty |\n|:--|--:|\n| apple | 3 |\n| kiwi | 12 |"


def test_header_and_divider_detection() -> None:
    assert is_table_header("| a | b |")
    assert not is_table_header("| | |")
    assert is_table_divider("|:---|---:|")
    assert not is_table_divider("| a | b |")


def test_contains_markdown_table() -> None:
    assert contains_markdown_table(TABLE)
    assert not contains_markdown_table("| just | pipes |\nno divider")
    assert not contains_markdown_table("plain text")


def test_table_inside_code_fence_is_ignored() -> None:
    text = "```\n| a | b |\n|---|---|\n```"

    assert not contains_markdown_table(text)
    assert format_tables(text) == text


def test_format_tables_aligns_columns() -> None:
    assert format_tables(TABLE) == (
        "| Name  | Qty |\n"
        "| :---- | --: |\n"
        "| apple |   3 |\n"
        "| kiwi  |  12 |"
    )


def test_format_tables_keeps_surrounding_text() -> None:
    text = "Intro\n\n| a | b |\n|---|---|\n| 1 |\n\nOutro"

    assert format_tables(text) == (
        "Intro\n\n| a   | b   |\n| --- | --- |\n| 1   |     |\n\nOutro"
    )


def test_center_alignment() -> None:
    assert align_table(["| title |", "|:-:|", "| x |"]) == [
        "| title |",
        "| :---: |",
        "|   x   |",
    ]


def test_indented_table_keeps_indent() -> None:
    assert align_table(["  | a |", "  |---|"]) == ["  | a   |", "  | --- |"]


def test_iter_table_spans() -> None:
    lines = ["| a |", "|---|", "| 1 |", "", "| b |", "|---|"]

    assert list(iter_table_spans(lines)) == [(0, 3), (4, 6)]

