from markdown_engine.buffer import Selection
from markdown_engine.format import CodeBlock
from markdown_engine.format.codeblock import (
    EMPTY_BLOCK,
    append_after_block,
    connector_after,
    connector_before,
)


def make_block(selection: Selection) -> tuple:
    return tuple(CodeBlock(selection).format())


def test_empty_text_inserts_empty_block() -> None:
    assert make_block(Selection.caret("", 0)) == (EMPTY_BLOCK, 4, 4)


def test_caret_wraps_first_line() -> None:
    assert make_block(Selection.caret("Hello", 5)) == ("```\nHello\n```\n", 5, 5)


def test_caret_wraps_later_line_with_blank_separator() -> None:
    result = make_block(Selection.caret("Intro\nHello", 8))

    assert result == ("Intro\n\n```\nHello\n```\n", 10, 10)


def test_caret_on_trailing_empty_line_appends_block() -> None:
    assert make_block(Selection.caret("Hello\n", 6)) == ("Hello\n```\n\n```\n", 10, 10)


def test_inline_selection_moves_to_own_block() -> None:
    selection = Selection.matching("Say hello there", "hello")

    assert make_block(selection) == ("Say \n```\nhello\n```\n there", 8, 13)


def test_whole_line_after_block_gets_its_own_block() -> None:
    selection = Selection.matching("```\nA\n```\n\nB", "B")

    assert make_block(selection) == ("```\nA\n```\n\n```\nB\n```\n", 15, 16)


def test_multiline_selection() -> None:
    assert make_block(Selection.matching("a\nb", "a\nb")) == ("```\na\nb\n```\n", 4, 7)


def test_caret_inside_block_unwraps() -> None:
    assert make_block(Selection.caret("```\nHello\n```", 6)) == ("Hello", 2, 2)


def test_unwrap_joins_surrounding_paragraphs() -> None:
    text = "Intro\n\n```\ncode\n```\n\nOutro"

    result = make_block(Selection.caret(text, 12))

    assert result == ("Intro\ncode \nOutro", 7, 7)


def test_find_surrounding_block_ignores_block_before_selection() -> None:
    selection = Selection.matching("```\nA\n```\n\nB", "B")

    assert CodeBlock(selection).find_surrounding_block() is None


def test_find_surrounding_block() -> None:
    assert CodeBlock(Selection.caret("```\nx\n```", 5)).find_surrounding_block() == (0, 6)


def test_append_after_block() -> None:
    assert append_after_block("```\n", "") == "```\n"
    assert append_after_block("```\n", "\n\n\nnext") == "```\n\nnext"
    assert append_after_block("```\n", "next") == "```\n\nnext"


def test_connectors() -> None:
    assert connector_before("text", 2) == "\n"
    assert connector_before("text ", 0) == ""
    assert connector_before("text", 1) == " "
    assert connector_after("code", 2) == " \n"
    assert connector_after("code", 1) == " "
    assert connector_after("code ", 0) == ""


def test_block_before_another_block_keeps_one_blank_line() -> None:
    selection = Selection.matching("A\n\n```\nB\n```\n", "A")

    assert make_block(selection) == ("```\nA\n```\n\n```\nB\n```\n", 4, 5)


def test_empty_block_directly_before_another_block() -> None:
    result = make_block(Selection.caret("```\nA\n```", 0))

    assert result == ("```\n\n```\n```\nA\n```\n", 4, 4)


def test_empty_block_directly_after_another_block() -> None:
    result = make_block(Selection.caret("```\nA\n```", 9))

    assert result == ("```\nA\n```\n```\n\n```\n", 14, 14)


def test_append_after_block_attaches_following_fence() -> None:
    assert append_after_block("```\n\n```\n", "```\nA\n```") == "```\n\n```\n```\nA\n```\n"


def test_wrap_then_unwrap_restores_first_line() -> None:
    wrapped = CodeBlock(Selection.caret("Hello", 5)).format()

    unwrapped = CodeBlock(Selection.caret(wrapped.text, wrapped.start)).format()

    assert unwrapped.text == "Hello"


def test_wrap_then_unwrap_restores_paragraph_break() -> None:
    wrapped = CodeBlock(Selection.caret("Intro\nHello", 8)).format()
    assert wrapped.text == "Intro\n\n```\nHello\n```\n"

    unwrapped = CodeBlock(Selection.caret(wrapped.text, wrapped.start)).format()

    assert unwrapped.text == "Intro\nHello"
