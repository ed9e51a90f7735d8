"""Markdown to HTML rendering for the supported dialects."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from markdown_engine.runtime.telemetry import span


class Dialect(Enum):
    COMMON = "common"
    GITHUB = "github"

    @classmethod
    def parse(cls, value: str) -> "Dialect":
        """Case-insensitive lookup; raises ``ValueError`` for unknown names."""

        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown markdown dialect '{value}'.") from None

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {Dialect.COMMON: "Common", Dialect.GITHUB: "GitHub"}


@lru_cache(maxsize=None)
def build_parser(dialect: Dialect) -> MarkdownIt:
    if dialect is Dialect.GITHUB:
        return (
            MarkdownIt("commonmark")
            .enable("table")
            .enable("strikethrough")
            .use(tasklists_plugin)
        )
    return MarkdownIt("commonmark")


def render(text: str, dialect: Dialect = Dialect.COMMON) -> str:
    with span("render::html", component="render", metadata={"dialect": dialect.value}):
        return build_parser(dialect).render(text)


__all__ = ["Dialect", "build_parser", "render"]
