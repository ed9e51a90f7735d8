"""Editor settings resolved from ``MARKDOWN_ENGINE_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from markdown_engine.render import Dialect
from markdown_engine.runtime.telemetry import env, env_flag


@dataclass(frozen=True, slots=True)
class EditorSettings:
    dialect: Dialect = Dialect.COMMON
    align_tables: bool = False
    bold_marker: str = "**"
    italic_marker: str = "_"

    def __post_init__(self) -> None:
        if not self.bold_marker:
            raise ValueError("bold_marker cannot be empty")
        if not self.italic_marker:
            raise ValueError("italic_marker cannot be empty")
        if isinstance(self.dialect, str):
            object.__setattr__(self, "dialect", Dialect.parse(self.dialect))

    @classmethod
    def from_env(cls) -> "EditorSettings":
        return cls(
            dialect=Dialect.parse(env("DIALECT") or Dialect.COMMON.value),
            align_tables=env_flag("ALIGN_TABLES", False),
            bold_marker=env("BOLD_MARKER") or "**",
            italic_marker=env("ITALIC_MARKER") or "_",
        )


__all__ = ["EditorSettings"]
