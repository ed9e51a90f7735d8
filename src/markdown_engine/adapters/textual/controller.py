"""Textual adapter exposing a ``TextArea`` as a text surface and routing keys to formatters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from markdown_engine.buffer import (
    Selection,
    byte_to_char_pos,
    char_to_byte_pos,
    find_safe_utf8_boundary,
)
from markdown_engine.format import apply_text_formatting, format_all_tables, toolbar
from markdown_engine.handlers import handle_enter_for_lists
from markdown_engine.keymaps import Shortcut, ShortcutRegistry
from markdown_engine.render import render
from markdown_engine.runtime import telemetry
from markdown_engine.runtime.telemetry import span
from markdown_engine.settings import EditorSettings

Location = tuple[int, int]

# Textual names some printable keys instead of reporting the character.
_KEY_ALIASES = {
    "number_sign": "#",
    "asterisk": "*",
    "minus": "-",
    "underscore": "_",
    "grave_accent": "`",
}


def location_to_index(text: str, location: Location) -> int:
    """Character offset of a ``(row, column)`` location, clamped to ``text``."""

    row, column = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    column = max(0, min(column, len(lines[row])))
    return sum(len(line) + 1 for line in lines[:row]) + column


def index_to_location(text: str, index: int) -> Location:
    index = max(0, min(index, len(text)))
    before = text[:index]
    row = before.count("\n")
    return row, index - (before.rfind("\n") + 1)


def _text_area_selection(start: Location, end: Location) -> Any:
    from textual.widgets.text_area import Selection as TextAreaSelection

    return TextAreaSelection(start, end)


class TextAreaSurface:
    """Reads and writes a Textual ``TextArea``, converting locations to byte offsets."""

    def __init__(
        self,
        text_area: Any,
        *,
        selection_factory: Callable[[Location, Location], Any] = _text_area_selection,
        logger_name: str | None = None,
    ) -> None:
        self.text_area = text_area
        self._selection_factory = selection_factory
        self._logger_name = logger_name

    def read_selection(self) -> Selection:
        text = self.text_area.text
        anchor, cursor = self.text_area.selection
        start = location_to_index(text, anchor)
        end = location_to_index(text, cursor)
        if start > end:
            start, end = end, start
        return Selection(text, char_to_byte_pos(text, start), char_to_byte_pos(text, end))

    def write(self, text: str, start: int, end: int) -> str:
        with span(
            "surface::write",
            logger_name=self._logger_name,
            component="surface",
            metadata={"start": start, "end": end},
        ):
            self.text_area.text = text
            start_char = byte_to_char_pos(text, find_safe_utf8_boundary(text, start))
            end_char = byte_to_char_pos(text, find_safe_utf8_boundary(text, end))
            self.text_area.selection = self._selection_factory(
                index_to_location(text, start_char), index_to_location(text, end_char)
            )
            self.text_area.focus()
            return text


def _noop(*_args: object, **_kwargs: object) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorHooks:
    """Callbacks invoked by the controller to update the host UI."""

    update_preview: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop


def normalize_key(key: str) -> Optional[Shortcut]:
    """Turn a Textual key name such as ``ctrl+b`` into a ``Shortcut``."""

    if not key:
        return None
    try:
        shortcut = Shortcut.parse(key)
    except ValueError:
        return None
    name = _KEY_ALIASES.get(shortcut.key, shortcut.key)
    return Shortcut(name, shortcut.ctrl, shortcut.alt, shortcut.shift)


class MarkdownEditorController:
    """Routes key presses and toolbar actions from a Textual host onto a surface."""

    def __init__(
        self,
        surface: TextAreaSurface,
        registry: ShortcutRegistry,
        *,
        settings: EditorSettings | None = None,
        hooks: EditorHooks | None = None,
    ) -> None:
        self.surface = surface
        self.registry = registry
        self.settings = settings or EditorSettings()
        self.hooks = hooks or EditorHooks()

    def handle_key(self, key: str) -> bool:
        """Apply the formatting bound to ``key``; ``enter`` continues lists."""

        if key == "enter":
            handle_enter_for_lists(self.surface)
            self.refresh_preview()
            return True

        shortcut = normalize_key(key)
        if shortcut is None:
            return False
        action = self.registry.resolve_action(
            shortcut.key, ctrl=shortcut.ctrl, alt=shortcut.alt, shift=shortcut.shift
        )
        if action is None:
            return False
        apply_text_formatting(action.kind, self.surface, self.settings)
        self.hooks.update_status(action.description or action.id)
        self.refresh_preview()
        return True

    def apply(self, name: str) -> str:
        """Apply a toolbar action by name, e.g. ``"bold"`` or ``"table"``."""

        kind = toolbar(self.settings)[name]
        text = apply_text_formatting(kind, self.surface, self.settings)
        self.refresh_preview()
        return text

    def format_tables(self) -> str:
        text = format_all_tables(self.surface)
        self.refresh_preview()
        return text

    def source(self) -> str:
        return self.surface.read_selection().full_text

    def render_html(self) -> str:
        return render(self.source(), self.settings.dialect)

    def export_html(self, path: Path) -> Path:
        """Write the buffer rendered in the configured dialect to ``path``."""

        path.write_text(self.render_html(), encoding="utf-8")
        telemetry.record_event(
            "export.html", data={"path": str(path), "dialect": self.settings.dialect.value}
        )
        self.hooks.update_status(f"Exported {path}")
        return path

    def refresh_preview(self) -> None:
        self.hooks.update_preview(self.source())


__all__ = [
    "EditorHooks",
    "MarkdownEditorController",
    "TextAreaSurface",
    "index_to_location",
    "location_to_index",
    "normalize_key",
]
