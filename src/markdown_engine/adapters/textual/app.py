"""Executable Textual app that hosts the markdown formatting engine."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Markdown, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_engine.adapters.textual.app"
    ) from exc

from markdown_engine.keymaps import ShortcutRegistry, load_default_shortcuts
from markdown_engine.render import Dialect
from markdown_engine.runtime import telemetry
from markdown_engine.settings import EditorSettings

from .controller import EditorHooks, MarkdownEditorController, TextAreaSurface


class MarkdownTextArea(TextArea):
    """TextArea that offers key presses to the formatting controller first."""

    controller: MarkdownEditorController | None = None

    async def _on_key(self, event: events.Key) -> None:
        if self.controller and self.controller.handle_key(event.key):
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)


class MarkdownEngineApp(App[None]):
    """Editor pane plus a live markdown preview; HTML is written on export."""

    CSS = """
	Screen {
		layout: vertical;
	}

	Horizontal {
		height: 1fr;
	}

	#editor {
		width: 1fr;
		border: round $accent;
	}

	#preview {
		width: 1fr;
		border: round $secondary;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+t", "insert_table", "Table"),
        ("ctrl+l", "format_tables", "Format tables"),
        ("ctrl+e", "export_html", "Export HTML"),
    ]

    def __init__(
        self,
        *,
        settings: EditorSettings,
        initial_text: str = "",
        export_path: Path = Path("preview.html"),
    ) -> None:
        super().__init__()
        self.settings = settings
        self._initial_text = initial_text
        self._export_path = export_path
        self.controller: MarkdownEditorController | None = None
        self._preview: Markdown | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            yield MarkdownTextArea(self._initial_text, id="editor")
            self._preview = Markdown("", id="preview")
            yield self._preview
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        registry = ShortcutRegistry()
        load_default_shortcuts(registry, settings=self.settings)
        editor = self.query_one("#editor", MarkdownTextArea)
        self.controller = MarkdownEditorController(
            TextAreaSurface(editor),
            registry,
            settings=self.settings,
            hooks=EditorHooks(
                update_preview=self._update_preview,
                update_status=self._update_status,
            ),
        )
        editor.controller = self.controller
        self.controller.refresh_preview()
        self._update_status(f"Dialect: {self.settings.dialect}")
        editor.focus()

    def on_text_area_changed(self, _event: TextArea.Changed) -> None:
        if self.controller:
            self.controller.refresh_preview()

    def action_insert_table(self) -> None:
        if self.controller:
            self.controller.apply("table")

    def action_format_tables(self) -> None:
        if self.controller:
            self.controller.format_tables()

    def action_export_html(self) -> None:
        if self.controller:
            self.controller.export_html(self._export_path)

    def _update_preview(self, source: str) -> None:
        if self._preview:
            self._preview.update(source)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = EditorSettings.from_env()
    parser = argparse.ArgumentParser(description="Run the markdown engine Textual demo.")
    parser.add_argument(
        "--dialect",
        type=Dialect.parse,
        default=defaults.dialect,
        help="HTML export dialect: common or github (default: MARKDOWN_ENGINE_DIALECT or common)",
    )
    parser.add_argument(
        "--align-tables",
        action="store_true",
        default=defaults.align_tables,
        help="Align inserted tables (default: MARKDOWN_ENGINE_ALIGN_TABLES)",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Markdown file to open in the editor",
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="HTML export path (default: the --file path with .html, or preview.html)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    defaults = EditorSettings.from_env()
    settings = EditorSettings(
        dialect=args.dialect,
        align_tables=args.align_tables,
        bold_marker=defaults.bold_marker,
        italic_marker=defaults.italic_marker,
    )
    initial_text = args.file.read_text(encoding="utf-8") if args.file else ""
    telemetry.record_event(
        "app.start", data={"dialect": settings.dialect.value, "file": str(args.file or "")}
    )
    export_path = args.export or (
        args.file.with_suffix(".html") if args.file else Path("preview.html")
    )
    MarkdownEngineApp(
        settings=settings, initial_text=initial_text, export_path=export_path
    ).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
