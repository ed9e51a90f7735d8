"""Built-in shortcuts for the most common formatting actions."""

from __future__ import annotations

from typing import Iterable, Sequence

from markdown_engine.format.dispatch import toolbar
from markdown_engine.settings import EditorSettings

from .models import FormatAction, Shortcut, ShortcutBinding
from .registry import ShortcutRegistry

_DEFAULT_ACTION_IDS: tuple[tuple[str, str], ...] = (
    ("bold", "Bold text"),
    ("heading", "Cycle heading level"),
    ("code_block", "Toggle fenced code block"),
    ("inline_code", "Monospace text"),
)

DEFAULT_BINDINGS: tuple[ShortcutBinding, ...] = (
    ShortcutBinding(
        id="format.bold",
        shortcut=Shortcut("b", ctrl=True),
        action_id="bold",
        description="Bold text",
    ),
    ShortcutBinding(
        id="format.heading",
        shortcut=Shortcut("h", ctrl=True),
        action_id="heading",
        description="Cycle heading level",
    ),
    ShortcutBinding(
        id="format.code_block",
        shortcut=Shortcut("#", ctrl=True),
        action_id="code_block",
        description="Toggle fenced code block",
    ),
    ShortcutBinding(
        id="format.inline_code",
        shortcut=Shortcut("m", ctrl=True),
        action_id="inline_code",
        description="Monospace text",
    ),
)


def default_actions(settings: EditorSettings | None = None) -> tuple[FormatAction, ...]:
    catalogue = toolbar(settings)
    return tuple(
        FormatAction(id=action_id, kind=catalogue[action_id], description=description)
        for action_id, description in _DEFAULT_ACTION_IDS
    )


def load_default_shortcuts(
    registry: ShortcutRegistry,
    *,
    replace: bool = False,
    settings: EditorSettings | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[ShortcutBinding] | None = None,
) -> None:
    """Register the built-in actions and the shortcuts bound to them."""

    for action in default_actions(settings):
        registry.register_action(action, replace=replace)

    included = set(include_bindings) if include_bindings is not None else None
    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if included is not None and binding.id not in included:
            continue
        if binding.id in excluded:
            continue
        registry.register(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register(binding, replace=replace)


__all__ = ["DEFAULT_BINDINGS", "default_actions", "load_default_shortcuts"]
