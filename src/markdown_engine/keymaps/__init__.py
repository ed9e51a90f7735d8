"""Keyboard shortcut models, registry and defaults."""

from .defaults import DEFAULT_BINDINGS, default_actions, load_default_shortcuts
from .models import FormatAction, Shortcut, ShortcutBinding
from .registry import RegistryStats, ShortcutConflictError, ShortcutRegistry

__all__ = [
    "Shortcut",
    "ShortcutBinding",
    "FormatAction",
    "ShortcutRegistry",
    "ShortcutConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "default_actions",
    "load_default_shortcuts",
]
