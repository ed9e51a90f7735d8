"""Dataclasses describing keyboard shortcuts and the formatting actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass

from markdown_engine.format.dispatch import TextFormattingType

_MODIFIERS = ("ctrl", "alt", "shift")


@dataclass(frozen=True, slots=True)
class Shortcut:
    """Key plus exact modifier state, compared the way a keydown event reports it."""

    key: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")

    def matches(
        self, key: str, *, ctrl: bool = False, alt: bool = False, shift: bool = False
    ) -> bool:
        return (
            key == self.key
            and ctrl == self.ctrl
            and alt == self.alt
            and shift == self.shift
        )

    @property
    def token(self) -> str:
        active = [name for name in _MODIFIERS if getattr(self, name)]
        return "+".join([*active, self.key])

    @classmethod
    def parse(cls, token: str) -> "Shortcut":
        """Build a shortcut from ``ctrl+alt+shift+<key>`` style tokens."""

        parts = token.strip().split("+")
        # a trailing empty part means the key itself is "+"
        if len(parts) > 1 and parts[-1] == "":
            parts = parts[:-2] + ["+"]
        *modifiers, key = parts
        flags = {name.strip().lower() for name in modifiers}
        unknown = flags.difference(_MODIFIERS)
        if unknown:
            raise ValueError(f"Unknown modifiers {sorted(unknown)} in '{token}'")
        return cls(key, "ctrl" in flags, "alt" in flags, "shift" in flags)


@dataclass(frozen=True, slots=True)
class FormatAction:
    """Named formatting action a shortcut can trigger."""

    id: str
    kind: TextFormattingType
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("FormatAction id cannot be empty")


@dataclass(frozen=True, slots=True)
class ShortcutBinding:
    """Associates a shortcut with a registered action id."""

    id: str
    shortcut: Shortcut
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.shortcut.token


__all__ = ["FormatAction", "Shortcut", "ShortcutBinding"]
