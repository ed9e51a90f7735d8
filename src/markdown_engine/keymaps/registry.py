"""Shortcut registry responsible for storing formatting actions and key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from markdown_engine.runtime.telemetry import span

from .models import FormatAction, Shortcut, ShortcutBinding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int


class ShortcutConflictError(RuntimeError):
    """Raised when a new binding reuses a key combination that is already bound."""

    def __init__(self, binding: ShortcutBinding, conflicts: Iterable[ShortcutBinding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' ({binding.key_signature}) conflicts with "
            f"{[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class ShortcutRegistry:
    """Owns formatting actions and the shortcuts bound to them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, FormatAction] = {}
        self._bindings: Dict[str, ShortcutBinding] = {}
        self._by_signature: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> FormatAction:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> ShortcutBinding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: FormatAction, *, replace: bool = False) -> FormatAction:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register(self, binding: ShortcutBinding, *, replace: bool = False) -> ShortcutBinding:
        with span(
            "keymaps::register",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "shortcut": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata("conflicts", ",".join(c.id for c in conflicts))
                raise ShortcutConflictError(binding, conflicts)
            if not replace and binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in [*conflicts, self._bindings.get(binding.id)]:
                if stale is not None:
                    self._drop(stale)

            self._bindings[binding.id] = binding
            self._by_signature[binding.key_signature] = binding.id
            self._revision += 1
            return binding

    def unregister(self, binding_id: str) -> Optional[ShortcutBinding]:
        with span(
            "keymaps::unregister",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._drop(binding)
            self._revision += 1
            return binding

    def detect_conflicts(self, binding: ShortcutBinding) -> list[ShortcutBinding]:
        existing_id = self._by_signature.get(binding.key_signature)
        if existing_id is None or existing_id == binding.id:
            return []
        return [self._bindings[existing_id]]

    def resolve(
        self, key: str, *, ctrl: bool = False, alt: bool = False, shift: bool = False
    ) -> Optional[ShortcutBinding]:
        """Return the binding matching a key event, if any."""

        token = Shortcut(key, ctrl, alt, shift).token
        binding_id = self._by_signature.get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def resolve_action(
        self, key: str, *, ctrl: bool = False, alt: bool = False, shift: bool = False
    ) -> Optional[FormatAction]:
        binding = self.resolve(key, ctrl=ctrl, alt=alt, shift=shift)
        if binding is None:
            return None
        return self.get_action(binding.action_id)

    def iter_bindings(self) -> Iterator[ShortcutBinding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
        )

    def _drop(self, binding: ShortcutBinding) -> None:
        self._bindings.pop(binding.id, None)
        if self._by_signature.get(binding.key_signature) == binding.id:
            self._by_signature.pop(binding.key_signature, None)


__all__ = [
    "RegistryStats",
    "ShortcutConflictError",
    "ShortcutRegistry",
]
