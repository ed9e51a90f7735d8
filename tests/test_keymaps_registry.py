import pytest

from markdown_engine.format import TOOLBAR
from markdown_engine.keymaps import (
    DEFAULT_BINDINGS,
    FormatAction,
    Shortcut,
    ShortcutBinding,
    ShortcutConflictError,
    ShortcutRegistry,
    load_default_shortcuts,
)


def make_action(action_id: str = "bold") -> FormatAction:
    return FormatAction(id=action_id, kind=TOOLBAR[action_id])


def make_binding(
    *,
    binding_id: str,
    shortcut: Shortcut | None = None,
    action_id: str = "bold",
) -> ShortcutBinding:
    return ShortcutBinding(
        id=binding_id,
        shortcut=shortcut or Shortcut("b", ctrl=True),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="format.bold")

    registry.register(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.revision() == 1


def test_register_binding_requires_action() -> None:
    registry = ShortcutRegistry()

    with pytest.raises(KeyError):
        registry.register(make_binding(binding_id="format.bold"))


def test_register_binding_conflict_detection() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register(make_binding(binding_id="format.bold"))

    with pytest.raises(ShortcutConflictError) as excinfo:
        registry.register(make_binding(binding_id="format.bold.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["format.bold"]


def test_register_binding_replace_drops_conflict() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("italic"))
    registry.register(make_binding(binding_id="format.bold"))

    registry.register(
        make_binding(binding_id="format.italic", action_id="italic"), replace=True
    )

    assert [b.id for b in registry.iter_bindings()] == ["format.italic"]
    assert registry.resolve_action("b", ctrl=True).id == "italic"  # type: ignore[union-attr]


def test_duplicate_action_rejected() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_resolve_requires_exact_modifiers() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register(make_binding(binding_id="format.bold"))

    assert registry.resolve("b", ctrl=True) is not None
    assert registry.resolve("b") is None
    assert registry.resolve("b", ctrl=True, shift=True) is None


def test_unregister() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register(make_binding(binding_id="format.bold"))

    removed = registry.unregister("format.bold")

    assert removed is not None
    assert registry.resolve("b", ctrl=True) is None
    assert registry.unregister("format.bold") is None


def test_get_missing_entries_raise_key_error() -> None:
    registry = ShortcutRegistry()

    with pytest.raises(KeyError):
        registry.get_action("bold")
    with pytest.raises(KeyError):
        registry.get_binding("format.bold")


def test_shortcut_parse_and_token() -> None:
    assert Shortcut.parse("ctrl+b") == Shortcut("b", ctrl=True)
    assert Shortcut.parse("ctrl+shift+#").token == "ctrl+shift+#"
    assert Shortcut.parse("ctrl++") == Shortcut("+", ctrl=True)
    assert Shortcut("b", ctrl=True).matches("b", ctrl=True)
    with pytest.raises(ValueError):
        Shortcut.parse("hyper+b")


def test_load_default_shortcuts() -> None:
    registry = ShortcutRegistry()

    load_default_shortcuts(registry)

    stats = registry.stats()
    assert stats.action_count == 4
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert registry.resolve_action("#", ctrl=True).id == "code_block"  # type: ignore[union-attr]
    assert registry.resolve_action("m", ctrl=True).kind == TOOLBAR["inline_code"]  # type: ignore[union-attr]


def test_load_default_shortcuts_filters() -> None:
    registry = ShortcutRegistry()

    load_default_shortcuts(
        registry,
        include_bindings=["format.bold", "format.heading"],
        exclude_bindings=["format.heading"],
        extra_bindings=[
            make_binding(
                binding_id="format.heading.alt",
                shortcut=Shortcut("1", alt=True),
                action_id="heading",
            )
        ],
    )

    assert sorted(b.id for b in registry.iter_bindings()) == [
        "format.bold",
        "format.heading.alt",
    ]
