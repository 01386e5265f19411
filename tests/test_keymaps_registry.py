from __future__ import annotations

import pytest

from phantom_editor.errors import KeymapConflictError
from phantom_editor.keymaps import ActionRef, Binding, KeySequence, KeymapRegistry
from phantom_editor.keymaps.defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_KEYMAP,
    apply_keymap,
    load_default_keymaps,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "normal",
    keys: tuple[str, ...] = ("d", "d"),
    action_id: str = "delete_line",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("normal.dd"))


def test_register_binding_bumps_revision() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    before = registry.revision()

    registry.register_binding(make_binding("normal.dd"))

    assert registry.revision() == before + 1
    assert registry.lookup("normal", "d d").id == "normal.dd"


def test_register_binding_conflict_raises() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_action(make_action("cut_line"))
    registry.register_binding(make_binding("normal.dd"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding("normal.cut", action_id="cut_line"))

    assert [conflict.id for conflict in excinfo.value.conflicts] == ["normal.dd"]


def test_same_chord_in_other_mode_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_binding(make_binding("normal.dd"))

    registry.register_binding(make_binding("visual.dd", mode="visual"))

    assert registry.stats().modes == ("normal", "visual")


def test_replace_drops_conflicting_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_action(make_action("cut_line"))
    registry.register_binding(make_binding("normal.dd"))

    registry.register_binding(
        make_binding("normal.cut", action_id="cut_line"), replace=True
    )

    assert registry.lookup("normal", "d d").action_id == "cut_line"
    with pytest.raises(KeyError):
        registry.get_binding("normal.dd")


def test_duplicate_binding_id_rejected_without_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_binding(make_binding("normal.dd"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding("normal.dd", keys=("x",)))


def test_bind_rebinds_chord_from_keymap_notation() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("undo"))
    registry.register_action(make_action("redo"))
    registry.bind("normal", "Ctrl+u", "undo")

    binding = registry.bind("normal", "Ctrl+u", "redo", source="user")

    assert binding.id == "normal.Ctrl+u"
    assert binding.source == "user"
    assert registry.lookup("normal", "Ctrl+u").action_id == "redo"
    assert registry.stats().binding_count == 1


def test_unregister_binding_removes_lookup() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_binding(make_binding("normal.dd"))
    before = registry.revision()

    removed = registry.unregister_binding("normal.dd")

    assert removed is not None
    assert registry.lookup("normal", "d d") is None
    assert registry.revision() == before + 1
    assert registry.unregister_binding("normal.dd") is None


def test_iter_bindings_filters_by_mode() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("delete_line"))
    registry.register_binding(make_binding("normal.dd"))
    registry.register_binding(make_binding("visual.d", mode="visual", keys=("d",)))

    ids = [binding.id for binding in registry.iter_bindings("visual")]

    assert ids == ["visual.d"]
    assert len(list(registry.iter_bindings())) == 2


def test_load_default_keymaps_registers_every_table() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == len(DEFAULT_ACTIONS)
    assert stats.binding_count == sum(len(table) for table in DEFAULT_KEYMAP.values())
    assert registry.lookup("normal", "d d").action_id == "delete_line"
    assert registry.lookup("normal", "Ctrl+Shift+Tab").action_id == "previous_tab"
    assert registry.lookup("file_select", "Enter").action_id == "select_file"
    assert registry.get_binding("normal.dd").source == "default"


def test_apply_keymap_rejects_unknown_table() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    with pytest.raises(KeyError):
        apply_keymap(registry, {"replace_mode": {"x": "undo"}})


def test_tab_table_binds_into_normal_mode() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    apply_keymap(registry, {"tab_mode": {"gt": "next_tab"}})

    assert registry.lookup("normal", "g t").action_id == "next_tab"
