"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from phantom_editor.errors import KeymapConflictError
from phantom_editor.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapRegistry:
    """Owns action references and per-mode binding tables.

    Each mode maps a key signature to at most one binding. ``revision``
    increases on every binding change so resolvers know when to rebuild.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
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

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflict = self.lookup(binding.mode, binding.key_signature)
            if conflict is not None and conflict.id != binding.id:
                if not replace:
                    handle.add_metadata("conflicts", conflict.id)
                    raise KeymapConflictError(binding, [conflict])
                self._drop(conflict)

            existing = self._bindings.get(binding.id)
            if existing is not None:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._drop(existing)

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[binding.key_signature] = (
                binding.id
            )
            self._revision += 1
            return binding

    def bind(
        self, mode: str, chord: str, action_id: str, *, source: str | None = None
    ) -> Binding:
        """Bind ``chord`` in ``mode``, replacing whatever held it before."""

        binding = Binding.for_chord(mode, chord, action_id, source=source)
        return self.register_binding(binding, replace=True)

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self._revision += 1
        return binding

    def lookup(self, mode: str, signature: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(signature)
        return self._bindings[binding_id] if binding_id else None

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._mode_index)),
        )

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        mode_bucket = self._mode_index.get(binding.mode)
        if not mode_bucket:
            return
        if mode_bucket.get(binding.key_signature) == binding.id:
            del mode_bucket[binding.key_signature]
        if not mode_bucket:
            self._mode_index.pop(binding.mode, None)


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
