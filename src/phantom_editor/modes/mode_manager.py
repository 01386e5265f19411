"""Mode manager owning the active mode and dispatching key events."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from phantom_editor.keymaps import KeymapRegistry, KeymapResolver
from phantom_editor.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns active mode, handles transitions, and dispatches key events.

    The resolver is shared through ``context.extras`` so actions and modes
    reach the same tables.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="phantom_editor.keymaps"
        )
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="phantom_editor.keymaps"
        )
        self.context.extras["keymap_resolver"] = self.keymap_resolver

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def active_name(self) -> Optional[str]:
        return self._active

    def get_mode(self, name: str) -> Mode:
        try:
            return self._modes[name]
        except KeyError as exc:
            raise KeyError(f"Unknown mode '{name}'") from exc

    def register_modes(self, mode_classes: Iterable[Type[Mode]]) -> List[Mode]:
        """Register each class in order; the first one becomes active."""

        return [self.register_mode(mode_cls) for mode_cls in mode_classes]

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self.get_mode(name)
        previous = self.active_mode
        if previous is target:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        target.on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
