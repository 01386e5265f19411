"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import Optional, Sequence

from phantom_editor.keymaps.registry import KeymapRegistry
from phantom_editor.keymaps.resolver import KeymapResolver, ResolutionMatch
from phantom_editor.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return key.chord


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    return require_keymap_resolver(context).registry


def lookup(
    context: ModeContext, table: str, tokens: Sequence[str]
) -> Optional[ResolutionMatch]:
    """Return the binding ``tokens`` name in ``table``, if any."""

    result = require_keymap_resolver(context).resolve(table, tokens)
    if result.status == "match":
        return result.match
    return None


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


def run_action(context: ModeContext, action_id: str) -> ModeResult:
    """Invoke a registered action that no binding triggered."""

    action = require_keymap_registry(context).get_action(action_id)
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"action": action.id, "builtin": True},
    ):
        outcome = action(context, None)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


__all__ = [
    "key_to_token",
    "require_keymap_resolver",
    "require_keymap_registry",
    "lookup",
    "execute_match",
    "run_action",
]
