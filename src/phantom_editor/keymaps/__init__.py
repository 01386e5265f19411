"""Keymap registry, resolver, and chord normalization.

The default table lives in ``phantom_editor.keymaps.defaults``; it pulls in
the action catalogue, so it is imported explicitly by whoever seeds a
registry.
"""

from .normalizer import canonical_key_name, chord_for, parse_chord
from .models import ActionRef, Binding, KeySequence, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "canonical_key_name",
    "chord_for",
    "parse_chord",
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
