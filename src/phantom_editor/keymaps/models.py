"""Dataclasses describing key sequences, actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from .normalizer import chord_for, parse_chord


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press stored as its canonical chord token."""

    token: str

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token cannot be empty")

    @classmethod
    def from_event(cls, key: str, modifiers: Iterable[str] = ()) -> "KeyStroke":
        return cls(chord_for(key, modifiers))


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable run of keystrokes bound as one chord."""

    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def from_strings(cls, *tokens: str) -> "KeySequence":
        return cls(strokes=tuple(KeyStroke(token) for token in tokens if token))

    @classmethod
    def parse(cls, chord: str) -> "KeySequence":
        """Build a sequence from keymap-file notation such as ``"dd"``."""

        return cls.from_strings(*parse_chord(chord))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named, callable editor action."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence in one mode with an action id."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @classmethod
    def for_chord(
        cls, mode: str, chord: str, action_id: str, *, source: str | None = None
    ) -> "Binding":
        sequence = KeySequence.parse(chord)
        return cls(
            id=f"{mode}.{''.join(sequence.tokens)}",
            mode=mode,
            sequence=sequence,
            action_id=action_id,
            source=source,
        )

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = [
    "KeyStroke",
    "KeySequence",
    "ActionRef",
    "Binding",
]
