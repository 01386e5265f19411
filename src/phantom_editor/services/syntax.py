"""Syntax label detection and advisory line highlighting via pygments."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from pygments import lex
from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class, get_lexer_for_filename
from pygments.token import Comment, Keyword, Name, Number, String, _TokenType
from pygments.util import ClassNotFound

from phantom_editor.buffer import PLAIN_TEXT

Span = Tuple[str, str]

# Token families the colour palette knows about.
_KINDS: Tuple[Tuple[_TokenType, str], ...] = (
    (Comment, "comment"),
    (Keyword, "keyword"),
    (String, "string"),
    (Name.Function, "function"),
    (Number, "number"),
)


def detect_syntax(path: str) -> str:
    """Return the language name for ``path``, or ``"Plain Text"``."""

    try:
        return get_lexer_for_filename(path).name
    except ClassNotFound:
        return PLAIN_TEXT


@lru_cache(maxsize=64)
def _lexer_for(label: str) -> Optional[Lexer]:
    if label == PLAIN_TEXT:
        return None
    lexer_cls = find_lexer_class(label)
    if lexer_cls is None:
        return None
    return lexer_cls(stripnl=False, ensurenl=False)


def _kind(token_type: _TokenType) -> str:
    for family, kind in _KINDS:
        if token_type in family:
            return kind
    return "text"


def highlight_line(line: str, label: str) -> List[Span]:
    """Split ``line`` into ``(kind, text)`` spans; unknown labels stay plain."""

    lexer = _lexer_for(label)
    if lexer is None or not line:
        return [("text", line)]
    spans: List[Span] = []
    for token_type, value in lex(line, lexer):
        if not value:
            continue
        kind = _kind(token_type)
        if spans and spans[-1][0] == kind:
            spans[-1] = (kind, spans[-1][1] + value)
        else:
            spans.append((kind, value))
    return spans or [("text", line)]


__all__ = ["detect_syntax", "highlight_line"]
