"""Case-insensitive search over the active buffer."""

from __future__ import annotations

from typing import List, MutableMapping, Tuple, cast

from phantom_editor.modes.base_mode import NORMAL, ModeContext, ModeResult

# (line, column) of the first match on each matching line.
SearchHit = Tuple[int, int]


def _search_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("search_state", {})
    )
    state.setdefault("text", "")
    state.setdefault("query", "")
    state.setdefault("results", [])
    state.setdefault("index", 0)
    return state


def find_matches(lines: List[str], query: str) -> List[SearchHit]:
    if not query:
        return []
    needle = query.lower()
    hits = []
    for number, line in enumerate(lines):
        column = line.lower().find(needle)
        if column >= 0:
            hits.append((number, column))
    return hits


def _jump(context: ModeContext, hit: SearchHit) -> None:
    line, column = hit
    context.buffer.set_cursor(column, line)


def execute_search(context: ModeContext, match) -> ModeResult:
    del match
    state = _search_state(context)
    query = str(state["text"])
    results = find_matches(context.buffer.lines, query)
    state["query"] = query
    state["results"] = results
    state["index"] = 0
    if results:
        _jump(context, results[0])
    elif query:
        context.report(f"Pattern not found: {query}")
    return ModeResult(
        consumed=True, switch_to=NORMAL, status="search", message=str(len(results))
    )


def _step(context: ModeContext, delta: int) -> ModeResult:
    state = _search_state(context)
    results = cast(List[SearchHit], state["results"])
    if not results:
        return ModeResult(consumed=True, status="noop")
    index = (cast(int, state["index"]) + delta) % len(results)
    state["index"] = index
    _jump(context, results[index])
    return ModeResult(consumed=True, status="motion")


def next_search_result(context: ModeContext, match) -> ModeResult:
    del match
    return _step(context, 1)


def previous_search_result(context: ModeContext, match) -> ModeResult:
    del match
    return _step(context, -1)


__all__ = [
    "find_matches",
    "execute_search",
    "next_search_result",
    "previous_search_result",
]
