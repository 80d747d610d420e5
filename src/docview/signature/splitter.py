from __future__ import annotations

from dataclasses import replace
from typing import List

from ..types import ScanState, TypeSignature
from .scanner import at_top_level, close_chunk, scan, scan_char

ARROW = " -> "
_SENTINEL = "\x00"  # never occurs in type text

def _arg_step(ch: str, state: ScanState) -> ScanState:
    if ch == _SENTINEL and at_top_level(state):
        return close_chunk(state)
    return scan_char(ch, state)

def split_args(tipe: TypeSignature) -> List[str]:
    """Split a function type into its arguments at top-level arrows.

    Arrows nested in parentheses or braces stay inside their segment, so
    ``"(a -> b) -> c"`` gives ``["(a -> b)", "c"]``.
    """
    state = close_chunk(scan(tipe.replace(ARROW, _SENTINEL), _arg_step))
    return [c.replace(_SENTINEL, ARROW) for c in state.chunks]

def _record_step(ch: str, state: ScanState) -> ScanState:
    if state.finished:
        return scan_char(ch, state)
    if ch == "," and state.paren_depth == 0 and state.brace_depth == 1:
        # the comma opens the next field
        return scan_char(ch, close_chunk(state))
    nxt = scan_char(ch, state)
    if ch == "}" and state.brace_depth == 1 and nxt.brace_depth == 0:
        return replace(close_chunk(nxt), finished=True)
    return nxt

def split_record(tipe: TypeSignature) -> List[str]:
    """Split a record type into fields, keeping each leading ``{`` or ``,``.

    The last field keeps the closing ``}``. Anything after the record's
    closing brace is returned as one extra segment.
    """
    state = scan(tipe, _record_step)
    fields = [c.strip() for c in state.chunks]
    rest = state.current_chunk.strip()
    if rest:
        fields.append(rest)
    return fields
