from __future__ import annotations

import logging
from dataclasses import replace
from functools import reduce
from typing import Callable

from ..types import ScanState

logger = logging.getLogger(__name__)

Step = Callable[[str, ScanState], ScanState]

_OPEN = {"(": "paren_depth", "{": "brace_depth"}
_CLOSE = {")": "paren_depth", "}": "brace_depth"}

def scan_char(ch: str, state: ScanState) -> ScanState:
    # Track nesting and append the character to the current chunk.
    chunk = state.current_chunk + ch
    if ch in _OPEN:
        attr = _OPEN[ch]
        return replace(state, current_chunk=chunk, **{attr: getattr(state, attr) + 1})
    if ch in _CLOSE:
        attr = _CLOSE[ch]
        depth = getattr(state, attr)
        if depth == 0:
            # unmatched closer: keep as literal text, depth stays at zero
            logger.debug("Unmatched %r after %r", ch, state.current_chunk)
            return replace(state, current_chunk=chunk)
        return replace(state, current_chunk=chunk, **{attr: depth - 1})
    return replace(state, current_chunk=chunk)

def at_top_level(state: ScanState) -> bool:
    return state.paren_depth == 0 and state.brace_depth == 0

def close_chunk(state: ScanState) -> ScanState:
    return replace(state, current_chunk="", chunks=state.chunks + (state.current_chunk,))

def scan(text: str, step: Step) -> ScanState:
    return reduce(lambda s, ch: step(ch, s), text, ScanState())
