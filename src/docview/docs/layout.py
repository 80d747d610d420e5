from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..render.entries import Entry, all_entries
from ..types import ModuleDoc
from ..utils import uniq

logger = logging.getLogger(__name__)

@dataclass
class PageBlock:
    kind: str                 # MARKDOWN | ENTRY
    text: str = ""
    entry: Optional[Entry] = None

def _docs_names(line: str) -> List[str]:
    # "@docs map, (+), Maybe" -> ["map", "+", "Maybe"]
    names = []
    for n in line.strip()[len("@docs"):].split(","):
        n = n.strip()
        if n.startswith("(") and n.endswith(")") and len(n) > 2:
            n = n[1:-1]
        if n:
            names.append(n)
    return names

def page_blocks(module: ModuleDoc) -> List[PageBlock]:
    """Order a module page by the ``@docs`` lines of its comment.

    Prose between ``@docs`` lines is kept as markdown blocks. Entries the
    comment never mentions are appended at the end, sorted by name.
    """
    by_name: Dict[str, Entry] = {e.name: e for e in all_entries(module)}
    placed = set()
    out: List[PageBlock] = []
    buf: List[str] = []

    def flush() -> None:
        text = "\n".join(buf).strip()
        if text:
            out.append(PageBlock(kind="MARKDOWN", text=text))
        buf.clear()

    for line in module.comment.splitlines():
        if not line.strip().startswith("@docs"):
            buf.append(line)
            continue
        flush()
        for name in uniq(_docs_names(line)):
            if name not in by_name:
                logger.warning("%s: @docs names unknown entry %r", module.name, name)
                continue
            if name in placed:
                continue
            placed.add(name)
            out.append(PageBlock(kind="ENTRY", entry=by_name[name]))
    flush()

    for name in sorted(n for n in by_name if n not in placed):
        out.append(PageBlock(kind="ENTRY", entry=by_name[name]))
    return out
