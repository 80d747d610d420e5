from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, List

def now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S%z")

def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)

def write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)

def uniq(xs: List[str]) -> List[str]:
    # de-dup preserve order
    seen = set()
    out = []
    for x in xs:
        if x not in seen:
            seen.add(x)
            out.append(x)
    return out
