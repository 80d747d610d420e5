from __future__ import annotations

import os
from dataclasses import dataclass

def _env(key: str, default: str) -> str:
    v = os.getenv(key)
    return default if v is None or v.strip() == "" else v.strip()

def _env_int(key: str, default: int) -> int:
    v = os.getenv(key)
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default

@dataclass(frozen=True)
class DVConfig:
    # Layout
    line_width: int = _env_int("DV_LINE_WIDTH", 80)  # inline signatures must stay below this
    indent: int = _env_int("DV_INDENT", 4)

    # Styles (rich style strings)
    keyword_style: str = _env("DV_KEYWORD_STYLE", "grey50")
    name_style: str = _env("DV_NAME_STYLE", "bold")
    link_style: str = _env("DV_LINK_STYLE", "cyan")

    # Logging
    log_level: str = _env("DV_LOG_LEVEL", "WARNING")

CONFIG = DVConfig()
