from __future__ import annotations

import re

from ..types import TypeSignature

_GROUP_PREFIX_RE = re.compile(r"^[({\[]*")

def drop_qualifier(token: str) -> str:
    # List.List -> List, (Maybe.Maybe -> (Maybe
    prefix = _GROUP_PREFIX_RE.match(token).group(0)
    word = token[len(prefix):]
    if "." not in word:
        return token
    last = word.split(".")[-1]
    if not last:
        return token
    return prefix + last

def qualifier_of(token: str) -> str:
    # Json.Decode.Decoder -> Json.Decode, Int -> ""
    word = token[len(_GROUP_PREFIX_RE.match(token).group(0)):]
    return word.rpartition(".")[0]

def normalize_type(tipe: TypeSignature) -> TypeSignature:
    return " ".join(drop_qualifier(w) for w in tipe.split())

def is_operator(name: str) -> bool:
    if not name:
        return False
    c = name[0]
    return not (c.isalnum() or c in "_'")

def display_name(name: str) -> str:
    return f"({name})" if is_operator(name) else name
