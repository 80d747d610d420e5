from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..types import AliasDoc, ModuleDoc, UnionDoc, ValueDoc
from ..utils import read_json

class DocsDecodeError(ValueError):
    pass

def _field(obj: Dict[str, Any], key: str, kind: type, path: str) -> Any:
    if key not in obj:
        raise DocsDecodeError(f"{path}: missing field '{key}'")
    v = obj[key]
    if not isinstance(v, kind):
        raise DocsDecodeError(f"{path}.{key}: expected {kind.__name__}, got {type(v).__name__}")
    return v

def _optional(obj: Dict[str, Any], key: str, kind: type, path: str, default: Any) -> Any:
    if obj.get(key) is None:
        return default
    return _field(obj, key, kind, path)

def _object(obj: Any, path: str) -> Dict[str, Any]:
    if not isinstance(obj, dict):
        raise DocsDecodeError(f"{path}: expected object, got {type(obj).__name__}")
    return obj

def _strings(obj: Dict[str, Any], key: str, path: str) -> List[str]:
    xs = _optional(obj, key, list, path, [])
    for i, x in enumerate(xs):
        if not isinstance(x, str):
            raise DocsDecodeError(f"{path}.{key}[{i}]: expected str")
    return list(xs)

def _decode_alias(obj: Any, path: str) -> AliasDoc:
    o = _object(obj, path)
    return AliasDoc(
        name=_field(o, "name", str, path),
        comment=_optional(o, "comment", str, path, ""),
        args=_strings(o, "args", path),
        type=_field(o, "type", str, path),
    )

def _decode_case(obj: Any, path: str) -> Tuple[str, List[str]]:
    if not isinstance(obj, list) or len(obj) != 2 or not isinstance(obj[0], str) or not isinstance(obj[1], list):
        raise DocsDecodeError(f"{path}: expected [tag, [types]]")
    for i, t in enumerate(obj[1]):
        if not isinstance(t, str):
            raise DocsDecodeError(f"{path}[1][{i}]: expected str")
    return obj[0], list(obj[1])

def _decode_union(obj: Any, path: str) -> UnionDoc:
    o = _object(obj, path)
    cases = _optional(o, "cases", list, path, [])
    return UnionDoc(
        name=_field(o, "name", str, path),
        comment=_optional(o, "comment", str, path, ""),
        args=_strings(o, "args", path),
        cases=[_decode_case(c, f"{path}.cases[{i}]") for i, c in enumerate(cases)],
    )

def _decode_value(obj: Any, path: str, fixity_required: bool = False) -> ValueDoc:
    o = _object(obj, path)
    if fixity_required:
        assoc: Optional[str] = _field(o, "associativity", str, path)
        prec: Optional[int] = _field(o, "precedence", int, path)
    else:
        assoc = _optional(o, "associativity", str, path, None)
        prec = _optional(o, "precedence", int, path, None)
    return ValueDoc(
        name=_field(o, "name", str, path),
        comment=_optional(o, "comment", str, path, ""),
        type=_field(o, "type", str, path),
        associativity=assoc,
        precedence=prec,
    )

def decode_module(obj: Any, path: str = "$") -> ModuleDoc:
    o = _object(obj, path)
    union_key = "unions" if "unions" in o else "types"
    aliases = _optional(o, "aliases", list, path, [])
    unions = _optional(o, union_key, list, path, [])
    values = _optional(o, "values", list, path, [])
    binops = _optional(o, "binops", list, path, [])
    return ModuleDoc(
        name=_field(o, "name", str, path),
        comment=_optional(o, "comment", str, path, ""),
        aliases=[_decode_alias(a, f"{path}.aliases[{i}]") for i, a in enumerate(aliases)],
        unions=[_decode_union(u, f"{path}.{union_key}[{i}]") for i, u in enumerate(unions)],
        values=[_decode_value(v, f"{path}.values[{i}]") for i, v in enumerate(values)]
        + [_decode_value(b, f"{path}.binops[{i}]", fixity_required=True) for i, b in enumerate(binops)],
    )

def decode_package(data: Any) -> List[ModuleDoc]:
    """Decode a package's documentation JSON into module docs.

    Accepts a list of modules or ``{"modules": [...]}``. Raises
    ``DocsDecodeError`` naming the offending path on malformed input.
    """
    if isinstance(data, dict) and isinstance(data.get("modules"), list):
        data = data["modules"]
    if not isinstance(data, list):
        raise DocsDecodeError("Unsupported documentation JSON structure. Expected a list or {modules:[...]}")
    return [decode_module(m, f"$[{i}]") for i, m in enumerate(data)]

def load_package(path: Path) -> List[ModuleDoc]:
    return decode_package(read_json(path))
