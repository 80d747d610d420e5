from __future__ import annotations

from typing import AbstractSet, FrozenSet, List, Optional, Union

from ..types import AliasDoc, ModuleDoc, RenderedEntry, StyledDocument, UnionDoc, ValueDoc
from .printer import render_alias, render_union, render_value

Entry = Union[AliasDoc, UnionDoc, ValueDoc]

_FIXITY_KEYWORDS = {"left": "infixl", "right": "infixr", "non": "infix"}

def fixity(value: ValueDoc) -> Optional[str]:
    # left/6 -> "infixl 6"
    if value.associativity is None and value.precedence is None:
        return None
    kw = _FIXITY_KEYWORDS.get((value.associativity or "non").lower(), "infix")
    return kw if value.precedence is None else f"{kw} {value.precedence}"

def module_links(module: ModuleDoc) -> FrozenSet[str]:
    return frozenset([a.name for a in module.aliases] + [u.name for u in module.unions])

def render(
    entry: Entry,
    links: Optional[AbstractSet[str]] = None,
    line_width: Optional[int] = None,
    module: Optional[str] = None,
) -> StyledDocument:
    if isinstance(entry, AliasDoc):
        return render_alias(entry.name, entry.args, entry.type, links, module=module)
    if isinstance(entry, UnionDoc):
        return render_union(entry.name, entry.args, entry.cases, links, module=module)
    return render_value(entry.name, entry.type, links, line_width=line_width, module=module)

def render_entry(
    entry: Entry,
    links: Optional[AbstractSet[str]] = None,
    line_width: Optional[int] = None,
    module: Optional[str] = None,
) -> RenderedEntry:
    return RenderedEntry(
        name=entry.name,
        signature=render(entry, links, line_width, module),
        fixity=fixity(entry) if isinstance(entry, ValueDoc) else None,
        comment=entry.comment,
    )

def all_entries(module: ModuleDoc) -> List[Entry]:
    return [*module.aliases, *module.unions, *module.values]

def render_module(module: ModuleDoc, line_width: Optional[int] = None) -> List[RenderedEntry]:
    links = module_links(module)
    return [render_entry(e, links, line_width, module.name) for e in all_entries(module)]
