from __future__ import annotations

import re
from typing import AbstractSet, List, Optional, Sequence, Set, Tuple

from ..config import CONFIG
from ..signature.qualifiers import display_name, drop_qualifier, normalize_type, qualifier_of
from ..signature.splitter import split_args, split_record
from ..types import StyledDocument, StyledToken, TokenRole, TypeSignature

_WORD_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_']*)")

def _plain(text: str) -> StyledToken:
    return StyledToken(text)

def _kw(text: str) -> StyledToken:
    return StyledToken(text, TokenRole.KEYWORD)

def _doc(*tokens: StyledToken) -> StyledDocument:
    return StyledDocument(tuple(t for t in tokens if t.text))

def _squash(tipe: TypeSignature) -> TypeSignature:
    return " ".join(tipe.split())

def _link_starts(tipe: TypeSignature, links: AbstractSet[str], module: Optional[str]) -> Set[int]:
    """Offsets, in the qualifier-free text, of names that link to this module.

    Decided on the raw words: only unqualified names and names qualified
    with ``module`` refer to the module's own types.
    """
    starts: Set[int] = set()
    offset = 0
    for i, word in enumerate(tipe.split()):
        if i:
            offset += 1
        norm = drop_qualifier(word)
        if qualifier_of(word) in ("", module):
            m = _WORD_RE.match(norm, len(norm) - len(norm.lstrip("({[")))
            if m and m.group(0)[0].isupper() and m.group(0) in links:
                starts.add(offset + m.start())
        offset += len(norm)
    return starts

def _text_tokens(text: str, base: int, starts: Set[int]) -> List[StyledToken]:
    # Plain text, with names of documented types turned into cross-references.
    if not starts:
        return [_plain(text)]
    out: List[StyledToken] = []
    last = 0
    for m in _WORD_RE.finditer(text):
        if base + m.start() in starts:
            out.append(_plain(text[last:m.start()]))
            out.append(StyledToken(m.group(0), TokenRole.LINK, target="#" + m.group(0)))
            last = m.end()
    out.append(_plain(text[last:]))
    return out

def render_type(
    tipe: TypeSignature,
    links: Optional[AbstractSet[str]] = None,
    module: Optional[str] = None,
) -> StyledDocument:
    """Render type text with colored ``:`` and ``->`` between plain pieces."""
    starts = _link_starts(tipe, links, module) if links else set()
    tokens: List[StyledToken] = []
    pos = 0
    for i, part in enumerate(normalize_type(tipe).split(":")):
        if i:
            tokens.append(_kw(":"))
            pos += 1
        for j, piece in enumerate(part.split("->")):
            if j:
                tokens.append(_kw("->"))
                pos += 2
            tokens.extend(_text_tokens(piece, pos, starts))
            pos += len(piece)
    return _doc(*tokens)

def render_name(name: str) -> StyledDocument:
    return _doc(StyledToken(display_name(name), TokenRole.LINK, target="#" + name, bold=True))

def view_arg(arg: TypeSignature) -> TypeSignature:
    """Parenthesize a constructor argument unless it is a single token or already grouped."""
    if arg.startswith("(") or arg.startswith("{") or " " not in arg:
        return arg
    return f"({arg})"

def _head(keyword: str, name: str, args: Sequence[str]) -> StyledDocument:
    doc = _doc(_kw(keyword + " ")) + render_name(name)
    if args:
        doc = doc + _doc(_plain(" " + " ".join(args)))
    return doc

def render_value(
    name: str,
    tipe: TypeSignature,
    links: Optional[AbstractSet[str]] = None,
    line_width: Optional[int] = None,
    indent: Optional[int] = None,
    module: Optional[str] = None,
) -> StyledDocument:
    """Render ``name : type``, one argument per line when the line gets too long.

    The inline line (display name, ``" : "`` and the qualifier-free type) must
    be shorter than ``line_width``; otherwise arguments are stacked under the
    name with aligned ``:`` and ``->`` markers.
    """
    width = CONFIG.line_width if line_width is None else line_width
    pad = "\n" + " " * (CONFIG.indent if indent is None else indent)
    raw = _squash(tipe)
    doc = render_name(name)
    if len(display_name(name) + " : " + normalize_type(raw)) < width:
        return doc + _doc(_kw(" : ")) + render_type(raw, links, module)

    for i, seg in enumerate(split_args(raw)):
        if i == 0:
            doc = doc + _doc(_plain(pad), _kw(":"), _plain("  "))
        else:
            doc = doc + _doc(_plain(pad), _kw("->"), _plain(" "))
        doc = doc + render_type(seg, links, module)
    return doc

def render_alias(
    name: str,
    args: Sequence[str],
    tipe: TypeSignature,
    links: Optional[AbstractSet[str]] = None,
    indent: Optional[int] = None,
    module: Optional[str] = None,
) -> StyledDocument:
    pad = "\n" + " " * (CONFIG.indent if indent is None else indent)
    doc = _head("type alias", name, args) + _doc(_plain(" "), _kw("="))
    raw = _squash(tipe)
    if not raw.startswith("{"):
        return doc + _doc(_plain(" ")) + render_type(raw, links, module)
    for field in split_record(raw):
        doc = doc + _doc(_plain(pad)) + render_type(field, links, module)
    return doc

def render_union(
    name: str,
    args: Sequence[str],
    cases: Sequence[Tuple[str, Sequence[TypeSignature]]],
    links: Optional[AbstractSet[str]] = None,
    indent: Optional[int] = None,
    module: Optional[str] = None,
) -> StyledDocument:
    pad = "\n" + " " * (CONFIG.indent if indent is None else indent)
    doc = _head("type", name, args)
    for i, (tag, tag_args) in enumerate(cases):
        doc = doc + _doc(_plain(pad), _kw("|" if i else "="), _plain(" " + tag))
        for arg in tag_args:
            doc = doc + _doc(_plain(" ")) + render_type(view_arg(_squash(arg)), links, module)
    return doc
