from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from rich.style import Style
from rich.text import Text

TypeSignature = str

class TokenRole(str, Enum):
    PLAIN = "PLAIN"
    KEYWORD = "KEYWORD"
    LINK = "LINK"

@dataclass(frozen=True)
class ScanState:
    paren_depth: int = 0
    brace_depth: int = 0
    current_chunk: str = ""
    chunks: Tuple[str, ...] = ()
    finished: bool = False   # terminal delimiter seen, stop splitting

@dataclass(frozen=True)
class StyledToken:
    text: str
    role: TokenRole = TokenRole.PLAIN
    target: Optional[str] = None   # "#name" for links
    bold: bool = False

@dataclass(frozen=True)
class StyledDocument:
    tokens: Tuple[StyledToken, ...] = ()

    def plain(self) -> str:
        return "".join(t.text for t in self.tokens)

    def __len__(self) -> int:
        return sum(len(t.text) for t in self.tokens)

    def __add__(self, other: "StyledDocument") -> "StyledDocument":
        return StyledDocument(self.tokens + other.tokens)

    def to_rich(self, keyword_style: str = "grey50", link_style: str = "cyan", name_style: str = "bold") -> Text:
        out = Text()
        for t in self.tokens:
            if t.role == TokenRole.KEYWORD:
                style = Style.parse(keyword_style)
            elif t.role == TokenRole.LINK:
                # bold links are the anchors of documented names
                style = Style.parse(name_style if t.bold else link_style) + Style(link=t.target)
            else:
                style = Style(bold=t.bold or None)
            out.append(t.text, style=style)
        return out

@dataclass
class AliasDoc:
    name: str
    comment: str
    args: List[str]
    type: TypeSignature

@dataclass
class UnionDoc:
    name: str
    comment: str
    args: List[str]
    cases: List[Tuple[str, List[TypeSignature]]] = field(default_factory=list)

@dataclass
class ValueDoc:
    name: str
    comment: str
    type: TypeSignature
    associativity: Optional[str] = None   # left | right | non
    precedence: Optional[int] = None

@dataclass
class ModuleDoc:
    name: str
    comment: str
    aliases: List[AliasDoc] = field(default_factory=list)
    unions: List[UnionDoc] = field(default_factory=list)
    values: List[ValueDoc] = field(default_factory=list)

@dataclass(frozen=True)
class RenderedEntry:
    name: str
    signature: StyledDocument
    fixity: Optional[str]
    comment: str
