"""Event Stream: flat start/end/leaf events produced from a Markdown document"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TagKind(str, Enum):
    """Container kinds that can open and close in the event stream"""
    paragraph = "paragraph"
    heading = "heading"
    block_quote = "block_quote"
    code_block = "code_block"
    list = "list"
    item = "item"
    footnote_definition = "footnote_definition"
    table = "table"
    table_head = "table_head"
    table_row = "table_row"
    table_cell = "table_cell"
    emphasis = "emphasis"
    strong = "strong"
    strikethrough = "strikethrough"
    link = "link"
    image = "image"


@dataclass(frozen=True)
class Tag:
    kind:  TagKind
    level: Optional[int] = None     # heading level (1-6)
    start: Optional[int] = None     # ordered list start number; None for bullet lists
    dest:  str = ""                 # link / image destination
    title: str = ""                 # link / image title

    @classmethod
    def heading(cls, level: int) -> "Tag":
        if not 1 <= level <= 6:
            raise ValueError(f"heading level must be 1-6, got {level}")
        return cls(TagKind.heading, level=level)

    @classmethod
    def list(cls, start: Optional[int] = None) -> "Tag":
        return cls(TagKind.list, start=start)

    @classmethod
    def link(cls, dest: str, title: str = "") -> "Tag":
        return cls(TagKind.link, dest=dest, title=title)

    @classmethod
    def image(cls, dest: str, title: str = "") -> "Tag":
        return cls(TagKind.image, dest=dest, title=title)


@dataclass(frozen=True)
class Start:
    tag: Tag


@dataclass(frozen=True)
class End:
    tag: Tag


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Code:
    content: str


@dataclass(frozen=True)
class Html:
    content: str


@dataclass(frozen=True)
class FootnoteReference:
    label: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class TaskListMarker:
    checked: bool


Event = Union[
    Start, End, Text, Code, Html, FootnoteReference,
    SoftBreak, HardBreak, Rule, TaskListMarker,
]
