"""Parsed Document: the owned node tree produced from an HTML fragment"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Attribute:
    name: str
    value: str
    prefix: Optional[str] = None    # namespace prefix, e.g. 'xlink' for xlink:href


@dataclass
class Text:
    content: str


@dataclass
class Comment:
    content: str


@dataclass
class Doctype:
    content: str


@dataclass
class ProcessingInstruction:
    content: str


@dataclass
class Element:
    """An HTML element; children are owned, there are no parent references."""
    name:     str
    prefix:   Optional[str] = None
    classes:  list[str] = field(default_factory=list)       # ordered set, document order
    attrs:    list[Attribute] = field(default_factory=list)  # source order, includes class/style
    children: list["Node"] = field(default_factory=list)

    def attr(self, name: str) -> Optional[str]:
        """Return the value of the first unprefixed attribute called name, else None."""
        for a in self.attrs:
            if a.name == name and a.prefix is None:
                return a.value
        return None


@dataclass
class Fragment:
    """Synthetic root; its children are the logical roots of the fragment."""
    children: list["Node"] = field(default_factory=list)


Node = Union[Element, Text, Comment, Doctype, ProcessingInstruction]
