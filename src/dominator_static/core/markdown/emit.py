"""Streaming formatter: Markdown event stream -> dominator builder calls

Events are consumed once, left to right. Nesting is tracked with a single
counter instead of a tree: every Start increments it, every End decrements
it before the closing line is written.
"""

import io
from typing import Iterable, Optional, TextIO

from dominator_static.core.markdown.events import (
    Code,
    End,
    Event,
    Rule,
    Start,
    Tag,
    TagKind,
    TaskListMarker,
    Text,
)
from dominator_static.core.markdown.parse import parse_markdown
from dominator_static.core.utils.escape import escape_debug
from dominator_static.core.utils.indent import Indent
from dominator_static.errors import StructuralError


HTML_MACRO = "::dominator::html!"
CLOSE = "}))"
CHECKED = "☑"
UNCHECKED = "☐"

SIMPLE_ELEMENTS: dict[TagKind, str] = {
    TagKind.paragraph:   "p",
    TagKind.block_quote: "blockquote",
    TagKind.code_block:  "code",
    TagKind.item:        "li",
    TagKind.link:        "a",
    TagKind.image:       "img",
}


def element_name(tag: Tag) -> Optional[str]:
    """HTML element emitted for tag, or None for tags that are dropped."""
    if tag.kind == TagKind.heading:
        return f"h{tag.level}"
    if tag.kind == TagKind.list:
        return "ul" if tag.start is None else "ol"
    return SIMPLE_ELEMENTS.get(tag.kind)


class MarkdownWriter:
    """Writes builder calls for an event stream to writer."""

    def __init__(self, writer: TextIO, trim: bool = False):
        self.writer = writer
        self.trim = trim
        self.indent = 0

    def _line(self, text: str, extra: int = 0) -> None:
        self.writer.write(f"{Indent(self.indent + extra)}{text}\n")

    def _attr(self, name: str, value: str) -> None:
        self._line(f'.attr("{name}", "{escape_debug(value)}")', 1)

    def write_events(self, events: Iterable[Event]) -> None:
        """Write every event, then check that all containers were closed."""
        for event in events:
            self.write_event(event)
        if self.indent != 0:
            raise StructuralError(f"Unbalanced event stream: {self.indent} container(s) never closed")

    def write_event(self, event: Event) -> None:
        if isinstance(event, Start):
            self._start(event.tag)
        elif isinstance(event, End):
            self._end(event.tag)
        elif isinstance(event, Text):
            self._text(event.content)
        elif isinstance(event, Code):
            self._line(f'.child({HTML_MACRO}("code", {{')
            self._line(f'.text("{escape_debug(event.content)}")', 1)
            self._line(CLOSE)
        elif isinstance(event, Rule):
            self._line(f'.child({HTML_MACRO}("hr"))')
        elif isinstance(event, TaskListMarker):
            self._line(f'.text("{CHECKED if event.checked else UNCHECKED}")')
        # Html, FootnoteReference, SoftBreak and HardBreak produce nothing

    def _start(self, tag: Tag) -> None:
        name = element_name(tag)
        if name is not None:
            self._line(f'.child({HTML_MACRO}("{name}", {{')
            if tag.kind == TagKind.list and tag.start is not None:
                self._attr("start", str(tag.start))
            elif tag.kind == TagKind.link:
                self._attr("href", tag.dest)
                self._attr("title", tag.title)
            elif tag.kind == TagKind.image:
                self._attr("src", tag.dest)
                self._attr("title", tag.title)
        self.indent += 1

    def _end(self, tag: Tag) -> None:
        if self.indent == 0:
            raise StructuralError(f"Unbalanced event stream: End({tag.kind.value}) without a matching Start")
        self.indent -= 1
        if element_name(tag) is not None:
            self._line(CLOSE)

    def _text(self, content: str) -> None:
        if self.trim:
            content = content.strip()
        if content:
            self._line(f'.text("{escape_debug(content)}")')


def render_markdown(source: str, trim: bool = False, preset: str = 'gfm-like') -> str:
    """Parse source and return the generated builder calls."""
    buf = io.StringIO()
    MarkdownWriter(buf, trim).write_events(parse_markdown(source, preset))
    return buf.getvalue()
