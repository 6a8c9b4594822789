"""markdown-it tokenization and flattening into the Event Stream"""

import logging
from typing import Iterator, Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from dominator_static.core.markdown.events import (
    Code,
    End,
    Event,
    FootnoteReference,
    HardBreak,
    Html,
    Rule,
    SoftBreak,
    Start,
    Tag,
    TagKind,
    TaskListMarker,
    Text,
)
from dominator_static.core.utils.tokens import attr_str, heading_level, list_start
from dominator_static.errors import ConfigError


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md'}
TASK_CHECKBOX_CLASS = 'task-list-item-checkbox'

# Footnote block wrappers and back-reference anchors have no event
SKIPPED_TOKENS = {'footnote_block_open', 'footnote_block_close', 'footnote_anchor'}

# Open/close token prefixes that map directly onto a TagKind
CONTAINER_KINDS: dict[str, TagKind] = {
    'paragraph':  TagKind.paragraph,
    'blockquote': TagKind.block_quote,
    'list_item':  TagKind.item,
    'table':      TagKind.table,
    'thead':      TagKind.table_head,
    'tr':         TagKind.table_row,
    'th':         TagKind.table_cell,
    'td':         TagKind.table_cell,
    'em':         TagKind.emphasis,
    'strong':     TagKind.strong,
    's':          TagKind.strikethrough,
    'footnote':   TagKind.footnote_definition,
}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, with footnotes and task lists."""
    try:
        md = MarkdownIt(preset, options_update={"linkify": False})
    except KeyError as e:
        raise ConfigError(f"Unknown markdown-it preset {preset!r}") from e
    return md.use(footnote_plugin).use(tasklists_plugin)


def _task_checkbox(token) -> Optional[bool]:
    """Checked state of a task-list checkbox token, None for anything else."""
    if token.type != 'html_inline' or TASK_CHECKBOX_CLASS not in token.content:
        return None
    return 'checked="checked"' in token.content


def _open_tag(token) -> Optional[Tag]:
    """Tag for an *_open token, or None for containers that have no event."""
    base = token.type[:-len('_open')]
    if base == 'paragraph' and token.hidden:
        return None
    if base == 'heading':
        return Tag.heading(heading_level(token))
    if base in ('bullet_list', 'ordered_list'):
        return Tag.list(list_start(token))
    if base == 'link':
        return Tag.link(attr_str(token, 'href'), attr_str(token, 'title'))
    kind = CONTAINER_KINDS.get(base)
    return Tag(kind) if kind else None


class _Flattener:
    """Walks block tokens and their inline children, pairing opens with closes."""

    def __init__(self):
        self.stack: list[Optional[Tag]] = []

    def events(self, tokens: list) -> Iterator[Event]:
        for tok in tokens:
            yield from self._token(tok)

    def _token(self, tok) -> Iterator[Event]:
        if tok.type in SKIPPED_TOKENS:
            return
        if tok.nesting == 1:
            tag = _open_tag(tok)
            self.stack.append(tag)
            if tag is not None:
                yield Start(tag)
        elif tok.nesting == -1:
            tag = self.stack.pop()
            if tag is not None:
                yield End(tag)
        elif tok.type == 'inline':
            yield from self._inline(tok.children or [])
        else:
            yield from self._leaf(tok)

    def _inline(self, children: list) -> Iterator[Event]:
        checked = _task_checkbox(children[0]) if children else None
        if checked is None:
            for child in children:
                yield from self._token(child)
            return
        # the plugin leaves the space after "[ ]" on the following text
        yield TaskListMarker(checked=checked)
        rest = children[1:]
        if rest and rest[0].type == 'text':
            text = rest.pop(0).content.lstrip()
            if text:
                yield Text(text)
        for child in rest:
            yield from self._token(child)

    def _leaf(self, tok) -> Iterator[Event]:
        if tok.type in ('text', 'text_special'):
            if tok.content:
                yield Text(tok.content)
        elif tok.type == 'code_inline':
            yield Code(tok.content)
        elif tok.type in ('fence', 'code_block'):
            tag = Tag(TagKind.code_block)
            yield Start(tag)
            if tok.content:
                yield Text(tok.content)
            yield End(tag)
        elif tok.type == 'image':
            tag = Tag.image(attr_str(tok, 'src'), attr_str(tok, 'title'))
            yield Start(tag)
            yield from self._inline(tok.children or [])
            yield End(tag)
        elif tok.type == 'hr':
            yield Rule()
        elif tok.type in ('html_block', 'html_inline'):
            yield Html(tok.content)
        elif tok.type == 'softbreak':
            yield SoftBreak()
        elif tok.type == 'hardbreak':
            yield HardBreak()
        elif tok.type == 'footnote_ref':
            yield FootnoteReference(str((tok.meta or {}).get('label', '')))
        else:
            logger.debug("Ignoring markdown-it token %s", tok.type)


def iter_events(tokens: list) -> Iterator[Event]:
    """Flatten a markdown-it token list into Start/End/leaf events."""
    return _Flattener().events(tokens)


def parse_markdown(source: str, preset: str = 'gfm-like') -> list[Event]:
    """Tokenize source and return its event stream."""
    return list(iter_events(make_parser(preset).parse(source)))
