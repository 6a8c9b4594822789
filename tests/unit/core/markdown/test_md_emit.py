"""Unit tests for core/markdown/emit.py"""

import io

import pytest

from dominator_static.core.markdown.emit import MarkdownWriter, element_name, render_markdown
from dominator_static.core.markdown.events import (
    Code,
    End,
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
from dominator_static.errors import StructuralError


def _write(events, trim=False) -> str:
    buf = io.StringIO()
    MarkdownWriter(buf, trim).write_events(events)
    return buf.getvalue()


def test_heading():
    """A heading opens an hN container and closes it at the outer indent."""
    h2 = Tag.heading(2)
    assert _write([Start(h2), Text("Hi"), End(h2)]) == (
        '.child(::dominator::html!("h2", {\n'
        '  .text("Hi")\n'
        '}))\n'
    )


def test_ordered_list_start_attribute_precedes_items():
    """List(Some(3)) writes the list line then the start attribute before any item."""
    ol, li = Tag.list(3), Tag(TagKind.item)
    lines = _write([Start(ol), Start(li), Text("x"), End(li), End(ol)]).splitlines()
    assert lines == [
        '.child(::dominator::html!("ol", {',
        '  .attr("start", "3")',
        '  .child(::dominator::html!("li", {',
        '    .text("x")',
        '  }))',
        '}))',
    ]


def test_bullet_list_has_no_start_attribute():
    """List(None) opens a ul with no attribute."""
    ul = Tag.list(None)
    assert _write([Start(ul), End(ul)]) == '.child(::dominator::html!("ul", {\n}))\n'


def test_dropped_containers_still_nest():
    """Emphasis emits nothing but still deepens the indent of its contents."""
    p, em = Tag(TagKind.paragraph), Tag(TagKind.emphasis)
    assert _write([Start(p), Start(em), Text("b"), End(em), End(p)]).splitlines() == [
        '.child(::dominator::html!("p", {',
        '    .text("b")',
        '}))',
    ]


def test_link_attributes_well_formed():
    """Links write href and title as complete attribute calls."""
    link = Tag.link("https://x.org/?a=\"1\"", "T")
    lines = _write([Start(link), Text("x"), End(link)]).splitlines()
    assert lines == [
        '.child(::dominator::html!("a", {',
        '  .attr("href", "https://x.org/?a=\\"1\\"")',
        '  .attr("title", "T")',
        '  .text("x")',
        '}))',
    ]


def test_image_closed():
    """Images write src and title and are closed like any other container."""
    img = Tag.image("p.png")
    lines = _write([Start(img), Text("alt"), End(img)]).splitlines()
    assert lines[:3] == [
        '.child(::dominator::html!("img", {',
        '  .attr("src", "p.png")',
        '  .attr("title", "")',
    ]
    assert lines[-1] == '}))'


def test_inline_code_self_contained():
    """Code leaves open and close their own code container."""
    p = Tag(TagKind.paragraph)
    assert _write([Start(p), Code('a "b"'), End(p)]).splitlines() == [
        '.child(::dominator::html!("p", {',
        '  .child(::dominator::html!("code", {',
        '    .text("a \\"b\\"")',
        '  }))',
        '}))',
    ]


def test_rule_and_task_markers():
    """Rules and task markers are single lines."""
    assert _write([Rule()]) == '.child(::dominator::html!("hr"))\n'
    assert _write([TaskListMarker(True)]) == '.text("☑")\n'
    assert _write([TaskListMarker(False)]) == '.text("☐")\n'


def test_ignored_leaves():
    """Html, footnote references and breaks produce nothing."""
    assert _write([Html("<b>"), FootnoteReference("1"), SoftBreak(), HardBreak()]) == ""


@pytest.mark.parametrize("kind", [
    TagKind.footnote_definition, TagKind.table, TagKind.table_head, TagKind.table_row,
    TagKind.table_cell, TagKind.emphasis, TagKind.strong, TagKind.strikethrough,
])
def test_unemitted_tags(kind):
    """Accepted-but-unemitted tags write no lines of their own."""
    tag = Tag(kind)
    assert element_name(tag) is None
    assert _write([Start(tag), End(tag)]) == ""


def test_block_quote_and_code_block():
    """Block quotes map to blockquote, code blocks to code."""
    assert element_name(Tag(TagKind.block_quote)) == "blockquote"
    assert element_name(Tag(TagKind.code_block)) == "code"


@pytest.mark.parametrize("trim,expected", [
    (False, '.text("  a  ")\n'),
    (True, '.text("a")\n'),
])
def test_trim_flag(trim, expected):
    """The trim flag strips text content."""
    assert _write([Text("  a  ")], trim=trim) == expected


def test_trim_drops_blank_text():
    """Whitespace-only text disappears under trim."""
    assert _write([Text("   ")], trim=True) == ""


def test_counter_returns_to_zero():
    """A balanced Start/End pair restores the indent counter."""
    writer = MarkdownWriter(io.StringIO())
    p = Tag(TagKind.paragraph)
    writer.write_event(Start(p))
    assert writer.indent == 1
    writer.write_event(End(p))
    assert writer.indent == 0


def test_end_without_start_is_fatal():
    """An End that would drive the counter negative is a structural error."""
    with pytest.raises(StructuralError):
        _write([End(Tag(TagKind.paragraph))])


def test_unclosed_start_is_fatal():
    """A stream that ends with open containers is a structural error."""
    with pytest.raises(StructuralError):
        _write([Start(Tag(TagKind.paragraph))])


def test_render_markdown_document():
    """End-to-end: markdown-it parse then streaming emission."""
    assert render_markdown("# Title\n\nHello *world*\n") == (
        '.child(::dominator::html!("h1", {\n'
        '  .text("Title")\n'
        '}))\n'
        '.child(::dominator::html!("p", {\n'
        '  .text("Hello ")\n'
        '    .text("world")\n'
        '}))\n'
    )


def test_render_markdown_task_list():
    """Task list items render a checkbox glyph before their text."""
    out = render_markdown("- [x] done\n")
    assert out.splitlines() == [
        '.child(::dominator::html!("ul", {',
        '  .child(::dominator::html!("li", {',
        '    .text("☑")',
        '    .text("done")',
        '  }))',
        '}))',
    ]


def test_render_markdown_footnote():
    """A footnote reference renders nothing and its definition is a plain container."""
    out = render_markdown("Text[^1]\n\n[^1]: note\n")
    assert 'html!("a"' not in out
    assert "[^1]" not in out
    assert out.splitlines() == [
        '.child(::dominator::html!("p", {',
        '  .text("Text")',
        '}))',
        '  .child(::dominator::html!("p", {',
        '    .text("note")',
        '  }))',
    ]
