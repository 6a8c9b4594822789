"""Recursive formatter: normalized HTML node tree -> dominator builder calls

Layout for an element at indent d:

    d    ::dominator::html!("div", {
    d+1    .class("a")                 or .class(["a", "b"])
    d+1    .style("color", "red")
    d+1    .attr("id", "main")
    d+1    .child(                     single visible child
    d+2      ...
    d+1    )
    d+1    .children(&mut [            several visible children
    d+2      ...,
    d+2      ...
    d+1    ])
    d    })                            "," appended unless last sibling
"""

import logging

from dominator_static.core.html.models import Element, Fragment, Node, Text
from dominator_static.core.html.normalize import normalize
from dominator_static.core.html.parse import parse_html
from dominator_static.core.utils.escape import escape_debug
from dominator_static.core.utils.indent import Indent
from dominator_static.errors import StructuralError


logger = logging.getLogger(__name__)

ESCAPE_TAG = "escape"
HTML_MACRO = "::dominator::html!"
TEXT_FN = "::dominator::text"


def is_visible(node: Node, trim: bool) -> bool:
    """Elements are always visible; Text only with (trimmed, if trim) content."""
    if isinstance(node, Element):
        return True
    if isinstance(node, Text):
        return bool(node.content.strip() if trim else node.content)
    logger.warning("Unexpected %s node during formatting, skipping", type(node).__name__)
    return False


def _visible(children: list[Node], trim: bool) -> list[Node]:
    return [c for c in children if is_visible(c, trim)]


def _is_escape(node: Node) -> bool:
    return isinstance(node, Element) and node.name == ESCAPE_TAG


def _sep(last: bool) -> str:
    return "" if last else ","


def parse_style(style: str) -> list[tuple[str, str]]:
    """Split an inline style attribute into (property, value) pairs in source order."""
    decls = []
    for segment in style.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        if ":" not in segment:
            raise StructuralError(f"Style declaration {segment!r} has no ':' separator")
        prop, value = segment.split(":", 1)
        decls.append((prop.strip(), value.strip()))
    return decls


def _fmt_escape(el: Element, indent: Indent, out: list[str]) -> None:
    """Copy the raw text of an <escape> element, line by line, without escaping."""
    if len(el.children) != 1 or not isinstance(el.children[0], Text):
        kinds = [type(c).__name__ for c in el.children]
        raise StructuralError(f"<escape> must contain exactly one text node, found {kinds}")
    for line in el.children[0].content.splitlines():
        out.append(f"{indent}{line}")


def _fmt_classes(classes: list[str], indent: Indent, out: list[str]) -> None:
    if len(classes) == 1:
        out.append(f'{indent}.class("{escape_debug(classes[0])}")')
    elif classes:
        names = ", ".join(f'"{escape_debug(c)}"' for c in classes)
        out.append(f"{indent}.class([{names}])")


def _fmt_attrs(el: Element, indent: Indent, out: list[str]) -> None:
    style = el.attr("style")
    if style is not None:
        for prop, value in parse_style(style):
            out.append(f'{indent}.style("{escape_debug(prop)}", "{escape_debug(value)}")')
    for a in el.attrs:
        if a.prefix is not None:
            raise StructuralError(f"Prefixed attribute names are unsupported: {a.prefix}:{a.name}")
        if a.name in ("class", "style"):
            continue
        out.append(f'{indent}.attr("{escape_debug(a.name)}", "{escape_debug(a.value)}")')


def _fmt_element(el: Element, indent: Indent, trim: bool, last: bool, out: list[str]) -> None:
    if el.prefix is not None:
        raise StructuralError(f"Prefixed tag names are unsupported: {el.prefix}:{el.name}")
    if el.name == ESCAPE_TAG:
        _fmt_escape(el, indent, out)
        return

    inner = indent.inc()
    out.append(f'{indent}{HTML_MACRO}("{escape_debug(el.name)}", {{')
    _fmt_classes(el.classes, inner, out)
    _fmt_attrs(el, inner, out)

    children = _visible(el.children, trim)
    if len(children) == 1 and not _is_escape(children[0]):
        out.append(f"{inner}.child(")
        _fmt_node(children[0], inner.inc(), trim, True, out)
        out.append(f"{inner})")
    elif children:
        out.append(f"{inner}.children(&mut [")
        for i, child in enumerate(children):
            _fmt_node(child, inner.inc(), trim, i == len(children) - 1, out)
        out.append(f"{inner}])")
    out.append(f"{indent}}}){_sep(last)}")


def _fmt_text(node: Text, indent: Indent, trim: bool, last: bool, out: list[str]) -> None:
    content = node.content.strip() if trim else node.content
    if not content:
        return
    out.append(f'{indent}{TEXT_FN}("{escape_debug(content)}"){_sep(last)}')


def _fmt_node(node: Node, indent: Indent, trim: bool, last: bool, out: list[str]) -> None:
    if isinstance(node, Element):
        _fmt_element(node, indent, trim, last, out)
    elif isinstance(node, Text):
        _fmt_text(node, indent, trim, last, out)


def format_document(fragment: Fragment, trim: bool = False) -> str:
    """Format a normalized fragment; several visible roots are wrapped in [ ... ]."""
    out: list[str] = []
    roots = _visible(fragment.children, trim)
    if len(roots) == 1:
        _fmt_node(roots[0], Indent(), trim, True, out)
    elif roots:
        out.append("[")
        for i, node in enumerate(roots):
            _fmt_node(node, Indent(1), trim, i == len(roots) - 1, out)
        out.append("]")
    return "".join(f"{line}\n" for line in out)


def render_html(source: str, trim: bool = False) -> str:
    """Parse, normalize and format an HTML fragment."""
    return format_document(normalize(parse_html(source)), trim)
