"""HTML fragment parsing with BeautifulSoup into the owned node tree"""

from bs4 import (
    BeautifulSoup,
    CData,
    Comment as SoupComment,
    Declaration,
    Doctype as SoupDoctype,
    NavigableString,
    ParserRejectedMarkup,
    ProcessingInstruction as SoupProcessingInstruction,
    Tag,
)

from dominator_static.core.html.models import (
    Attribute,
    Comment,
    Doctype,
    Element,
    Fragment,
    Node,
    ProcessingInstruction,
    Text,
)
from dominator_static.errors import ParseError


HTML_PARSER = "html5lib"
# Wrappers the parser adds around any fragment; their children are the roots
DOCUMENT_WRAPPERS = {"html", "head", "body"}
HTML_EXTENSIONS = {'.html', '.htm'}


def _split_qualified(name: str, prefix: str | None = None) -> tuple[str | None, str]:
    """Return (prefix, local_name) for names like 'svg:rect'."""
    if prefix:
        return prefix, name.split(":", 1)[-1]
    if ":" in name:
        pre, local = name.split(":", 1)
        return pre, local
    return None, name


def _convert_tag(tag: Tag) -> Element:
    prefix, name = _split_qualified(tag.name, tag.prefix)
    attrs = []
    classes: list[str] = []
    for raw_name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attr_prefix, attr_name = _split_qualified(raw_name)
        attrs.append(Attribute(name=attr_name, value=value, prefix=attr_prefix))
        if raw_name == "class":
            classes = list(dict.fromkeys(c for c in value.split() if c))
    return Element(
        name=name,
        prefix=prefix,
        classes=classes,
        attrs=attrs,
        children=[_convert(child) for child in tag.children],
    )


def _convert(node) -> Node:
    """Map one bs4 node onto the owned tree; order matters, bs4 node types subclass each other."""
    if isinstance(node, Tag):
        return _convert_tag(node)
    if isinstance(node, SoupComment):
        return Comment(str(node))
    if isinstance(node, (SoupDoctype, Declaration)):
        return Doctype(str(node))
    if isinstance(node, SoupProcessingInstruction):
        return ProcessingInstruction(str(node))
    if isinstance(node, (CData, NavigableString)):
        return Text(str(node))
    raise ParseError(f"Unknown node type from parser: {type(node).__name__}")


def _fragment_roots(parent) -> list:
    """Children of parent with the implied html/head/body wrappers flattened away.

    Doctype and comments ahead of <html> stay in document order.
    """
    roots = []
    for child in parent.children:
        if isinstance(child, Tag) and child.name in DOCUMENT_WRAPPERS:
            roots.extend(_fragment_roots(child))
        else:
            roots.append(child)
    return roots


def parse_html(source: str) -> Fragment:
    """Parse an HTML fragment with standard HTML5 tree construction.

    Implied end tags are applied, so "<p>a<p>b" yields two sibling paragraphs.
    Only the class attribute is split into tokens.
    """
    try:
        soup = BeautifulSoup(source, HTML_PARSER, multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise ParseError(f"Invalid HTML: {e}") from e
    return Fragment(children=[_convert(child) for child in _fragment_roots(soup)])
