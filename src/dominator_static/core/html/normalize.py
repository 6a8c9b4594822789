"""Structural normalization of a parsed HTML fragment before formatting"""

from dominator_static.core.html.models import Element, Fragment, Text
from dominator_static.errors import StructuralError


def prune_structural(node: Element | Fragment) -> None:
    """Pass 1: detach every child that is neither an Element nor Text, at any depth."""
    node.children[:] = [c for c in node.children if isinstance(c, (Element, Text))]
    for child in node.children:
        if isinstance(child, Element):
            prune_structural(child)


def _is_blank(node) -> bool:
    """True for a Text node with whitespace-only content."""
    if isinstance(node, Text):
        return not node.content.strip()
    if isinstance(node, Element):
        return False
    raise StructuralError(f"Unexpected {type(node).__name__} node after structural pruning")


def prune_edge_whitespace(node: Element | Fragment) -> None:
    """Pass 2: detach whitespace-only Text at the first and last child positions.

    Interior whitespace between siblings is left alone; the formatter decides
    whether it is visible.
    """
    if node.children and _is_blank(node.children[0]):
        del node.children[0]
    if node.children and _is_blank(node.children[-1]):
        del node.children[-1]
    for child in node.children:
        if isinstance(child, Element):
            prune_edge_whitespace(child)


def normalize(fragment: Fragment) -> Fragment:
    """Run both pruning passes in place and return the fragment."""
    prune_structural(fragment)
    prune_edge_whitespace(fragment)
    return fragment
