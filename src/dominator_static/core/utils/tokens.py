"""Shared markdown-it token utilities"""


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def attr_str(token, name: str) -> str:
    """Return attribute name of token as a string, '' when absent."""
    value = token.attrGet(name)
    return "" if value is None else str(value)


def list_start(token) -> int | None:
    """Start number for ordered_list_open tokens (default 1), None for bullet lists."""
    if token.type != 'ordered_list_open':
        return None
    start = token.attrGet('start')
    return int(start) if start is not None else 1
