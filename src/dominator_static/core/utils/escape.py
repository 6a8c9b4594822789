"""String escaping for values embedded in generated string literals"""


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\0": "\\0",
}


def escape_debug(s: str) -> str:
    """Escape s for use inside a double-quoted literal.

    Backslashes, double quotes and non-printable characters are escaped; the
    latter as ``\\u{hex}``. Best effort only: do not feed untrusted input.
    """
    out = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable():
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return "".join(out)
