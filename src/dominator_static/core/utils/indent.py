"""Line indentation for generated builder code"""

from dataclasses import dataclass


INDENT_UNIT = "  "


@dataclass(frozen=True)
class Indent:
    """Nesting depth rendered as two spaces per level."""
    depth: int = 0

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"indent depth must be non-negative, got {self.depth}")

    def inc(self, n: int = 1) -> "Indent":
        """Return a new Indent n levels deeper."""
        return Indent(self.depth + n)

    def __str__(self) -> str:
        return INDENT_UNIT * self.depth
