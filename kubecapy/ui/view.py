"""Screen-independent description of what a screen shows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Tone(Enum):
    """Foreground colour of a piece of text."""

    DEFAULT = auto()
    WHITE = auto()
    CYAN = auto()
    GREEN = auto()
    YELLOW = auto()
    RED = auto()
    BLUE = auto()
    MAGENTA = auto()
    GRAY = auto()


@dataclass(frozen=True)
class Row:
    """One line of a screen."""

    text: str
    tone: Tone = Tone.DEFAULT
    bold: bool = False
    italic: bool = False
    selectable: bool = False
    selected: bool = False


@dataclass
class View:
    """A screen: title lines, titled sections of rows and a line of key hints."""

    title: list[Row] = field(default_factory=list)
    sections: list[tuple[str, list[Row]]] = field(default_factory=list)
    footer: str = ""

    def selectable_count(self) -> int:
        """Number of rows, over all sections, that the user can select."""
        return sum(1 for _, rows in self.sections for row in rows if row.selectable)