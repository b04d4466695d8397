"""UI building blocks: colours, button interaction and a tree of UI nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

FONT = "fonts/FiraSans-Bold.ttf"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"colour component {name}={value} is outside 0..1")

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(r, g, b)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> "Color":
        return cls(r, g, b, a)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """The colour as four 0..255 integers."""
        return tuple(round(c * 255) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]


WHITE = Color(1.0, 1.0, 1.0)
NORMAL_BUTTON_COLOR = Color(0.15, 0.15, 0.15)
HOVERED_BUTTON_COLOR = Color(0.25, 0.25, 0.25)
PRESSED_BUTTON_COLOR = Color(0.35, 0.75, 0.35)
MENU_BACKGROUND_COLOR = Color(0.25, 0.25, 0.25, 0.5)

TITLE_FONT_SIZE = 64.0
BUTTON_FONT_SIZE = 32.0


class Interaction(Enum):
    """What the pointer is doing to a button."""

    CLICKED = "clicked"
    HOVERED = "hovered"
    NONE = "none"


@dataclass
class Node:
    """One element of a UI tree.

    ``kind`` is one of ``"node"``, ``"button"``, ``"text"`` or ``"image"``;
    ``marker`` tags the nodes that systems look up.
    """

    kind: str = "node"
    marker: Optional[str] = None
    style: Dict[str, Any] = field(default_factory=dict)
    text: Optional[str] = None
    font: Optional[str] = None
    font_size: Optional[float] = None
    text_color: Optional[Color] = None
    image: Optional[str] = None
    background: Optional[Color] = None
    z_index: int = 0
    children: List["Node"] = field(default_factory=list)

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all its descendants, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, marker: str) -> List["Node"]:
        """Every node in the tree tagged with ``marker``."""
        return [node for node in self.walk() if node.marker == marker]

    def find(self, marker: str) -> "Node":
        """The single node tagged with ``marker``.

        Raises ``LookupError`` if there is none or more than one.
        """
        found = self.find_all(marker)
        if len(found) != 1:
            raise LookupError(f"expected one node marked {marker!r}, found {len(found)}")
        return found[0]


def button_color(
    interaction: Interaction,
    normal: Color = NORMAL_BUTTON_COLOR,
    hovered: Color = HOVERED_BUTTON_COLOR,
    pressed: Color = PRESSED_BUTTON_COLOR,
) -> Color:
    """The background a button shows for ``interaction``."""
    if interaction is Interaction.CLICKED:
        return pressed
    if interaction is Interaction.HOVERED:
        return hovered
    return normal


def text_node(value: str, font_size: float, marker: Optional[str] = None) -> Node:
    """A white text label in the game font."""
    return Node(
        kind="text",
        marker=marker,
        style={"text_align": "center"},
        text=value,
        font=FONT,
        font_size=font_size,
        text_color=WHITE,
    )


def image_node(path: str, size: float) -> Node:
    """A square image with an 8-pixel margin on every side."""
    return Node(
        kind="image",
        image=path,
        style={"size": (f"{size:g}px", f"{size:g}px"), "margin": ("8px",) * 4},
    )


def button_node(
    label: str, marker: str, style: Dict[str, Any], color: Color = NORMAL_BUTTON_COLOR
) -> Node:
    """A button holding one text label."""
    return Node(
        kind="button",
        marker=marker,
        style=dict(style),
        background=color,
        children=[text_node(label, BUTTON_FONT_SIZE)],
    )