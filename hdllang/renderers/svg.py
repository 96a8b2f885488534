"""SVG block diagram renderer.

Draws the module as a single box with one label per port: inputs along
the left edge pointing into the box, everything else along the right
edge.  The drawing only depends on port names and directions, so it
works the same for every dialect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional

from ..model import Direction, Port
from ..parsers import HDLParser
from ..templating import get_template
from .base import DocumentRenderer, renderer_registry

WIDTH = 200
BASE_HEIGHT = 30
ROW_HEIGHT = 20
MARGIN = 10
TITLE_Y = 25
FIRST_ROW_Y = 40
LABEL_INSET = 15


@dataclass(frozen=True)
class Palette:
    stroke: str
    fill: str
    text: str


LIGHT = Palette(stroke="black", fill="none", text="black")
DARK = Palette(stroke="white", fill="#374151", text="white")


class Label(NamedTuple):
    x: int
    y: int
    anchor: str
    text: str


def diagram_height(port_count: int) -> int:
    """Canvas height for ``port_count`` ports."""
    return BASE_HEIGHT + ROW_HEIGHT * port_count


def port_label(port: Port, row: int) -> Label:
    """Place the label of ``port`` on the ``row``-th line of the box."""
    y = FIRST_ROW_Y + ROW_HEIGHT * row
    if port.is_input:
        return Label(LABEL_INSET, y, "start", f"→ {port.name}")
    glyph = "↔" if port.direction is Direction.INOUT else "→"
    return Label(WIDTH - LABEL_INSET, y, "end", f"{port.name} {glyph}")


@renderer_registry.register("svg")
class SvgDiagramRenderer(DocumentRenderer):
    """Render ports as an SVG block diagram."""

    def __init__(self, dark_mode: bool = False) -> None:
        self.dark_mode = dark_mode

    @property
    def palette(self) -> Palette:
        return DARK if self.dark_mode else LIGHT

    def render_ports(self, ports: Iterable[Port], title: str = "Module") -> str:
        """Render a diagram for ``ports`` with ``title`` above them."""
        ports = list(ports)
        height = diagram_height(len(ports))
        labels: List[Label] = [port_label(p, i) for i, p in enumerate(ports)]
        return get_template("block_diagram.svg.jinja2").render(
            width=WIDTH,
            height=height,
            margin=MARGIN,
            box_width=WIDTH - 2 * MARGIN,
            box_height=height - 2 * MARGIN,
            title_x=WIDTH // 2,
            title_y=TITLE_Y,
            title=title,
            labels=labels,
            palette=self.palette,
        )

    def render(self, parser: HDLParser) -> str:
        return self.render_ports(parser.get_ports(), title=parser.get_module_name())


def generate(ports: Iterable[Port], dark_mode: bool = False, title: Optional[str] = None) -> str:
    """Return an SVG document for ``ports``."""
    return SvgDiagramRenderer(dark_mode=dark_mode).render_ports(ports, title=title or "Module")
