"""Markdown documentation renderer.

Produces a single Markdown page for a design unit: port and generic
tables, a link to the block diagram, an optional free-text description
and the generated instantiation and testbench in fenced code blocks.
"""

from __future__ import annotations

from typing import Optional

from ..parsers import HDLParser
from ..templating import get_template
from .base import DocumentRenderer, renderer_registry


def diagram_filename(module_name: str) -> str:
    return f"{module_name}_block_diagram.svg"


@renderer_registry.register("markdown")
class MarkdownDocRenderer(DocumentRenderer):
    """Render a Markdown documentation page.

    Args:
        description: Text for the "Description" section.  The section is
            left out when this is empty.
        diagram_path: Where the page links the block diagram from.
            Defaults to ``<module>_block_diagram.svg``.
    """

    def __init__(self, description: Optional[str] = None, diagram_path: Optional[str] = None) -> None:
        self.description = description
        self.diagram_path = diagram_path

    def render(self, parser: HDLParser) -> str:
        descriptor = parser.describe()
        return get_template("documentation.md.jinja2").render(
            name=descriptor.name,
            unit=parser.dialect.unit_keyword,
            language=parser.dialect.value,
            ports=descriptor.ports,
            generics=descriptor.generics,
            diagram_path=self.diagram_path or diagram_filename(descriptor.name),
            description=(self.description or "").strip(),
            sample_usage=parser.generate_sample_usage(),
            testbench=parser.generate_testbench(),
        )
