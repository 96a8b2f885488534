"""Document renderers.

- svg: block diagram of the unit's ports
- markdown: documentation page with tables, usage and testbench

All renderers are automatically registered via decorators.
"""

from .base import DocumentRenderer, renderer_registry
from .svg import SvgDiagramRenderer, generate
from .markdown import MarkdownDocRenderer

__all__ = [
    "DocumentRenderer",
    "renderer_registry",
    "SvgDiagramRenderer",
    "MarkdownDocRenderer",
    "generate",
]
