"""Base renderer class and registry.

Renderers turn a bound parser into a complete document (an SVG diagram,
a Markdown page).  Concrete classes register themselves with
:data:`renderer_registry` under their output format name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..parsers import HDLParser
from ..registry import Registry

# Registry for renderer implementations
renderer_registry = Registry("renderer")


class DocumentRenderer(ABC):
    """Abstract base class for whole-document renderers."""

    @abstractmethod
    def render(self, parser: HDLParser) -> str:
        """Render a document describing the unit bound to ``parser``.

        Args:
            parser: Parser bound to the HDL source.

        Returns:
            The document text.
        """
        raise NotImplementedError
