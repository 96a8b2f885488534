"""Parser construction by dialect."""

from __future__ import annotations

import logging
from typing import Union

from .dialect import Dialect
from .parsers import HDLParser, parser_registry

logger = logging.getLogger(__name__)


def create_parser(dialect: Union[str, Dialect], source: str) -> HDLParser:
    """Return a parser for ``dialect`` bound to ``source``.

    Args:
        dialect: A :class:`Dialect` or a tag such as ``"verilog"`` or
            ``"VHDL"`` (matched case-insensitively).
        source: HDL source text.

    Raises:
        UnsupportedDialectError: If ``dialect`` names no supported HDL.
    """
    dialect = Dialect.from_tag(dialect)
    logger.debug("creating %s parser for %d characters of source", dialect, len(source))
    return parser_registry.create(dialect, source=source)
