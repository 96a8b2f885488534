"""HDL dialect selection.

External code names a dialect with a free-form tag (``"Verilog"``,
``"vhdl"``, ...).  The tag is converted exactly once into the closed
:class:`Dialect` enumeration; everything past that boundary works with
enum members only.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class UnsupportedDialectError(ValueError):
    """Raised when a dialect tag names no supported HDL."""

    def __init__(self, tag: str) -> None:
        supported = ", ".join(d.value for d in Dialect)
        super().__init__(f"Unsupported HDL type: {tag!r} (supported: {supported})")
        self.tag = tag


class Dialect(str, Enum):
    """Supported HDL dialects."""

    VERILOG = "verilog"
    VHDL = "vhdl"

    def __str__(self) -> str:
        return self.value

    @property
    def unit_keyword(self) -> str:
        """Word used for a design unit in this dialect."""
        return "entity" if self is Dialect.VHDL else "module"

    @classmethod
    def from_tag(cls, tag: Union[str, "Dialect"]) -> "Dialect":
        """Convert a caller supplied tag into a :class:`Dialect`.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            UnsupportedDialectError: If ``tag`` names no known dialect.
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            raise UnsupportedDialectError(str(tag)) from None
