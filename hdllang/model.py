"""Data model for extracted HDL interfaces.

The parsers in :mod:`hdllang.parsers` turn raw source text into the
records defined here; the testbench generators and the renderers only
ever read them.  All records are frozen: once a parser has produced a
port list nothing downstream can change it.

Widths are kept as the source text of the range (``"7:0"``,
``"WIDTH-1 downto 0"``).  They are never evaluated.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

UNKNOWN_MODULE = "Unknown"
SCALAR_WIDTH = "1"


class Direction(str, Enum):
    """Port direction, normalized across dialects."""

    INPUT = "input"
    OUTPUT = "output"
    INOUT = "inout"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, keyword: str) -> "Direction":
        """Map a direction keyword of either dialect to a :class:`Direction`.

        Accepts ``input``/``output``/``inout`` as well as the VHDL
        ``in``/``out`` spellings, in any letter case.
        """
        key = keyword.strip().lower()
        return _DIRECTION_ALIASES.get(key) or cls(key)


_DIRECTION_ALIASES = {
    "in": Direction.INPUT,
    "out": Direction.OUTPUT,
}


@dataclass(frozen=True)
class Port:
    """One declared signal of a module or entity."""

    name: str
    direction: Direction
    data_type: str
    width: Optional[str] = SCALAR_WIDTH

    @property
    def is_input(self) -> bool:
        return self.direction is Direction.INPUT

    @property
    def is_scalar(self) -> bool:
        return self.width == SCALAR_WIDTH


@dataclass(frozen=True)
class GenericParameter:
    """One compile-time parameter (Verilog ``parameter``, VHDL generic).

    Verilog parameters are untyped, so ``data_type`` and ``width`` are
    only filled in by the VHDL parser.
    """

    name: str
    data_type: Optional[str] = None
    width: Optional[str] = None
    default: Optional[str] = None


@dataclass(frozen=True)
class RequiredLibraries:
    """VHDL ``library`` and ``use`` clauses in first-occurrence order."""

    libraries: Tuple[str, ...] = ()
    packages: Tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.libraries or self.packages)


@dataclass(frozen=True)
class ModuleDescriptor:
    """Everything a parser extracts from one design unit."""

    name: str = UNKNOWN_MODULE
    ports: List[Port] = field(default_factory=list)
    generics: List[GenericParameter] = field(default_factory=list)

    @property
    def inputs(self) -> List[Port]:
        return [p for p in self.ports if p.is_input]

    def to_dict(self) -> Dict[str, Any]:
        """Return the descriptor as plain JSON-compatible data."""
        data = asdict(self)
        for port in data["ports"]:
            port["direction"] = str(port["direction"])
        return data
