"""Pattern-based VHDL parser.

Recognizes entity declarations of the form::

    library ieee;
    use ieee.std_logic_1164.all;

    entity reg is
        generic ( W : integer := 8 );
        port (
            clk : in  std_logic;
            q   : out std_logic_vector(W-1 downto 0)
        );
    end reg;

Ports and generics are looked up inside the entity header only, so the
component declarations and signals of an architecture body in the same
file are not mistaken for ports.  When no entity header is present the
whole text is scanned.

Directions are reported in the shared ``input/output/inout`` vocabulary
and translated back to ``in/out/inout`` when VHDL text is generated.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Tuple

from ..dialect import Dialect
from ..model import (
    SCALAR_WIDTH,
    UNKNOWN_MODULE,
    Direction,
    GenericParameter,
    ModuleDescriptor,
    Port,
    RequiredLibraries,
)
from ..templating import get_template
from .base import PULSE_TIME_NS, SETTLE_TIME_NS, HDLParser, parser_registry

logger = logging.getLogger(__name__)

VALUE_PLACEHOLDER = "/* Your value here */"

COMMENT_PATTERN = re.compile(r"--[^\n]*")

ENTITY_PATTERN = re.compile(r"\bentity\s+(\w+)\s+is\b", re.IGNORECASE)
# `end;`, `end name;`, `end entity;` or `end entity name;`
ENTITY_END_PATTERN = re.compile(r"\bend\b\s*(?:entity\b\s*)?(?:\w+\s*)?;", re.IGNORECASE)

STRING_PATTERN = re.compile(r'"[^"\n]*"')

# name : direction logic-type [(range)]
PORT_PATTERN = re.compile(
    r"(\w+)\s*:\s*(inout|in|out)\s+(std_u?logic(?:_vector)?)\b(\s*\((.*?)\))?",
    re.IGNORECASE,
)

GENERIC_BLOCK_PATTERN = re.compile(r"\bgeneric\s*\(([\s\S]*?)\);", re.IGNORECASE)

# name : type [(high downto|to low)] [:= default]
GENERIC_PATTERN = re.compile(
    r"(\w+)\s*:\s*(\w+)"
    r"(?:\s*\(\s*([^\s()]+)\s+(downto|to)\s+([^\s()]+)\s*\))?"
    r"(?:\s*:=\s*([^;]+))?",
    re.IGNORECASE,
)

LIBRARY_PATTERN = re.compile(r"\blibrary\s+(\w+)\s*;", re.IGNORECASE)
USE_PATTERN = re.compile(r"\buse\s+([\w.]+)\s*;", re.IGNORECASE)

_KEYWORDS: Dict[Direction, str] = {
    Direction.INPUT: "in",
    Direction.OUTPUT: "out",
    Direction.INOUT: "inout",
}


def strip_comments(text: str) -> str:
    """Remove ``--`` line comments."""
    return COMMENT_PATTERN.sub("", text)


def subtype(port: Port) -> str:
    """Return the port's type with its range, e.g. ``std_logic_vector(7 downto 0)``."""
    if port.is_scalar or not port.width:
        return port.data_type
    return f"{port.data_type}({port.width})"


def mask_strings(text: str) -> str:
    """Blank out string literals, keeping every offset."""
    return STRING_PATTERN.sub(lambda m: " " * len(m.group(0)), text)


def generic_subtype(generic: GenericParameter) -> str:
    """Return the generic's type with its range, if any."""
    if generic.width:
        return f"{generic.data_type}({generic.width})"
    return generic.data_type or ""


def aggregate(port: Port, bit: str) -> str:
    """Return a literal setting every bit of ``port`` to ``bit``."""
    if port.is_scalar:
        return f"'{bit}'"
    return f"(others => '{bit}')"


@parser_registry.register(Dialect.VHDL)
class VHDLParser(HDLParser):
    """Parser for VHDL entities."""

    dialect = Dialect.VHDL

    def _text(self) -> str:
        return strip_comments(self.source)

    def _entity_header(self) -> str:
        """Return the text from ``entity ... is`` to its ``end ...;`` clause.

        String literals are ignored while looking for the clause, so a
        default such as ``"the end"`` does not cut the header short.
        """
        text = self._text()
        m = ENTITY_PATTERN.search(text)
        if not m:
            return text
        end = ENTITY_END_PATTERN.search(mask_strings(text), m.end())
        return text[m.start():end.start() if end else len(text)]

    def get_module_name(self) -> str:
        m = ENTITY_PATTERN.search(self._text())
        return m.group(1) if m else UNKNOWN_MODULE

    def get_ports(self) -> List[Port]:
        ports: List[Port] = []
        for m in PORT_PATTERN.finditer(self._entity_header()):
            name, direction, logic_type, _, bounds = m.groups()
            if not logic_type.lower().endswith("_vector"):
                width = SCALAR_WIDTH
            else:
                width = bounds.strip() if bounds else None
            ports.append(Port(
                name=name,
                direction=Direction.parse(direction),
                data_type=logic_type,
                width=width,
            ))
        logger.debug("vhdl: %d port(s) found", len(ports))
        return ports

    def get_generic_ports(self) -> List[GenericParameter]:
        generics: List[GenericParameter] = []
        block = GENERIC_BLOCK_PATTERN.search(self._entity_header())
        if not block:
            return generics
        for m in GENERIC_PATTERN.finditer(block.group(1)):
            name, data_type, high, order, low, default = m.groups()
            generics.append(GenericParameter(
                name=name,
                data_type=data_type,
                width=f"{high} {order.lower()} {low}" if high else None,
                default=default.strip() if default else None,
            ))
        logger.debug("vhdl: %d generic(s) found", len(generics))
        return generics

    def get_required_libraries(self) -> RequiredLibraries:
        """Collect ``library`` and ``use`` clauses, first occurrence wins."""
        text = self._text()
        libraries = dict.fromkeys(m.group(1) for m in LIBRARY_PATTERN.finditer(text))
        packages = dict.fromkeys(m.group(1) for m in USE_PATTERN.finditer(text))
        return RequiredLibraries(tuple(libraries), tuple(packages))

    # ------------------------------------------------------------------
    # Synthesis

    def _instantiation(
        self,
        head: str,
        descriptor: ModuleDescriptor,
        values: List[Tuple[str, str]],
        require_port_map: bool,
    ) -> str:
        """Build ``head`` followed by generic and port map clauses.

        ``values`` are ``(generic, actual)`` pairs; without any the generic
        map is left out.  Without ports the port map is only kept when
        ``require_port_map`` is set.
        """
        ports = descriptor.ports
        with_ports = bool(ports) or require_port_map

        lines = [head]
        if values:
            lines.append("  generic map (")
            for i, (name, value) in enumerate(values):
                sep = "," if i < len(values) - 1 else ""
                lines.append(f"    {name} => {value}{sep}")
            lines.append("  )" if with_ports else "  );")
        if with_ports:
            lines.append("  port map (")
            for i, port in enumerate(ports):
                sep = "," if i < len(ports) - 1 else ""
                lines.append(f"    {port.name} => {port.name}{sep}")
            lines.append("  );")
        if not values and not with_ports:
            lines[0] += ";"
        return "\n".join(lines)

    def _component(self, descriptor: ModuleDescriptor) -> str:
        """Re-declare the entity as a component."""
        lines = [f"component {descriptor.name} is"]
        if descriptor.generics:
            lines.append("  generic (")
            for i, g in enumerate(descriptor.generics):
                decl = f"    {g.name} : {generic_subtype(g)}"
                if g.default is not None:
                    decl += f" := {g.default}"
                lines.append(decl + (";" if i < len(descriptor.generics) - 1 else ""))
            lines.append("  );")
        if descriptor.ports:
            lines.append("  port (")
            for i, port in enumerate(descriptor.ports):
                decl = f"    {port.name} : {_KEYWORDS[port.direction]} {subtype(port)}"
                lines.append(decl + (";" if i < len(descriptor.ports) - 1 else ""))
            lines.append("  );")
        lines.append("end component;")
        return "\n".join(lines)

    def generate_sample_usage(self) -> str:
        descriptor = self.describe()
        name = descriptor.name
        values = [(g.name, g.default or VALUE_PLACEHOLDER) for g in descriptor.generics]
        return self._instantiation(
            f"{name}_instance : entity work.{name}", descriptor, values, require_port_map=True
        )

    def generate_testbench(self) -> str:
        descriptor = self.describe()
        name = descriptor.name
        inputs = descriptor.inputs
        first = inputs[0] if inputs else None
        # Generics with a default are mirrored as constants and bound by
        # name; the others keep the component's own declaration unset.
        constants = [
            (g.name, generic_subtype(g), g.default)
            for g in descriptor.generics if g.default is not None
        ]
        unset = [g.name for g in descriptor.generics if g.default is None]
        template = get_template("vhdl_testbench.vhd.jinja2")
        return template.render(
            name=name,
            libraries=self.get_required_libraries(),
            component=self._component(descriptor),
            constants=constants,
            unset=unset,
            signals=[(p.name, subtype(p)) for p in descriptor.ports],
            instantiation=self._instantiation(
                f"uut: {name}", descriptor, [(c[0], c[0]) for c in constants], require_port_map=False
            ),
            resets=[(p.name, aggregate(p, "0")) for p in inputs],
            pulse_port=first.name if first else None,
            pulse_high=aggregate(first, "1") if first else None,
            pulse_low=aggregate(first, "0") if first else None,
            settle=SETTLE_TIME_NS,
            pulse=PULSE_TIME_NS,
        )
