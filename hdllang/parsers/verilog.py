"""Pattern-based Verilog parser.

The parser recognizes the common ANSI header idioms::

    module adder #(parameter WIDTH = 8) (
        input  wire [WIDTH-1:0] a,
        output reg  [WIDTH:0]   sum
    );

It does not tokenize.  Each construct is found by scanning the comment
free text with one of the module level patterns below, so a declaration
the patterns do not anticipate is simply not reported.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Tuple

from ..dialect import Dialect
from ..model import SCALAR_WIDTH, UNKNOWN_MODULE, Direction, GenericParameter, Port
from ..templating import get_template
from .base import PULSE_TIME_NS, SETTLE_TIME_NS, HDLParser, parser_registry

logger = logging.getLogger(__name__)

DEFAULT_NET_TYPE = "wire"

COMMENT_PATTERN = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)

MODULE_NAME_PATTERN = re.compile(r"\bmodule\s+(\w+)")

# direction, optional net or variable type, optional [high:low], name
PORT_PATTERN = re.compile(
    r"\b(input|output|inout)\b\s*"
    r"(?:(reg|wire|logic)\b\s*)?"
    r"(?:signed\b\s*)?"
    r"(?:\[([^\[\]]*:[^\[\]]*)\]\s*)?"
    r"(\w+)",
    re.IGNORECASE,
)

# name and value of `parameter [type] [range] NAME = value`
PARAMETER_PATTERN = re.compile(
    r"\bparameter\s+"
    r"(?:(?:integer|real|realtime|time|signed|unsigned)\s+)*"
    r"(?:\[[^\[\]]*\]\s*)?"
    r"(\w+)\s*=\s*([^,;\n]+)"
)


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments, keeping line breaks."""
    return COMMENT_PATTERN.sub(lambda m: "\n" * m.group(0).count("\n"), text)


def _trim_value(value: str) -> str:
    """Cut a parameter value at a ``)`` that closes an enclosing list."""
    depth = 0
    for i, ch in enumerate(value):
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return value[:i].strip()
            depth -= 1
    return value.strip()


@parser_registry.register(Dialect.VERILOG)
class VerilogParser(HDLParser):
    """Parser for Verilog modules."""

    dialect = Dialect.VERILOG

    def _text(self) -> str:
        return strip_comments(self.source)

    def get_module_name(self) -> str:
        m = MODULE_NAME_PATTERN.search(self._text())
        return m.group(1) if m else UNKNOWN_MODULE

    def get_ports(self) -> List[Port]:
        ports: List[Port] = []
        for m in PORT_PATTERN.finditer(self._text()):
            direction, net_type, bit_range, name = m.groups()
            ports.append(Port(
                name=name,
                direction=Direction.parse(direction),
                data_type=net_type.lower() if net_type else DEFAULT_NET_TYPE,
                width=bit_range.strip() if bit_range else SCALAR_WIDTH,
            ))
        logger.debug("verilog: %d port(s) found", len(ports))
        return ports

    def get_generic_ports(self) -> List[GenericParameter]:
        generics = [
            GenericParameter(name=m.group(1), default=_trim_value(m.group(2)))
            for m in PARAMETER_PATTERN.finditer(self._text())
        ]
        logger.debug("verilog: %d parameter(s) found", len(generics))
        return generics

    # ------------------------------------------------------------------
    # Synthesis

    def _instantiation(self, instance_name: str, overrides: Iterable[Tuple[str, str]]) -> str:
        """Build a named-association instantiation of the module.

        ``overrides`` are ``(parameter, value)`` pairs; the ``#( ... )``
        block is left out entirely when there are none.
        """
        module_name = self.get_module_name()
        overrides = list(overrides)
        ports = self.get_ports()

        lines: List[str] = []
        if overrides:
            lines.append(f"{module_name} #(")
            for i, (name, value) in enumerate(overrides):
                sep = "," if i < len(overrides) - 1 else ""
                lines.append(f"  .{name}({value}){sep}")
            lines.append(f") {instance_name} (")
        else:
            lines.append(f"{module_name} {instance_name} (")
        for i, port in enumerate(ports):
            sep = "," if i < len(ports) - 1 else ""
            lines.append(f"  .{port.name}({port.name}){sep}")
        lines.append(");")
        return "\n".join(lines)

    def generate_sample_usage(self) -> str:
        overrides = [(g.name, g.default or "") for g in self.get_generic_ports()]
        return self._instantiation("instance_name", overrides)

    def generate_testbench(self) -> str:
        descriptor = self.describe()
        generics = descriptor.generics
        signals = [
            (
                "reg" if p.is_input else "wire",
                "" if p.is_scalar else f" [{p.width}]",
                p.name,
            )
            for p in descriptor.ports
        ]
        template = get_template("verilog_testbench.v.jinja2")
        return template.render(
            name=descriptor.name,
            generics=generics,
            signals=signals,
            inputs=descriptor.inputs,
            instantiation=self._instantiation("uut", [(g.name, g.name) for g in generics]),
            settle=SETTLE_TIME_NS,
            pulse=PULSE_TIME_NS,
        )
