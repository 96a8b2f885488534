"""Parser contract shared by every HDL dialect.

A parser is bound to one piece of source text at construction time and
answers questions about it: the design unit's name, its ports and its
generics.  From those answers it can synthesize an instantiation
template and a stimulus-only testbench in its own dialect.

Nothing is cached.  Every call rescans the stored text, which keeps the
parsers trivially thread-safe and makes repeated calls return identical
results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List

from ..dialect import Dialect
from ..model import GenericParameter, ModuleDescriptor, Port
from ..registry import Registry

# Registry of parser implementations, keyed by Dialect
parser_registry = Registry("parser")

# Testbench timing, in nanoseconds
SETTLE_TIME_NS = 100
PULSE_TIME_NS = 10


class HDLParser(ABC):
    """Abstract base class for dialect parsers.

    Subclasses implement the five extraction/synthesis operations and set
    :attr:`dialect`.  The source text is kept verbatim in :attr:`source`.
    """

    dialect: ClassVar[Dialect]

    def __init__(self, source: str) -> None:
        self.source = source

    @abstractmethod
    def get_module_name(self) -> str:
        """Return the first declared module/entity name, or ``"Unknown"``."""
        raise NotImplementedError

    @abstractmethod
    def get_ports(self) -> List[Port]:
        """Return the declared ports in source order."""
        raise NotImplementedError

    @abstractmethod
    def get_generic_ports(self) -> List[GenericParameter]:
        """Return the declared parameters/generics in source order."""
        raise NotImplementedError

    @abstractmethod
    def generate_sample_usage(self) -> str:
        """Return an instantiation of the unit binding every port and generic."""
        raise NotImplementedError

    @abstractmethod
    def generate_testbench(self) -> str:
        """Return a self-contained stimulus testbench for the unit."""
        raise NotImplementedError

    def describe(self) -> ModuleDescriptor:
        """Bundle the extraction results into a :class:`ModuleDescriptor`."""
        return ModuleDescriptor(
            name=self.get_module_name(),
            ports=self.get_ports(),
            generics=self.get_generic_ports(),
        )

    def description_request(self) -> Dict[str, Any]:
        """Return the payload consumed by an external description service.

        The service itself (and any network access) lives outside this
        package; this only exposes the extracted data as plain values.
        """
        return {
            "source_text": self.source,
            "dialect": self.dialect.value,
            "generic_ports": self.describe().to_dict()["generics"],
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(module={self.get_module_name()!r})"
