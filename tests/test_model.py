import dataclasses
import unittest

from hdllang.model import (
    UNKNOWN_MODULE,
    Direction,
    GenericParameter,
    ModuleDescriptor,
    Port,
    RequiredLibraries,
)


class TestDirection(unittest.TestCase):
    def test_verilog_keywords(self):
        """Verilog keywords map to directions in any letter case."""
        self.assertIs(Direction.parse("input"), Direction.INPUT)
        self.assertIs(Direction.parse("OUTPUT"), Direction.OUTPUT)
        self.assertIs(Direction.parse("Inout"), Direction.INOUT)

    def test_vhdl_keywords(self):
        """VHDL in/out are normalized to input/output."""
        self.assertIs(Direction.parse("in"), Direction.INPUT)
        self.assertIs(Direction.parse("OUT"), Direction.OUTPUT)
        self.assertIs(Direction.parse("inout"), Direction.INOUT)

    def test_unknown_keyword(self):
        """An unknown keyword raises ValueError."""
        with self.assertRaises(ValueError):
            Direction.parse("buffer")

    def test_str_is_value(self):
        """str() of a direction is its keyword."""
        self.assertEqual(str(Direction.OUTPUT), "output")


class TestRecords(unittest.TestCase):
    def test_port_defaults_to_scalar(self):
        """A port without a width is a scalar."""
        port = Port(name="clk", direction=Direction.INPUT, data_type="wire")
        self.assertEqual(port.width, "1")
        self.assertTrue(port.is_scalar)
        self.assertTrue(port.is_input)

    def test_port_is_frozen(self):
        """Ports cannot be changed after construction."""
        port = Port(name="clk", direction=Direction.INPUT, data_type="wire")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            port.name = "other"

    def test_generic_defaults(self):
        """Only the name is required for a generic."""
        g = GenericParameter(name="WIDTH", default="8")
        self.assertIsNone(g.data_type)
        self.assertIsNone(g.width)
        self.assertEqual(g.default, "8")

    def test_required_libraries_truthiness(self):
        """Library clauses are truthy only when any were found."""
        self.assertFalse(RequiredLibraries())
        self.assertTrue(RequiredLibraries(libraries=("ieee",)))


class TestModuleDescriptor(unittest.TestCase):
    def setUp(self):
        self.desc = ModuleDescriptor(
            name="reg",
            ports=[
                Port("clk", Direction.INPUT, "std_logic"),
                Port("q", Direction.OUTPUT, "std_logic_vector", "7 downto 0"),
                Port("d", Direction.INPUT, "std_logic_vector", "7 downto 0"),
            ],
            generics=[GenericParameter("W", "integer", None, "8")],
        )

    def test_default_name_is_sentinel(self):
        """An empty descriptor is named "Unknown"."""
        self.assertEqual(ModuleDescriptor().name, UNKNOWN_MODULE)

    def test_inputs_keep_declaration_order(self):
        """inputs lists only input ports, in declaration order."""
        self.assertEqual([p.name for p in self.desc.inputs], ["clk", "d"])

    def test_to_dict_is_plain_data(self):
        """to_dict returns JSON-ready data with string directions."""
        data = self.desc.to_dict()
        self.assertEqual(data["name"], "reg")
        self.assertEqual(data["ports"][1], {
            "name": "q",
            "direction": "output",
            "data_type": "std_logic_vector",
            "width": "7 downto 0",
        })
        self.assertIs(type(data["ports"][0]["direction"]), str)
        self.assertEqual(data["generics"][0]["data_type"], "integer")


if __name__ == '__main__':
    unittest.main()
