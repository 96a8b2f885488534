import unittest

from hdllang import create_parser
from hdllang.renderers import MarkdownDocRenderer

ADDER = "module adder #(parameter W = 4) (input [3:0] a, input [3:0] b, output [4:0] sum); endmodule"
REG = (
    "entity reg is generic ( W : integer := 8 ); "
    "port ( clk : in std_logic; q : out std_logic_vector(7 downto 0) ); end reg;"
)


class TestMarkdownDocRenderer(unittest.TestCase):
    def test_verilog_page(self):
        """A Verilog page lists ports, parameters and samples."""
        parser = create_parser("verilog", ADDER)
        page = MarkdownDocRenderer().render(parser)
        self.assertTrue(page.startswith("# adder\n"))
        self.assertIn("Documentation for the VERILOG module `adder`.", page)
        self.assertIn("| a | input | wire | 3:0 |", page)
        self.assertIn("| sum | output | wire | 4:0 |", page)
        self.assertIn("| W |  |  | 4 |", page)
        self.assertIn("![adder block diagram](adder_block_diagram.svg)", page)
        self.assertIn("```verilog\n" + parser.generate_sample_usage() + "\n```", page)
        self.assertIn("```verilog\n" + parser.generate_testbench().strip() + "\n```", page)
        self.assertNotIn("## Description", page)

    def test_vhdl_page(self):
        """A VHDL page calls the unit an entity."""
        parser = create_parser("vhdl", REG)
        page = MarkdownDocRenderer().render(parser)
        self.assertIn("Documentation for the VHDL entity `reg`.", page)
        self.assertIn("| q | output | std_logic_vector | 7 downto 0 |", page)
        self.assertIn("| W | integer |  | 8 |", page)
        self.assertIn("```vhdl\n", page)

    def test_description_section(self):
        """A description adds its own section."""
        parser = create_parser("verilog", ADDER)
        page = MarkdownDocRenderer(description="  Adds two nibbles.\n").render(parser)
        self.assertIn("## Description\n\nAdds two nibbles.\n", page)

    def test_custom_diagram_path(self):
        """The diagram link can be overridden."""
        parser = create_parser("verilog", ADDER)
        page = MarkdownDocRenderer(diagram_path="img/adder.svg").render(parser)
        self.assertIn("(img/adder.svg)", page)

    def test_empty_source(self):
        """An empty source gives the empty-table notes."""
        page = MarkdownDocRenderer().render(create_parser("verilog", ""))
        self.assertTrue(page.startswith("# Unknown\n"))
        self.assertIn("No ports found.", page)
        self.assertIn("No generics found.", page)


if __name__ == '__main__':
    unittest.main()
