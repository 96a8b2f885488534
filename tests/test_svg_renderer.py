import unittest
import xml.etree.ElementTree as ET

from hdllang import create_parser
from hdllang.model import Direction, Port
from hdllang.renderers import SvgDiagramRenderer, generate
from hdllang.renderers.svg import DARK, LIGHT, diagram_height

SVG_NS = "{http://www.w3.org/2000/svg}"


def make_ports(*pairs):
    return [Port(name=name, direction=direction, data_type="wire") for name, direction in pairs]


class TestSvgGeometry(unittest.TestCase):
    def test_height_grows_per_port(self):
        """Diagram height is 30 plus 20 per port."""
        for n in range(0, 6):
            ports = make_ports(*[(f"p{i}", Direction.INPUT) for i in range(n)])
            root = ET.fromstring(generate(ports))
            self.assertEqual(root.get("height"), str(30 + 20 * n))
            self.assertEqual(root.get("width"), "200")

    def test_empty_port_list(self):
        """An empty port list still gives a box."""
        root = ET.fromstring(generate([]))
        self.assertEqual(root.get("height"), "30")
        self.assertEqual(diagram_height(0), 30)

    def test_box(self):
        """The box is drawn inside the margins."""
        root = ET.fromstring(generate(make_ports(("a", Direction.INPUT), ("b", Direction.OUTPUT))))
        rect = root.find(f"{SVG_NS}rect")
        self.assertEqual(rect.get("x"), "10")
        self.assertEqual(rect.get("width"), "180")
        self.assertEqual(rect.get("height"), "50")

    def test_label_placement(self):
        """Inputs sit on the left, other ports on the right."""
        ports = make_ports(("clk", Direction.INPUT), ("q", Direction.OUTPUT), ("io", Direction.INOUT))
        texts = ET.fromstring(generate(ports)).findall(f"{SVG_NS}text")
        title, clk, q, io = texts
        self.assertEqual(title.text, "Module")
        self.assertEqual(title.get("text-anchor"), "middle")

        self.assertEqual(clk.text, "→ clk")
        self.assertEqual((clk.get("x"), clk.get("y"), clk.get("text-anchor")), ("15", "40", "start"))

        self.assertEqual(q.text, "q →")
        self.assertEqual((q.get("x"), q.get("y"), q.get("text-anchor")), ("185", "60", "end"))

        self.assertEqual(io.text, "io ↔")
        self.assertEqual(io.get("text-anchor"), "end")

    def test_names_are_escaped(self):
        """Port names are XML-escaped."""
        svg = generate(make_ports(("a<b>&c", Direction.INPUT)))
        self.assertIn("a&lt;b&gt;&amp;c", svg)
        self.assertEqual(ET.fromstring(svg).findall(f"{SVG_NS}text")[1].text, "→ a<b>&c")


class TestSvgPalette(unittest.TestCase):
    def test_light_palette(self):
        """The light palette is the default."""
        rect = ET.fromstring(generate([])).find(f"{SVG_NS}rect")
        self.assertEqual(rect.get("stroke"), LIGHT.stroke)
        self.assertEqual(rect.get("fill"), LIGHT.fill)

    def test_dark_palette(self):
        """dark_mode switches the box and text colors."""
        root = ET.fromstring(generate(make_ports(("a", Direction.INPUT)), dark_mode=True))
        rect = root.find(f"{SVG_NS}rect")
        self.assertEqual(rect.get("stroke"), DARK.stroke)
        self.assertEqual(rect.get("fill"), DARK.fill)
        for text in root.findall(f"{SVG_NS}text"):
            self.assertEqual(text.get("fill"), DARK.text)

    def test_geometry_is_palette_independent(self):
        """Only colors differ between palettes."""
        ports = make_ports(("a", Direction.INPUT), ("b", Direction.OUTPUT))
        light = ET.fromstring(generate(ports))
        dark = ET.fromstring(generate(ports, dark_mode=True))
        for l_el, d_el in zip(light.iter(), dark.iter()):
            for attr in ("x", "y", "width", "height", "text-anchor"):
                self.assertEqual(l_el.get(attr), d_el.get(attr))


class TestSvgRenderer(unittest.TestCase):
    def test_render_uses_module_name_as_title(self):
        """render() titles the diagram with the module name."""
        parser = create_parser("vhdl", "entity blink is port ( led : out std_logic ); end blink;")
        root = ET.fromstring(SvgDiagramRenderer().render(parser))
        texts = root.findall(f"{SVG_NS}text")
        self.assertEqual(texts[0].text, "blink")
        self.assertEqual(texts[1].text, "led →")
        self.assertEqual(root.get("height"), "50")

    def test_render_is_repeatable(self):
        """Rendering twice gives the same text."""
        ports = make_ports(("a", Direction.INPUT))
        self.assertEqual(generate(ports, True), generate(ports, True))


if __name__ == '__main__':
    unittest.main()
