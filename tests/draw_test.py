import re
import unittest
import xml.etree.ElementTree as ET
from io import StringIO

from keyball_drawer.config import DrawConfig, Gradient
from keyball_drawer.draw import KeymapDrawer, render_svg
from keyball_drawer.keymap import Layer
from keyball_drawer.parse import QmkKeymapParser

from tests.util import KEYBALL44_KEYMAP, full_layer, keymap_source

SVG_NS = "{http://www.w3.org/2000/svg}"
KEY_RECT_RE = re.compile(r'<rect [^>]*class="key[ "]')


class TestKeymapDrawer(unittest.TestCase):
    def test_full_base_layer(self):
        layers = QmkKeymapParser().parse_str(keymap_source(full_layer()))
        svg = render_svg(layers)
        root = ET.fromstring(svg)
        self.assertEqual(root.get("width"), "990")
        self.assertEqual(root.get("height"), str(20 + (4 * (60 + 5) + 50) + 120))
        self.assertEqual(root.get("viewBox"), "0 0 990 450")
        self.assertEqual(len(KEY_RECT_RE.findall(svg)), 44)
        self.assertEqual(len(root.findall(f"{SVG_NS}text[@class='key-text']")), 44)
        titles = root.findall(f"{SVG_NS}text[@class='layer-title']")
        self.assertEqual([t.text for t in titles], ["Layer 0"])

    def test_empty_right_thumb_keys_not_drawn(self):
        rows = full_layer()
        rows[3] = ["_______"] * 8
        svg = render_svg([Layer(index=0, keys=rows)])
        self.assertEqual(len(KEY_RECT_RE.findall(svg)), 41)
        self.assertEqual(svg.count('class="key key-empty"'), 5)

    def test_style_and_gradients(self):
        root = ET.fromstring(render_svg([Layer(index=0, keys=[["KC_A"]])]))
        style = root.find(f"{SVG_NS}style").text
        for rule in (".key {", ".key-special", ".key-empty", ".key-text", ".layer-title"):
            self.assertIn(rule, style)
        for ind in range(1, 9):
            self.assertIn(f".key-layer{ind} {{ fill: url(#layer{ind}Gradient); }}", style)

        gradient_ids = {g.get("id") for g in root.iter(f"{SVG_NS}linearGradient")}
        self.assertEqual(gradient_ids, {"keyGradient", "specialGradient"} | {f"layer{i}Gradient" for i in range(1, 9)})

    def test_class_per_category(self):
        rows = [["MO(1)", "RGB_TOG", "KC_A", "_______"]]
        svg = render_svg([Layer(index=0, keys=rows), Layer(index=1, keys=[["KC_1"]])])
        classes = re.findall(r'<rect [^>]*class="(key[^"]*)"', svg)
        self.assertEqual(classes, ["key key-layer1", "key key-special", "key", "key key-empty", "key key-layer1"])

    def test_labels_escaped(self):
        svg = render_svg([Layer(index=0, keys=[["A&B", "<x>", "\"'"]])])
        self.assertIn(">A&amp;B</text>", svg)
        self.assertIn(">&lt;x&gt;</text>", svg)
        self.assertIn(">&quot;&#x27;</text>", svg)
        self.assertNotIn("A&B", svg)
        ET.fromstring(svg)

    def test_legend_position(self):
        svg = render_svg([Layer(index=0, keys=[["KC_A"]])])
        self.assertIn('<rect rx="5" x="20" y="60" width="60" height="60" class="key"/>', svg)
        self.assertIn('<text x="50" y="94" class="key-text">KC_A</text>', svg)

    def test_deterministic(self):
        with open(KEYBALL44_KEYMAP, encoding="utf-8") as f:
            layers = QmkKeymapParser().parse(f)
        self.assertEqual(render_svg(layers), render_svg(layers))

    def test_keymap_file(self):
        with open(KEYBALL44_KEYMAP, encoding="utf-8") as f:
            layers = QmkKeymapParser().parse(f)
        svg = render_svg(layers)
        root = ET.fromstring(svg)
        self.assertEqual(root.get("viewBox"), "0 0 1508 1740")
        self.assertEqual(len(KEY_RECT_RE.findall(svg)), 4 * 46 - 10)
        titles = [t.text for t in root.findall(f"{SVG_NS}text[@class='layer-title']")]
        self.assertEqual(titles, ["Layer 0", "Layer 1", "Layer 2", "Layer 3"])

    def test_custom_style(self):
        config = DrawConfig(
            background="#000000",
            layer_gradients=[Gradient(light="#ffffff", dark="#eeeeee")],
            svg_extra_style=".key-text { fill: white; }",
        )
        out = StringIO()
        KeymapDrawer(config, out, [Layer(index=0, keys=[["KC_A"]])]).print_board()
        svg = out.getvalue()
        self.assertIn('<rect width="100%" height="100%" fill="#000000"/>', svg)
        self.assertIn(".key-layer1 {", svg)
        self.assertNotIn(".key-layer2 {", svg)
        self.assertIn(".key-text { fill: white; }", svg)

    def test_no_layers(self):
        root = ET.fromstring(render_svg([]))
        self.assertEqual(root.get("height"), "20")
        self.assertEqual(root.findall(f"{SVG_NS}text"), [])


if __name__ == "__main__":
    unittest.main()
