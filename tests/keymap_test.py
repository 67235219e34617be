import unittest

from pydantic import ValidationError

from keyball_drawer.keymap import Layer, LayerStats, dump_layers, max_label_length


class TestLayer(unittest.TestCase):
    def test_stats(self):
        layer = Layer(index=0, keys=[["KC_A", "_______", "MO(1)"], ["___", "KC_B"]])
        self.assertEqual(layer.stats(), LayerStats(total=5, assigned=3, unassigned=2))

    def test_validation(self):
        with self.assertRaises(ValidationError):
            Layer(index=-1, keys=[["KC_A"]])
        with self.assertRaises(ValidationError):
            Layer(index=0, keys=[])
        with self.assertRaises(ValidationError):
            Layer(index=0, keys=[["KC_A"], []])

    def test_immutable(self):
        layer = Layer(index=0, keys=[["KC_A"]])
        with self.assertRaises(ValidationError):
            layer.index = 1

    def test_max_label_length(self):
        layers = [Layer(index=0, keys=[["KC_A", "LT(1, KC_B)"]]), Layer(index=1, keys=[["S(KC_1)"]])]
        self.assertEqual(max_label_length(layers), 11)
        self.assertEqual(max_label_length([]), 8)

    def test_dump_layers(self):
        layers = [Layer(index=0, keys=[["KC_A", "KC_B"], ["KC_C"]]), Layer(index=1, keys=[["_______"]])]
        self.assertEqual(
            dump_layers(layers), {"layers": {"L0": [["KC_A", "KC_B"], ["KC_C"]], "L1": [["_______"]]}}
        )


if __name__ == "__main__":
    unittest.main()
