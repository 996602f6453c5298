import unittest

from core.numeros import fmt_nominal, fmt_seccion, num, parse_num


class TestNumeros(unittest.TestCase):
    def test_parse_num_texto_usuario(self):
        self.assertEqual(parse_num("2300"), 2300.0)
        self.assertEqual(parse_num(" 0,85 "), 0.85)
        self.assertEqual(parse_num("2 300 Вт"), 2300.0)
        self.assertEqual(parse_num("1.5kW"), 1500.0)
        self.assertAlmostEqual(parse_num("2,3 кВт"), 2300.0)
        self.assertEqual(parse_num("0.5 KW"), 500.0)
        self.assertEqual(parse_num("40w"), 40.0)

    def test_parse_num_ausente(self):
        for x in (None, "", "abc", True, float("inf"), "nan", "кВт", "W10"):
            with self.subTest(x=x):
                self.assertIsNone(parse_num(x))

    def test_formatos(self):
        self.assertEqual(num(10), "10.00")
        self.assertEqual(num(0.9, 3), "0.900")
        self.assertEqual(fmt_seccion(16.0), "16")
        self.assertEqual(fmt_seccion(2.5), "2.5")
        self.assertEqual(fmt_nominal(16), "16")
        self.assertEqual(fmt_nominal(1.6), "1.6")


if __name__ == "__main__":
    unittest.main()
