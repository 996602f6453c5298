import math
import unittest

from electrical.conductores import (
    caida_tension,
    corriente_cortocircuito,
    longitud_efectiva,
    reserva_por_tramos,
    resistividad,
    texto_caida,
    texto_cortocircuito,
)


def _caida(l_m, **kw):
    base = dict(
        corriente_a=10.0,
        tension_v=230.0,
        cos_phi=1.0,
        longitud_m=l_m,
        seccion_mm2=2.5,
    )
    base.update(kw)
    return caida_tension(**base)


class TestLongitudResistividad(unittest.TestCase):
    def test_longitud_efectiva(self):
        self.assertAlmostEqual(
            longitud_efectiva(100, reserva_pct=10, descenso_pct=5, terminacion_m=2), 117.0
        )
        self.assertEqual(longitud_efectiva(10), 10.0)

    def test_reserva_por_tramos(self):
        tramos = [1, 2, 3, 4]
        self.assertEqual(reserva_por_tramos(10, tramos), 1)
        self.assertEqual(reserva_por_tramos(20, tramos), 1)
        self.assertEqual(reserva_por_tramos(21, tramos), 2)
        self.assertEqual(reserva_por_tramos(90, tramos), 3)
        self.assertEqual(reserva_por_tramos(150, tramos), 4)
        self.assertEqual(reserva_por_tramos(150, []), 0.0)

    def test_resistividad(self):
        self.assertAlmostEqual(resistividad("Cu", 20), 0.018)
        self.assertAlmostEqual(resistividad("Al", 20), 0.028)
        self.assertAlmostEqual(resistividad("Cu", 70), 0.018 * (1 + 0.00393 * 50))
        self.assertAlmostEqual(resistividad("al", 0), 0.028 * (1 - 0.00403 * 20))


class TestCaidaTension(unittest.TestCase):
    def test_monofasico(self):
        r = _caida(10)
        # R = 0.018·10/2.5 = 0.072 Ω; ΔU = 2·10·0.072
        self.assertAlmostEqual(r["du_v"], 1.44)
        self.assertAlmostEqual(r["pct"], 1.44 / 230 * 100)
        self.assertEqual(texto_caida(r, 4.0), "1.44 (0.63%)")

    def test_marca_sobre_maximo(self):
        self.assertEqual(texto_caida(_caida(10), 0.5), "1.44 (0.63%) ⚠")

    def test_trifasico_raiz3(self):
        r = _caida(10, tension_v=400.0)
        self.assertAlmostEqual(r["du_v"], math.sqrt(3) * 10 * 0.072)

    def test_reactancia_con_cos_menor_a_1(self):
        r = _caida(100, cos_phi=0.8, reactancia_mohm_m=0.08)
        x = 0.08 / 1000 * 100
        rr = 0.018 * 100 / 2.5
        self.assertAlmostEqual(r["du_v"], 2 * 10 * (rr * 0.8 + x * 0.6))

    def test_crece_con_longitud(self):
        previa = 0.0
        for l_m in (1, 5, 10, 50, 100, 500):
            du = _caida(l_m, cos_phi=0.9)["du_v"]
            self.assertGreater(du, previa)
            previa = du

    def test_sin_datos(self):
        self.assertIsNone(_caida(0))
        self.assertIsNone(_caida(10, seccion_mm2=0))
        self.assertIsNone(_caida(None))
        self.assertEqual(texto_caida(None, 4.0), "")


class TestCortocircuito(unittest.TestCase):
    def test_solo_fuente(self):
        icc = corriente_cortocircuito(icc_max_ka=6, tension_v=230, longitud_m=0, seccion_mm2=2.5)
        self.assertAlmostEqual(icc, 6.0)
        self.assertEqual(texto_cortocircuito(icc), "6.000")

    def test_lazo_fase_neutro_menor(self):
        kw = dict(icc_max_ka=6, longitud_m=20, seccion_mm2=2.5)
        mono = corriente_cortocircuito(tension_v=230, **kw)
        tri = corriente_cortocircuito(tension_v=400, **kw)
        self.assertLess(mono, tri)
        self.assertLess(tri, 6.0)

    def test_formula(self):
        l_m, s = 50.0, 4.0
        x_sis = 230 / 6000
        r = 0.018 * l_m / s * 2
        x = 0.08 / 1000 * l_m * 2
        esperado = 230 / math.sqrt(r ** 2 + (x + x_sis) ** 2) / 1000
        icc = corriente_cortocircuito(icc_max_ka=6, tension_v=230, longitud_m=l_m, seccion_mm2=s)
        self.assertAlmostEqual(icc, esperado)

    def test_sin_icc_del_tablero(self):
        self.assertIsNone(corriente_cortocircuito(icc_max_ka=None, tension_v=230, longitud_m=10, seccion_mm2=2.5))
        self.assertIsNone(corriente_cortocircuito(icc_max_ka=0, tension_v=230, longitud_m=10, seccion_mm2=2.5))
        self.assertEqual(texto_cortocircuito(None), "")

    def test_infinito(self):
        self.assertEqual(texto_cortocircuito(math.inf), "∞")


if __name__ == "__main__":
    unittest.main()
