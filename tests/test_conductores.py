import math
import unittest

from core.modelo import TENDIDO_AIRE, TENDIDO_TIERRA
from electrical.catalogos import FilaAmpacidad
from electrical.conductores import (
    SECCIONES_RESPALDO,
    SIN_SECCION,
    cambiar_seccion,
    dimensionar_cable,
    formatear_linea,
    material_y_aislamiento,
    seccion_de_linea,
)


def _dim(i_n, **kw):
    base = dict(
        tipo_cable="ВВГнг(А)",
        corriente_nominal_a=i_n,
        tension_v="230",
        tendido=TENDIDO_AIRE,
        tiene_proteccion_sobrecarga=False,
    )
    base.update(kw)
    return dimensionar_cable(**base)


class TestMaterialAislamiento(unittest.TestCase):
    def test_codigos(self):
        self.assertEqual(material_y_aislamiento("ВВГнг(А)-LS"), ("Cu", "PVC"))
        self.assertEqual(material_y_aislamiento("ПвПГнг(А)-HF"), ("Cu", "XLPE"))
        self.assertEqual(material_y_aislamiento("ППГнг(А)"), ("Cu", "PVC"))
        self.assertEqual(material_y_aislamiento("АВВГнг(А)"), ("Al", "PVC"))
        self.assertEqual(material_y_aislamiento("АПвПГнг(А)-HF"), ("Al", "XLPE"))
        self.assertEqual(material_y_aislamiento("XYZ"), ("Cu", "PVC"))
        self.assertEqual(material_y_aislamiento(""), ("Cu", "PVC"))


class TestDimensionarCable(unittest.TestCase):
    def test_solo_cortocircuito(self):
        r = _dim(16)
        # 16 × 1.45 = 23.2 A -> 2.5 mm² (27 A en aire)
        self.assertTrue(r["ok"])
        self.assertEqual(r["seccion_mm2"], 2.5)
        self.assertEqual(r["linea"], "3x2.5")

    def test_con_proteccion_sobrecarga(self):
        r = _dim(16, tiene_proteccion_sobrecarga=True)
        # 16 × 1.13 = 18.08 A -> 1.5 mm² (21 A)
        self.assertEqual(r["linea"], "3x1.5")
        self.assertEqual(r["multiplicador"], 1.13)

    def test_cinco_nucleos_derating(self):
        r = _dim(16, tension_v="400")
        self.assertEqual(r["nucleos"], 5)
        self.assertAlmostEqual(r["amp_objetivo_a"], 16 * 1.45 / 0.93, places=3)
        self.assertEqual(r["linea"], "5x2.5")

    def test_tendido_tierra(self):
        r = _dim(16, tendido=TENDIDO_TIERRA)
        # 23.2 A -> 1.5 mm² (27 A en tierra)
        self.assertEqual(r["seccion_mm2"], 1.5)

    def test_unipolares_sobre_umbral(self):
        self.assertEqual(_dim(16, longitud_m="35")["linea"], "3x(1x2.5)")
        self.assertEqual(_dim(16, longitud_m="30")["linea"], "3x2.5")

    def test_sin_seccion(self):
        r = _dim(400)
        self.assertFalse(r["ok"])
        self.assertEqual(r["linea"], SIN_SECCION)
        self.assertIsNone(r["seccion_mm2"])

    def test_sin_nominal(self):
        r = _dim("")
        self.assertFalse(r["ok"])
        self.assertEqual(r["linea"], "")

    def test_filas_explicitas_y_defecto_tablero(self):
        filas = [
            FilaAmpacidad("Al", "XLPE", 10, 60, 66),
            FilaAmpacidad("Al", "XLPE", 4, 35, 40),
        ]
        r = _dim(30, tipo_cable="", filas=filas, material_defecto="Al", aislamiento_defecto="xlpe")
        self.assertEqual(r["material"], "Al")
        self.assertEqual(r["aislamiento"], "XLPE")
        self.assertEqual(r["seccion_mm2"], 10)

    def test_monotonia(self):
        for tipo in ("ВВГнг(А)", "ПвПГнг(А)", "АВВГнг(А)"):
            for tendido in (TENDIDO_AIRE, TENDIDO_TIERRA):
                previa = 0.0
                for i_n in range(1, 260, 3):
                    r = _dim(i_n, tipo_cable=tipo, tendido=tendido)
                    s = r["seccion_mm2"] if r["ok"] else math.inf
                    self.assertGreaterEqual(s, previa, f"{tipo} {tendido} {i_n} A")
                    previa = s


class TestCambiarSeccion(unittest.TestCase):
    def test_subir_y_bajar(self):
        self.assertEqual(cambiar_seccion("3x2.5", +1), 4)
        self.assertEqual(cambiar_seccion("5x(1x16)", -1), 10)
        self.assertEqual(cambiar_seccion(6, +1), 10)

    def test_limites_sin_vuelta(self):
        self.assertEqual(cambiar_seccion("3x1.5", -1), 1.5)
        self.assertEqual(cambiar_seccion("3x240", +1), 240)

    def test_lista_del_catalogo(self):
        self.assertEqual(cambiar_seccion("3x120", +1, [1.5, 2.5, 120]), 120)
        self.assertEqual(cambiar_seccion("3x3", +1, [1.5, 2.5, 4]), 4)

    def test_sin_seccion_parte_de_la_primera(self):
        self.assertEqual(cambiar_seccion("", +1), SECCIONES_RESPALDO[1])
        self.assertEqual(cambiar_seccion(SIN_SECCION, -1), SECCIONES_RESPALDO[0])


class TestFormatoLinea(unittest.TestCase):
    def test_formato(self):
        self.assertEqual(formatear_linea(3, 16.0), "3x16")
        self.assertEqual(formatear_linea(5, 2.5, 40, 30), "5x(1x2.5)")

    def test_seccion_de_linea(self):
        self.assertEqual(seccion_de_linea("3x2.5"), 2.5)
        self.assertEqual(seccion_de_linea("5х(1х16)"), 16)
        self.assertEqual(seccion_de_linea("3x2,5"), 2.5)
        self.assertIsNone(seccion_de_linea(SIN_SECCION))


if __name__ == "__main__":
    unittest.main()
