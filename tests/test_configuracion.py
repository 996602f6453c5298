import tempfile
import unittest
from pathlib import Path

from core.configuracion import (
    ConfigTablero,
    cargar_configuracion,
    construir_config_efectiva,
    nuevo_tablero,
)


def _escribir(txt: str) -> Path:
    d = tempfile.mkdtemp()
    p = Path(d) / "parametros.yaml"
    p.write_text(txt, encoding="utf-8")
    return p


class TestCargarConfiguracion(unittest.TestCase):
    def test_defaults_del_repo(self):
        cfg = cargar_configuracion()
        self.assertIsInstance(cfg, ConfigTablero)
        self.assertEqual(cfg.protecciones["umbral_corriente_a"], 40)
        self.assertEqual(cfg.cables["umbral_unipolar_m"], 30)

    def test_archivo_inexistente(self):
        with self.assertRaises(FileNotFoundError):
            cargar_configuracion(Path("/no/existe/parametros.yaml"))

    def test_no_dict(self):
        with self.assertRaises(ValueError):
            cargar_configuracion(_escribir("- a\n- b\n"))

    def test_valores_invalidos(self):
        casos = [
            "tablero: {factor_demanda: 0}",
            "protecciones: {factor_bajo: x}",
            "cables: {reserva_pct: -1}",
            "cables: {caida_max_pct: 0}",
            "cables: {reserva_tramos_pct: [1, 2]}",
            "cables: {material: Fe}",
            "cables: {aislamiento: EPR}",
        ]
        for txt in casos:
            with self.subTest(txt=txt):
                with self.assertRaises(ValueError):
                    cargar_configuracion(_escribir(txt))


class TestConfigEfectiva(unittest.TestCase):
    def test_overrides_por_seccion(self):
        base = cargar_configuracion()
        cfg = construir_config_efectiva(base, {"cables": {"material": "Al"}})
        self.assertEqual(cfg.cables["material"], "Al")
        self.assertEqual(cfg.cables["aislamiento"], base.cables["aislamiento"])
        self.assertEqual(base.cables["material"], "Cu")

    def test_sin_overrides(self):
        base = cargar_configuracion()
        self.assertIs(construir_config_efectiva(base, None), base)

    def test_override_invalido(self):
        with self.assertRaises(ValueError):
            construir_config_efectiva(cargar_configuracion(), {"protecciones": {"factor_alto": -1}})


class TestNuevoTablero(unittest.TestCase):
    def test_valores_de_config(self):
        cfg = construir_config_efectiva(cargar_configuracion(), {
            "protecciones": {"icc_max_ka": 6, "tiene_proteccion_sobrecarga": True},
            "cables": {"reserva_tramos_pct": [5, 10, 15, 20]},
        })
        t = nuevo_tablero(cfg, nombre="ЩР-1")
        self.assertEqual(t.nombre, "ЩР-1")
        self.assertEqual(len(t.consumidores), 5)
        self.assertEqual(t.icc_max_ka, "6")
        self.assertTrue(t.tiene_proteccion_sobrecarga)
        self.assertEqual(t.reserva_tramos_pct, [5.0, 10.0, 15.0, 20.0])
        self.assertEqual(t.factor_bajo, 0.87)

    def test_sin_tramos_es_none(self):
        t = nuevo_tablero(cargar_configuracion(), n_consumidores=0)
        self.assertIsNone(t.reserva_tramos_pct)
        self.assertEqual(t.consumidores, [])
        self.assertEqual(t.icc_max_ka, "")


if __name__ == "__main__":
    unittest.main()
