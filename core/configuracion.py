# core/configuracion.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .modelo import Consumidor, Tablero
from .validacion import validar_config

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"


def _leer_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"No existe config: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config inválida (debe ser dict): {path}")
    return data


@dataclass(frozen=True)
class ConfigTablero:
    tablero: Dict[str, Any]
    protecciones: Dict[str, Any]
    cables: Dict[str, Any]


def cargar_configuracion(path: Optional[Path] = None) -> ConfigTablero:
    data = _leer_yaml(path or (CONFIG_DIR / "parametros_tablero.yaml"))
    cfg = ConfigTablero(
        tablero=dict(data.get("tablero") or {}),
        protecciones=dict(data.get("protecciones") or {}),
        cables=dict(data.get("cables") or {}),
    )
    validar_config(cfg)
    return cfg


def construir_config_efectiva(cfg_base: ConfigTablero, overrides: Optional[dict]) -> ConfigTablero:
    if not overrides:
        return cfg_base
    cfg = ConfigTablero(
        tablero={**cfg_base.tablero, **(overrides.get("tablero") or {})},
        protecciones={**cfg_base.protecciones, **(overrides.get("protecciones") or {})},
        cables={**cfg_base.cables, **(overrides.get("cables") or {})},
    )
    validar_config(cfg)
    return cfg


def nuevo_tablero(cfg: ConfigTablero, nombre: str = "", n_consumidores: Optional[int] = None) -> Tablero:
    """Tablero con los valores por defecto de la configuración y consumidores en blanco."""
    t, p, c = cfg.tablero, cfg.protecciones, cfg.cables
    n = int(t.get("consumidores_iniciales", 0) if n_consumidores is None else n_consumidores)

    tramos = c.get("reserva_tramos_pct") or None
    tablero = Tablero(
        consumidores=[Consumidor() for _ in range(n)],
        nombre=nombre,
        factor_demanda=str(t.get("factor_demanda", 1)),
        factor_simultaneidad=str(t.get("factor_simultaneidad", 1)),
        norma_proteccion=str(p.get("norma", Tablero.norma_proteccion)),
        fabricante_proteccion=str(p.get("fabricante") or ""),
        icc_max_ka=str(p.get("icc_max_ka") or ""),
        tiene_proteccion_sobrecarga=bool(p.get("tiene_proteccion_sobrecarga", False)),
        umbral_corriente_a=float(p.get("umbral_corriente_a", Tablero.umbral_corriente_a)),
        factor_bajo=float(p.get("factor_bajo", Tablero.factor_bajo)),
        factor_alto=float(p.get("factor_alto", Tablero.factor_alto)),
        material_cable=str(c.get("material", Tablero.material_cable)),
        aislamiento_cable=str(c.get("aislamiento", Tablero.aislamiento_cable)),
        reserva_pct=float(c.get("reserva_pct", 0.0)),
        reserva_tramos_pct=[float(x) for x in tramos] if tramos else None,
        descenso_pct=float(c.get("descenso_pct", 0.0)),
        terminacion_m=float(c.get("terminacion_m", 0.0)),
        temperatura_c=float(c.get("temperatura_c", Tablero.temperatura_c)),
        reactancia_mohm_m=float(c.get("reactancia_mohm_m", Tablero.reactancia_mohm_m)),
        caida_max_pct=float(c.get("caida_max_pct", Tablero.caida_max_pct)),
        umbral_unipolar_m=float(c.get("umbral_unipolar_m", Tablero.umbral_unipolar_m)),
    )
    logger.debug("Nuevo tablero %r con %d consumidores", nombre, n)
    return tablero
