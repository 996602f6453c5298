"""
cortocircuito.py — Tablero Engine

Corriente de cortocircuito al final del cable.

    X_sistema = 230 / (Icc_máx · 1000)            (referida a 230 V siempre)
    k         = 1 trifásico (U ≥ 380), 2 fase-neutro
    R_cable   = ρ·L/S · k
    X_cable   = (x/1000)·L · k
    Z         = √(R_cable² + (X_cable + X_sistema)²)
    Icc_fin   = 230 / Z   [kA con 3 decimales; "∞" si Z = 0]
"""

from __future__ import annotations

import math
from typing import Optional

from .modelo_tramo import resistividad

TENSION_REFERENCIA_V = 230.0
INFINITO = "∞"


def corriente_cortocircuito(
    *,
    icc_max_ka: float,
    tension_v: float,
    longitud_m: float,
    seccion_mm2: float,
    material: str = "Cu",
    temperatura_c: float = 20.0,
    reactancia_mohm_m: float = 0.08,
) -> Optional[float]:
    """
    Icc al final del tramo en kA (math.inf si Z = 0).

    None si falta Icc del tablero, longitud o sección.
    """
    try:
        icc = float(icc_max_ka)
        u = float(tension_v)
        l = float(longitud_m)
        s = float(seccion_mm2)
    except (TypeError, ValueError):
        return None

    if icc <= 0.0 or l < 0.0 or s <= 0.0:
        return None

    x_sis = TENSION_REFERENCIA_V / (icc * 1000.0)
    k = 1.0 if u >= 380.0 else 2.0

    r_cab = resistividad(material, temperatura_c) * l / s * k
    x_cab = (float(reactancia_mohm_m) / 1000.0) * l * k

    z = math.sqrt(r_cab ** 2 + (x_cab + x_sis) ** 2)
    if z == 0.0:
        return math.inf
    return TENSION_REFERENCIA_V / z / 1000.0


def texto_cortocircuito(icc_ka: Optional[float]) -> str:
    if icc_ka is None:
        return ""
    if math.isinf(icc_ka):
        return INFINITO
    return f"{icc_ka:.3f}"
