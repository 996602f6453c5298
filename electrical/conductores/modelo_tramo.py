"""
Modelo físico del tramo — Tablero Engine.

Responsabilidad:
- Longitud efectiva del cable (reserva, bajada, terminaciones).
- Resistividad del conductor según material y temperatura.
- Caída de tensión con resistencia y reactancia de línea.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Sequence

# Resistividad a 20 °C (Ω·mm²/m) y coeficiente de temperatura (1/°C)
RHO_20 = {"Cu": 0.018, "Al": 0.028}
ALFA = {"Cu": 0.00393, "Al": 0.00403}

# Límites superiores (m) de los tramos de reserva; el último tramo es abierto
LIMITES_TRAMOS_M = (20.0, 50.0, 90.0)

MARCA_EXCESO = " ⚠"


def reserva_por_tramos(longitud_m: float, tramos_pct: Sequence[float]) -> float:
    """
    Reserva % según la longitud de la ruta: 0–20, 20–50, 50–90, >90 m.
    """
    if not tramos_pct:
        return 0.0
    l = float(longitud_m)
    for k, lim in enumerate(LIMITES_TRAMOS_M):
        if l <= lim:
            return float(tramos_pct[min(k, len(tramos_pct) - 1)])
    return float(tramos_pct[min(len(LIMITES_TRAMOS_M), len(tramos_pct) - 1)])


def longitud_efectiva(
    longitud_m: float,
    *,
    reserva_pct: float = 0.0,
    descenso_pct: float = 0.0,
    terminacion_m: float = 0.0,
) -> float:
    """L = largo × (1 + (reserva% + bajada%)/100) + terminaciones."""
    return float(longitud_m) * (1.0 + (float(reserva_pct) + float(descenso_pct)) / 100.0) + float(terminacion_m)


def resistividad(material: str, temperatura_c: float = 20.0) -> float:
    """ρ(T) = ρ20 · (1 + α·(T − 20)) en Ω·mm²/m."""
    m = "Al" if str(material).strip().lower() == "al" else "Cu"
    return RHO_20[m] * (1.0 + ALFA[m] * (float(temperatura_c) - 20.0))


def caida_tension(
    *,
    corriente_a: float,
    tension_v: float,
    cos_phi: float,
    longitud_m: float,
    seccion_mm2: float,
    material: str = "Cu",
    temperatura_c: float = 20.0,
    reactancia_mohm_m: float = 0.08,
) -> Optional[Dict[str, float]]:
    """
    ΔU trifásico (U ≥ 380):   √3 · I · (R·cosφ + X·sinφ)
    ΔU monofásico:            2 · I · (R·cosφ + X·sinφ)

    R = ρ·L/S, X = (x/1000)·L. Devuelve None si falta longitud, sección o tensión.
    """
    try:
        i = float(corriente_a)
        u = float(tension_v)
        l = float(longitud_m)
        s = float(seccion_mm2)
        cph = float(cos_phi)
    except (TypeError, ValueError):
        return None

    if l <= 0.0 or s <= 0.0 or u <= 0.0:
        return None

    cph = max(-1.0, min(1.0, cph))
    sph = math.sqrt(1.0 - cph * cph)

    r = resistividad(material, temperatura_c) * l / s
    x = (float(reactancia_mohm_m) / 1000.0) * l

    k = math.sqrt(3.0) if u >= 380.0 else 2.0
    du = k * i * (r * cph + x * sph)
    pct = du / u * 100.0

    if not (math.isfinite(du) and math.isfinite(pct)):
        return None
    return {"du_v": du, "pct": pct, "r_ohm": r, "x_ohm": x}


def texto_caida(resultado: Optional[Dict[str, float]], caida_max_pct: float) -> str:
    """'ΔU (pct%)' con marca de advertencia si supera el máximo del tablero."""
    if not resultado:
        return ""
    txt = f"{resultado['du_v']:.2f} ({resultado['pct']:.2f}%)"
    if resultado["pct"] > float(caida_max_pct):
        txt += MARCA_EXCESO
    return txt
