"""
Subdominio corrientes — Tablero Engine.

Responsabilidad:
- Corriente de operación de cada consumidor a partir de P, U y cosφ.
- Agregados del tablero (potencias, cosφ medio, corriente total, factor de demanda).

Notas:
- Las entradas son texto libre; lo que no se interpreta se trata como "ausente".
- Los agregados se recalculan completos, nunca de forma incremental.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional

from core.modelo import Consumidor, Tablero
from core.numeros import num, parse_num

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)

# Tensión de línea nominal para clasificar trifásico
TENSION_TRIFASICA_V = 400.0
TOLERANCIA_TRIFASICA_V = 1.0


def es_trifasica(tension_v: Optional[float]) -> bool:
    if tension_v is None:
        return False
    return abs(float(tension_v) - TENSION_TRIFASICA_V) <= TOLERANCIA_TRIFASICA_V


def calcular_corriente(potencia_w, tension_v, cos_phi=None) -> Optional[float]:
    """
    I = P / (U·cosφ)        monofásico
    I = P / (U·cosφ·√3)     trifásico (|U − 400| ≤ 1)

    cosφ ausente o no interpretable -> 1.0.
    Devuelve None si P o U no se interpretan o el resultado no es finito.
    """
    p = parse_num(potencia_w)
    u = parse_num(tension_v)
    if p is None or u is None:
        return None

    cph = parse_num(cos_phi)
    if cph is None:
        cph = 1.0

    den = u * cph * (SQRT3 if es_trifasica(u) else 1.0)
    try:
        i = p / den
    except ZeroDivisionError:
        return None
    return i if math.isfinite(i) else None


def _texto(i: Optional[float]) -> str:
    return "" if i is None else num(i, 2)


def actualizar_corriente(c: Consumidor) -> None:
    """Escribe corriente_a (y las de cada modo si el consumidor es dual)."""
    i1 = calcular_corriente(c.potencia_w, c.tension_v, c.cos_phi)

    if not c.modo_dual:
        c.corriente_a = _texto(i1)
        c.corriente_modo1_a = ""
        c.corriente_modo2_a = ""
        return

    i2 = calcular_corriente(c.potencia_modo2_w, c.tension_v, c.cos_phi)
    c.corriente_modo1_a = _texto(i1)
    c.corriente_modo2_a = _texto(i2)

    validas = [i for i in (i1, i2) if i is not None]
    c.corriente_a = _texto(max(validas)) if validas else ""


def calcular_corrientes_tablero(tablero: Tablero) -> None:
    for c in tablero.consumidores:
        actualizar_corriente(c)


# ==========================================================
# Agregados del tablero
# ==========================================================

def _factor(x) -> float:
    v = parse_num(x)
    return 1.0 if v is None else v


def calcular_agregados(tablero: Tablero) -> Dict[str, float]:
    """
    Recalcula los agregados del tablero y los escribe como texto.

    El factor de demanda del tablero se conserva como instalada / cálculo.
    """
    kd = _factor(tablero.factor_demanda)
    ks = _factor(tablero.factor_simultaneidad)

    p_inst = sum(parse_num(c.potencia_instalada_w) or 0.0 for c in tablero.consumidores)
    p_calc = sum(parse_num(c.potencia_w) or 0.0 for c in tablero.consumidores) * kd * ks

    cosenos = [v for v in (parse_num(c.cos_phi) for c in tablero.consumidores) if v is not None]
    cos_prom = sum(cosenos) / len(cosenos) if cosenos else 0.0

    i_total = p_calc / (SQRT3 * TENSION_TRIFASICA_V * cos_prom) if cos_prom > 0 else 0.0
    fd = p_inst / p_calc if p_calc > 0 else 0.0

    if not math.isfinite(i_total):
        i_total = 0.0
    if not math.isfinite(fd):
        fd = 0.0

    tablero.potencia_instalada_total = num(p_inst, 2)
    tablero.potencia_calculo_total = num(p_calc, 2)
    tablero.cos_phi_promedio = num(cos_prom, 3)
    tablero.corriente_total = num(i_total, 2)
    tablero.factor_demanda_tablero = num(fd, 2)

    logger.debug(
        "Agregados tablero %r: Pinst=%.2f Pcalc=%.2f cos=%.3f I=%.2f",
        tablero.nombre, p_inst, p_calc, cos_prom, i_total,
    )

    return {
        "potencia_instalada_w": p_inst,
        "potencia_calculo_w": p_calc,
        "cos_phi_promedio": cos_prom,
        "corriente_total_a": i_total,
        "factor_demanda_tablero": fd,
    }
