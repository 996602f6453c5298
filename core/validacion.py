# core/validacion.py
from __future__ import annotations

from typing import Any


def _num(d: dict, k: str, ctx: str) -> float:
    v = d.get(k)
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def validar_config(cfg: Any) -> None:
    p = cfg.protecciones or {}
    c = cfg.cables or {}
    t = cfg.tablero or {}

    if "factor_demanda" in t and _num(t, "factor_demanda", "tablero") <= 0:
        raise ValueError("factor_demanda debe ser > 0")
    if "factor_simultaneidad" in t and _num(t, "factor_simultaneidad", "tablero") <= 0:
        raise ValueError("factor_simultaneidad debe ser > 0")
    if "consumidores_iniciales" in t and _num(t, "consumidores_iniciales", "tablero") < 0:
        raise ValueError("consumidores_iniciales no puede ser negativo")

    for k in ("umbral_corriente_a", "factor_bajo", "factor_alto"):
        if k in p and _num(p, k, "protecciones") <= 0:
            raise ValueError(f"{k} debe ser > 0")

    for k in ("reserva_pct", "descenso_pct", "terminacion_m", "reactancia_mohm_m"):
        if k in c and _num(c, k, "cables") < 0:
            raise ValueError(f"{k} no puede ser negativo")
    for k in ("caida_max_pct", "umbral_unipolar_m"):
        if k in c and _num(c, k, "cables") <= 0:
            raise ValueError(f"{k} debe ser > 0")

    tramos = c.get("reserva_tramos_pct") or []
    if tramos:
        if len(tramos) != 4:
            raise ValueError("reserva_tramos_pct debe tener 4 valores (0-20, 20-50, 50-90, >90 m)")
        if any(float(x) < 0 for x in tramos):
            raise ValueError("reserva_tramos_pct no puede tener negativos")

    if str(c.get("material", "Cu")) not in ("Cu", "Al"):
        raise ValueError("material debe ser 'Cu' o 'Al'")
    if str(c.get("aislamiento", "PVC")).upper() not in ("PVC", "XLPE"):
        raise ValueError("aislamiento debe ser 'PVC' o 'XLPE'")
