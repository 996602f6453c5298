# core/numeros.py
from __future__ import annotations

import math
import re
from typing import Any, Optional

__all__ = [
    "parse_num",
    "num",
    "fmt_seccion",
    "fmt_nominal",
]

# Sufijo de potencia al final del texto; kW/кВт escala a vatios
_UNIDAD_POTENCIA = re.compile(r"(?i)(кВт|kw|вт|w)$")
_KILO = ("квт", "kw")


def parse_num(x: Any) -> Optional[float]:
    """
    Convierte texto de usuario a float.

    Acepta coma decimal, espacios y unidades de potencia pegadas
    ("2300 Вт" -> 2300.0, "2,3 кВт" -> 2300.0).
    Devuelve None si no se puede interpretar (campo "ausente").
    """
    if x is None:
        return None
    if isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        v = float(x)
        return v if math.isfinite(v) else None

    s = str(x).strip().replace(" ", "").replace(",", ".")
    escala = 1.0
    m = _UNIDAD_POTENCIA.search(s)
    if m:
        if m.group(1).lower() in _KILO:
            escala = 1000.0
        s = s[: m.start()]
    if not s:
        return None
    try:
        v = float(s) * escala
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def num(x: float, nd: int = 2) -> str:
    return f"{float(x):.{int(nd)}f}"


def fmt_seccion(s: float) -> str:
    """2.5 -> '2.5', 16.0 -> '16'."""
    v = float(s)
    return str(int(v)) if v.is_integer() else str(v)


def fmt_nominal(v: float) -> str:
    """Nominal de corriente como en catálogo: 16 -> '16', 1.6 -> '1.6'."""
    f = float(v)
    i = int(f)
    return str(i) if abs(f - i) < 0.001 else f"{f:.1f}"
