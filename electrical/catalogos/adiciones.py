"""
adiciones.py — Tablero Engine

Parser del campo libre "adiciones" de las variantes de catálogo.

Gramática:
    [Кривая <letra>][; acc1, acc2, ...]

Ejemplos:
    "Кривая C; OF1, SD1"  -> curva="C", accesorios={"OF1", "SD1"}
    "Кривая B; "          -> curva="B", accesorios=set()
    "OF1, SD1"            -> curva=None, accesorios=set()  (sin ';' no hay accesorios)

Se usa igual para interruptores y RCBO (los RCD no llevan adiciones).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Optional

# Marcadores aceptados para la curva (el catálogo viene en ruso)
MARCADORES_CURVA = ("Кривая", "Curve", "Curva")


@dataclass(frozen=True)
class Adiciones:
    curva: Optional[str]
    accesorios: FrozenSet[str]


def _parsear_curva(token: str) -> Optional[str]:
    t = token.strip()
    for marca in MARCADORES_CURVA:
        if t.lower().startswith(marca.lower()):
            letra = t[len(marca):].strip().lstrip(":- ").strip()
            return letra or None
    return None


@lru_cache(maxsize=4096)
def parsear_adiciones(texto: Optional[str]) -> Adiciones:
    if not texto or not str(texto).strip():
        return Adiciones(curva=None, accesorios=frozenset())

    partes = [p.strip() for p in str(texto).split(";")]
    curva = _parsear_curva(partes[0]) if partes else None

    if len(partes) <= 1:
        return Adiciones(curva=curva, accesorios=frozenset())

    resto = ";".join(partes[1:])
    accesorios = frozenset(a.strip() for a in resto.split(",") if a.strip())
    return Adiciones(curva=curva, accesorios=accesorios)


def formatear_adiciones(curva: Optional[str], accesorios) -> str:
    """Inverso de parsear_adiciones (forma con la que se siembra el catálogo)."""
    cab = f"Кривая {curva}" if curva else ""
    acc = ", ".join(accesorios or ())
    return f"{cab}; {acc}"


__all__ = ["Adiciones", "parsear_adiciones", "formatear_adiciones", "MARCADORES_CURVA"]
