"""
Reparto de fases — Tablero Engine.

Pasada voraz de izquierda a derecha (depende del orden de los consumidores):
- trifásico: "L1, L2, L3" y su corriente suma en las tres fases;
- los tres primeros monofásicos van a L1, L2, L3;
- el resto a la fase con menor total acumulado (empate: L1 > L2 > L3).
"""

from __future__ import annotations

from typing import Dict

from core.modelo import Tablero
from core.numeros import num, parse_num

from .corrientes import es_trifasica

FASES = ("L1", "L2", "L3")
ETIQUETA_TRIFASICA = "L1, L2, L3"


def distribuir_fases(tablero: Tablero) -> Dict[str, float]:
    for c in tablero.consumidores:
        c.fase = ""

    totales: Dict[str, float] = {f: 0.0 for f in FASES}
    monofasicos = 0

    for c in tablero.consumidores:
        i = parse_num(c.corriente_a) or 0.0

        if es_trifasica(parse_num(c.tension_v)):
            c.fase = ETIQUETA_TRIFASICA
            for f in FASES:
                totales[f] += i
            continue

        if monofasicos < len(FASES):
            fase = FASES[monofasicos]
        else:
            # min() devuelve el primer mínimo en orden fijo L1, L2, L3
            fase = min(FASES, key=lambda f: totales[f])
        monofasicos += 1

        c.fase = fase
        totales[fase] += i

    tablero.fase_l1 = num(totales["L1"], 2)
    tablero.fase_l2 = num(totales["L2"], 2)
    tablero.fase_l3 = num(totales["L3"], 2)
    return totales

