# core/exportacion.py
from __future__ import annotations

from typing import Dict

from .modelo import Consumidor, Tablero

SEPARADOR = "|"


def atributos_tablero(t: Tablero) -> Dict[str, str]:
    """Cabecera del tablero como atributos planos."""
    return {
        "PINSTSH": t.potencia_instalada_total,
        "PESTSH": t.potencia_calculo_total,
        "ICALCSH": t.corriente_total,
        "PFACTSH": t.cos_phi_promedio,
        "DEMRATSH": t.factor_demanda_tablero,
        "IL1": t.fase_l1,
        "IL2": t.fase_l2,
        "IL3": t.fase_l3,
    }


def texto_cable(c: Consumidor) -> str:
    """
    Dos líneas: "<marca> <línea> мм²" y "<tendido>, L=<m> м, ΔU=<V>".
    De la caída solo se exporta la parte en voltios.
    """
    seccion = f"{c.linea_cable} мм²" if c.linea_cable.strip() else ""
    linea1 = " ".join(x for x in (c.tipo_cable.strip(), seccion) if x)

    caida = c.caida_tension.split("(")[0].strip() if c.caida_tension else ""
    partes = []
    if c.tendido.strip():
        partes.append(c.tendido.strip())
    if c.longitud_cable_m.strip():
        partes.append(f"L={c.longitud_cable_m.strip()} м")
    if caida:
        partes.append(f"ΔU={caida}")
    linea2 = ", ".join(partes)

    return f"{linea1}\n{linea2}" if linea2 else linea1


def atributos_consumidor(c: Consumidor) -> Dict[str, str]:
    return {
        "NAME": c.nombre,
        "NOMROM": c.local,
        "PINST": c.potencia_instalada_w,
        "PEST": c.potencia_w,
        "ICALC": c.corriente_a,
        "PHASE": c.fase,
        "PROT": c.proteccion,
        "CABLE": texto_cable(c),
    }


def serializar_atributos(attrs: Dict[str, str]) -> str:
    """KEY=valor|KEY=valor (orden de inserción)."""
    return SEPARADOR.join(f"{k}={'' if v is None else v}" for k, v in attrs.items())
