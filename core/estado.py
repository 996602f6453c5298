# core/estado.py
from __future__ import annotations

import hashlib
import json
from dataclasses import fields
from typing import Any, Dict

from .modelo import Consumidor, Tablero

# Solo INPUTS. Los derivados no entran en la huella.
_DERIVADOS_CONSUMIDOR = frozenset({
    "corriente_a",
    "corriente_modo1_a",
    "corriente_modo2_a",
    "fase",
    "linea_cable",
    "caida_tension",
    "corriente_cc_ka",
    "huella_cable",
})

_DERIVADOS_TABLERO = frozenset({
    "consumidores",
    "potencia_instalada_total",
    "potencia_calculo_total",
    "cos_phi_promedio",
    "corriente_total",
    "fase_l1",
    "fase_l2",
    "fase_l3",
    "factor_demanda_tablero",
    "huella_resultados",
})


def _norm_value(x: Any) -> Any:
    if isinstance(x, dict):
        return {str(k): _norm_value(v) for k, v in sorted(x.items(), key=lambda kv: str(kv[0]))}
    if isinstance(x, (list, tuple)):
        return [_norm_value(v) for v in x]
    if isinstance(x, (str, int, float, bool)) or x is None:
        return x
    return str(x)


def _entradas_consumidor(c: Consumidor) -> Dict[str, Any]:
    return {
        f.name: _norm_value(getattr(c, f.name))
        for f in fields(c)
        if f.name not in _DERIVADOS_CONSUMIDOR
    }


def construir_huella(tablero: Tablero) -> str:
    payload: Dict[str, Any] = {
        f.name: _norm_value(getattr(tablero, f.name))
        for f in fields(tablero)
        if f.name not in _DERIVADOS_TABLERO
    }
    payload["consumidores"] = [_entradas_consumidor(c) for c in tablero.consumidores]

    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def guardar_huella(tablero: Tablero) -> str:
    fp = construir_huella(tablero)
    tablero.huella_resultados = fp
    return fp


def resultados_desactualizados(tablero: Tablero) -> bool:
    """True si hay derivados calculados con entradas distintas a las actuales."""
    saved = tablero.huella_resultados
    if not saved:
        return False
    return str(saved) != construir_huella(tablero)


# ==========================================================
# Entradas del dimensionamiento de cable (por consumidor)
# ==========================================================

def construir_huella_cable(tablero: Tablero, c: Consumidor) -> str:
    """
    Huella de lo que decide la sección de un consumidor.

    Mientras no cambie, una sección elegida a mano se conserva en los recálculos.
    """
    payload = {
        "proteccion": c.proteccion,
        "tipo_cable": c.tipo_cable,
        "tension_v": c.tension_v,
        "tendido": c.tendido,
        "longitud_cable_m": c.longitud_cable_m,
        "sobrecarga": tablero.tiene_proteccion_sobrecarga,
        "material": tablero.material_cable,
        "aislamiento": tablero.aislamiento_cable,
        "umbral_unipolar_m": tablero.umbral_unipolar_m,
    }
    raw = json.dumps(_norm_value(payload), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
