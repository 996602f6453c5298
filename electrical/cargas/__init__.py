"""
Dominio cargas — Tablero Engine

API pública:
- Corriente por consumidor y agregados del tablero
- Reparto de fases L1/L2/L3
"""

from .corrientes import (
    calcular_agregados,
    calcular_corriente,
    calcular_corrientes_tablero,
    es_trifasica,
)
from .fases import distribuir_fases

__all__ = [
    "calcular_corriente",
    "calcular_corrientes_tablero",
    "calcular_agregados",
    "es_trifasica",
    "distribuir_fases",
]
