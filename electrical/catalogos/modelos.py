# electrical/catalogos/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .adiciones import Adiciones, parsear_adiciones

# Vocabulario fijo de configuraciones de polos
POLOS_VALIDOS = ("1P", "1P+N", "2P", "3P", "3P+N", "4P")


class Categoria(str, Enum):
    INTERRUPTOR = "interruptor"                       # breaker
    DIFERENCIAL = "diferencial"                       # RCD (УЗО)
    INTERRUPTOR_DIFERENCIAL = "interruptor_diferencial"  # RCBO (АВДТ)

    @property
    def usa_curva(self) -> bool:
        return self is not Categoria.DIFERENCIAL

    @property
    def usa_diferencial(self) -> bool:
        return self is not Categoria.INTERRUPTOR

    @property
    def usa_poder_corte(self) -> bool:
        return self is not Categoria.DIFERENCIAL


@dataclass(frozen=True)
class ModeloCatalogo:
    id: int
    categoria: Categoria
    fabricante: str
    serie: str
    nombre: str
    poder_corte_ka: Optional[float] = None   # nivel modelo (Icn, familia 60898)


@dataclass(frozen=True)
class VarianteCatalogo:
    id: int
    modelo: ModeloCatalogo
    corriente_nominal_a: float
    polos: FrozenSet[str]
    adiciones: str = ""
    corriente_diferencial_ma: Optional[float] = None
    poder_corte_servicio_ka: Optional[float] = None   # nivel variante (Ics)

    @property
    def adiciones_parseadas(self) -> Adiciones:
        return parsear_adiciones(self.adiciones)

    @property
    def curva(self) -> Optional[str]:
        return self.adiciones_parseadas.curva

    @property
    def polos_texto(self) -> str:
        return ", ".join(p for p in POLOS_VALIDOS if p in self.polos)


@dataclass(frozen=True)
class FilaAmpacidad:
    material: str        # "Cu" | "Al"
    aislamiento: str     # "PVC" | "XLPE"
    seccion_mm2: float
    amp_aire_a: float
    amp_tierra_a: float


@dataclass(frozen=True)
class TipoCable:
    codigo: str
    material: str
