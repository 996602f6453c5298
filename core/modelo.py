# core/modelo.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# Método de tendido del cable (texto tal como lo captura el editor)
TENDIDO_AIRE = "Воздух"
TENDIDO_TIERRA = "Земля"

# Tipos de protección que puede llevar un consumidor
PROTECCION_INTERRUPTOR = "interruptor"
PROTECCION_DIFERENCIAL = "interruptor_diferencial"   # RCBO (АВДТ)
PROTECCION_INTERRUPTOR_Y_RCD = "interruptor_y_rcd"   # breaker + RCD


@dataclass
class Consumidor:
    # --- entradas (texto libre del usuario) ---
    nombre: str = ""
    local: str = ""
    tension_v: str = ""
    cos_phi: str = ""
    potencia_instalada_w: str = ""
    potencia_w: str = ""                  # potencia de cálculo (demanda)

    modo_dual: bool = False
    potencia_modo2_w: str = ""
    nombre_modo1: str = ""
    nombre_modo2: str = ""

    tipo_proteccion: str = PROTECCION_INTERRUPTOR
    proteccion: str = ""                  # descripción del dispositivo elegido
    polos_proteccion: str = ""

    tipo_cable: str = ""                  # marca, ej. "ВВГнг(А)-LS"
    longitud_cable_m: str = ""
    tendido: str = TENDIDO_AIRE

    # --- derivados (solo los escribe el motor) ---
    corriente_a: str = ""
    corriente_modo1_a: str = ""
    corriente_modo2_a: str = ""
    fase: str = ""
    linea_cable: str = ""                 # ej. "3x2.5" o "5x(1x16)"
    caida_tension: str = ""
    corriente_cc_ka: str = ""
    huella_cable: str = ""                # entradas con las que se dimensionó linea_cable


@dataclass
class Tablero:
    consumidores: List[Consumidor] = field(default_factory=list)
    nombre: str = ""

    # --- entradas escalares ---
    factor_demanda: str = "1"
    factor_simultaneidad: str = "1"

    norma_proteccion: str = "ГОСТ IEC 60898-1-2020"
    fabricante_proteccion: str = ""
    icc_max_ka: str = ""
    tiene_proteccion_sobrecarga: bool = False

    umbral_corriente_a: float = 40.0
    factor_bajo: float = 0.87
    factor_alto: float = 0.93

    material_cable: str = "Cu"
    aislamiento_cable: str = "PVC"
    reserva_pct: float = 0.0
    reserva_tramos_pct: Optional[List[float]] = None   # 0-20, 20-50, 50-90, >90 m
    descenso_pct: float = 0.0
    terminacion_m: float = 0.0
    temperatura_c: float = 20.0
    reactancia_mohm_m: float = 0.08
    caida_max_pct: float = 4.0
    umbral_unipolar_m: float = 30.0

    # --- agregados (recalculados completos) ---
    potencia_instalada_total: str = ""
    potencia_calculo_total: str = ""
    cos_phi_promedio: str = ""
    corriente_total: str = ""
    fase_l1: str = ""
    fase_l2: str = ""
    fase_l3: str = ""
    factor_demanda_tablero: str = ""

    # huella de las entradas con las que se calcularon los derivados
    huella_resultados: str = ""
