"""
Dominio conductores — Tablero Engine

API pública del módulo:
- Dimensionamiento de cables por ampacidad
- Cambio manual de sección y formato de línea
- Caída de tensión y cortocircuito al final del tramo

Regla arquitectónica:
Otros módulos NO deben importar archivos internos.
Siempre importar desde:
    electrical.conductores
"""

# Referencia de cables
from .cables_conductores import (
    SECCIONES_RESPALDO,
    SIN_SECCION,
    material_y_aislamiento,
    numero_nucleos,
)

# Motor principal
from .calculo_conductores import (
    cambiar_seccion,
    dimensionar_cable,
    formatear_linea,
    seccion_de_linea,
    secciones_para_tipo,
)

# Modelo físico
from .modelo_tramo import (
    caida_tension,
    longitud_efectiva,
    reserva_por_tramos,
    resistividad,
    texto_caida,
)
from .cortocircuito import corriente_cortocircuito, texto_cortocircuito

__all__ = [
    "SECCIONES_RESPALDO",
    "SIN_SECCION",
    "material_y_aislamiento",
    "numero_nucleos",
    "dimensionar_cable",
    "cambiar_seccion",
    "formatear_linea",
    "seccion_de_linea",
    "secciones_para_tipo",
    "longitud_efectiva",
    "reserva_por_tramos",
    "resistividad",
    "caida_tension",
    "texto_caida",
    "corriente_cortocircuito",
    "texto_cortocircuito",
]
