from .protecciones import (
    FACTOR_ALTO,
    FACTOR_BAJO,
    NORMA_60898,
    NORMA_60947,
    NORMAS,
    UMBRAL_CORRIENTE_A,
    CriteriosSeleccion,
    categorias_de_proteccion,
    corriente_desde_descripcion,
    criterios_desde_tablero,
    describir_combinado,
    describir_dispositivo,
    filtrar_variantes,
    nominal_elegido,
    poder_corte_aplicable,
    seleccionar_candidatos,
    seleccionar_por_id,
)

__all__ = [
    "NORMA_60898",
    "NORMA_60947",
    "NORMAS",
    "UMBRAL_CORRIENTE_A",
    "FACTOR_BAJO",
    "FACTOR_ALTO",
    "CriteriosSeleccion",
    "categorias_de_proteccion",
    "filtrar_variantes",
    "nominal_elegido",
    "poder_corte_aplicable",
    "seleccionar_candidatos",
    "seleccionar_por_id",
    "describir_dispositivo",
    "describir_combinado",
    "corriente_desde_descripcion",
    "criterios_desde_tablero",
]
