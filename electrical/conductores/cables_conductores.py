# electrical/conductores/cables_conductores.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from electrical.catalogos import FilaAmpacidad


# ==========================================================
# Marcas de cable y constantes de dimensionamiento
# ==========================================================
# Nota:
# - El código del cable decide material y aislamiento:
#     "А" inicial  -> aluminio
#     "Пв"         -> XLPE (polietileno reticulado)
#     "В" / "П"    -> PVC (o polímero genérico, tratado como PVC)
# - Las ampacidades viven en data/cables.yaml (CatalogStore).
# ==========================================================

MARCA_ALUMINIO = ("А", "A")    # cirílica y latina
PREFIJO_XLPE = "Пв"
PREFIJOS_PVC = ("В", "П")

# Multiplicador de seguridad sobre el nominal de la protección
MULT_SOLO_CORTOCIRCUITO = 1.45
MULT_CON_SOBRECARGA = 1.13

# Derating por número de núcleos
DERATING_5_NUCLEOS = 0.93

# Escalera de secciones (mm²) cuando no hay tabla disponible
SECCIONES_RESPALDO: Tuple[float, ...] = (
    1.5, 2.5, 4, 6, 10, 16, 25, 35, 50, 70, 95, 120, 150, 185, 240
)

SIN_SECCION = "Нет сечения"


# ==========================================================
# Funciones públicas (consulta / referencia)
# ==========================================================

def material_y_aislamiento(tipo_cable: str) -> Tuple[str, str]:
    """
    ("Cu"|"Al", "PVC"|"XLPE") a partir del código del cable.

    Prefijos no reconocidos caen a PVC.
    """
    c = str(tipo_cable or "").strip()
    material = "Cu"
    if c[:1] in MARCA_ALUMINIO:
        material = "Al"
        c = c[1:]

    if c.startswith(PREFIJO_XLPE):
        return material, "XLPE"
    if c[:1] in PREFIJOS_PVC:
        return material, "PVC"
    return material, "PVC"


def numero_nucleos(tension_v: Optional[float]) -> int:
    """5 núcleos si U ≥ 380 V, si no 3."""
    return 5 if tension_v is not None and float(tension_v) >= 380.0 else 3


def derating_nucleos(nucleos: int) -> float:
    return DERATING_5_NUCLEOS if int(nucleos) == 5 else 1.0


def multiplicador_seguridad(tiene_proteccion_sobrecarga: bool) -> float:
    return MULT_CON_SOBRECARGA if tiene_proteccion_sobrecarga else MULT_SOLO_CORTOCIRCUITO


def ampacidad_de(fila: FilaAmpacidad, en_tierra: bool) -> float:
    return fila.amp_tierra_a if en_tierra else fila.amp_aire_a


def secciones_de(filas: Sequence[FilaAmpacidad]) -> List[float]:
    """Secciones distintas (delgado -> grueso)."""
    return sorted({float(f.seccion_mm2) for f in filas})
