"""
calculo_conductores.py — Tablero Engine

Motor de dimensionamiento de conductores.

Responsabilidad:
- Derivar material/aislamiento del código de cable.
- Ampacidad objetivo desde el nominal de la protección elegida.
- Selección de la sección mínima que cumple (aire / tierra).
- Cambio manual de sección (subir / bajar) y formato de la línea ("3x2.5").
- Entrega de resultado estable para orquestador/exportación.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from core.modelo import TENDIDO_TIERRA
from core.numeros import fmt_seccion, parse_num
from electrical.catalogos import Catalogo, FilaAmpacidad, cargar_catalogo

from .cables_conductores import (
    SECCIONES_RESPALDO,
    SIN_SECCION,
    ampacidad_de,
    derating_nucleos,
    material_y_aislamiento,
    multiplicador_seguridad,
    numero_nucleos,
    secciones_de,
)

_RE_SECCION = re.compile(r"[xхXХ]\s*(\d+[.,]?\d*)")


# ==========================================================
# Utilidades internas
# ==========================================================

def es_tendido_tierra(tendido: str) -> bool:
    return str(tendido or "").strip() == TENDIDO_TIERRA


def filas_para(material: str, aislamiento: str, catalogo: Optional[Catalogo] = None) -> List[FilaAmpacidad]:
    cat = catalogo or cargar_catalogo()
    return cat.filas_ampacidad(material, aislamiento)


def formatear_linea(nucleos: int, seccion_mm2: float, longitud_m=None, umbral_unipolar_m: float = 30.0) -> str:
    """
    "{n}x{S}" normal; "{n}x(1x{S})" cuando el tramo supera el umbral de unipolares.
    """
    s = fmt_seccion(seccion_mm2)
    largo = parse_num(longitud_m)
    if largo is not None and largo > float(umbral_unipolar_m):
        return f"{int(nucleos)}x(1x{s})"
    return f"{int(nucleos)}x{s}"


def seccion_de_linea(linea: str) -> Optional[float]:
    """Sección leída de "3x2.5" / "5x(1x16)"; None si no hay."""
    m = _RE_SECCION.search(str(linea or ""))
    if not m:
        return None
    return parse_num(m.group(1))


# ==========================================================
# Motor principal
# ==========================================================

def dimensionar_cable(
    *,
    tipo_cable: str,
    corriente_nominal_a,
    tension_v,
    tendido: str,
    tiene_proteccion_sobrecarga: bool,
    longitud_m=None,
    umbral_unipolar_m: float = 30.0,
    filas: Optional[Sequence[FilaAmpacidad]] = None,
    catalogo: Optional[Catalogo] = None,
    material_defecto: str = "Cu",
    aislamiento_defecto: str = "PVC",
) -> Dict[str, Any]:
    """
    Sección mínima con ampacidad ≥ (I_n × multiplicador) / derating.

    Sin sección que cumpla -> ok=False y linea="Нет сечения" (nunca un valor arbitrario).
    Sin código de cable se usan material/aislamiento por defecto del tablero.
    """
    i_n = parse_num(corriente_nominal_a)
    if i_n is None or i_n <= 0:
        return {
            "ok": False,
            "linea": "",
            "nota": "Sin nominal de protección para dimensionar el cable.",
        }

    if str(tipo_cable or "").strip():
        material, aislamiento = material_y_aislamiento(tipo_cable)
    else:
        material, aislamiento = material_defecto, str(aislamiento_defecto).upper()
    nucleos = numero_nucleos(parse_num(tension_v))
    mult = multiplicador_seguridad(bool(tiene_proteccion_sobrecarga))
    der = derating_nucleos(nucleos)
    objetivo = (i_n * mult) / der
    en_tierra = es_tendido_tierra(tendido)

    tabla = list(filas) if filas is not None else filas_para(material, aislamiento, catalogo)
    tabla.sort(key=lambda f: f.seccion_mm2)

    base = {
        "material": material,
        "aislamiento": aislamiento,
        "nucleos": nucleos,
        "multiplicador": mult,
        "derating": der,
        "amp_objetivo_a": round(objetivo, 3),
        "tendido": "tierra" if en_tierra else "aire",
    }

    for f in tabla:
        amp = ampacidad_de(f, en_tierra)
        if amp >= objetivo:
            return {
                **base,
                "ok": True,
                "seccion_mm2": f.seccion_mm2,
                "ampacidad_a": amp,
                "linea": formatear_linea(nucleos, f.seccion_mm2, longitud_m, umbral_unipolar_m),
                "nota": "",
            }

    return {
        **base,
        "ok": False,
        "seccion_mm2": None,
        "linea": SIN_SECCION,
        "nota": f"Ninguna sección {material}/{aislamiento} alcanza {objetivo:.2f} A.",
    }


def cambiar_seccion(actual, paso: int, secciones: Optional[Sequence[float]] = None) -> float:
    """
    Sube (paso > 0) o baja (paso < 0) una sección en la lista ordenada.

    - actual: número o línea ("3x2.5"); se toma la sección más cercana de la lista.
    - Sin sección interpretable se parte de la primera.
    - En los extremos no hay vuelta: queda igual.
    """
    lista = sorted(set(float(s) for s in secciones)) if secciones else list(SECCIONES_RESPALDO)

    s = parse_num(actual)
    if s is None:
        s = seccion_de_linea(actual)

    if s is None:
        idx = 0
    else:
        idx = min(range(len(lista)), key=lambda k: abs(lista[k] - s))

    if paso > 0:
        idx = min(idx + 1, len(lista) - 1)
    elif paso < 0:
        idx = max(idx - 1, 0)
    return lista[idx]


def secciones_para_tipo(
    tipo_cable: str,
    catalogo: Optional[Catalogo] = None,
    material_defecto: str = "Cu",
    aislamiento_defecto: str = "PVC",
) -> List[float]:
    """Secciones del catálogo para el tipo; escalera de respaldo si no hay filas."""
    if str(tipo_cable or "").strip():
        material, aislamiento = material_y_aislamiento(tipo_cable)
    else:
        material, aislamiento = material_defecto, str(aislamiento_defecto).upper()
    lista = secciones_de(filas_para(material, aislamiento, catalogo))
    return lista or list(SECCIONES_RESPALDO)
