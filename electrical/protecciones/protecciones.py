"""
protecciones.py — Tablero Engine

Subdominio protecciones (interruptor / diferencial / interruptor diferencial).

Responsabilidad:
- Filtrar variantes de catálogo contra las restricciones del consumidor.
- Aplicar la regla de "siguiente tamaño" por modelo (margen de utilización).
- Entregar una lista de candidatos deduplicada y ordenada, más selección por id.
- Describir el dispositivo elegido en el texto que guarda el consumidor.

Notas:
- Un único algoritmo para las tres categorías; lo que cambia por categoría
  (curva, accesorios, corriente diferencial, poder de corte) lo decide Categoria.
- Este módulo NO calcula corrientes ni dimensiona conductores.
- Sin coincidencias la lista es vacía: no hay dispositivo de relleno.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from core.modelo import PROTECCION_DIFERENCIAL, PROTECCION_INTERRUPTOR_Y_RCD
from core.numeros import fmt_nominal, parse_num
from electrical.catalogos import Categoria, VarianteCatalogo

logger = logging.getLogger(__name__)

# Normas de la capacidad de ruptura a verificar
NORMA_60898 = "ГОСТ IEC 60898-1-2020"   # Icn, nivel modelo
NORMA_60947 = "ГОСТ IEC 60947-2-2021"   # Ics, nivel variante
NORMAS = (NORMA_60898, NORMA_60947)

# Regla de margen por defecto
UMBRAL_CORRIENTE_A = 40.0
FACTOR_BAJO = 0.87
FACTOR_ALTO = 0.93

_EPS = 0.001
_RE_NOMINAL = re.compile(r"(\d+[.,]?\d*)\s*A")


@dataclass(frozen=True)
class CriteriosSeleccion:
    categoria: Categoria
    corriente_carga_a: float = 0.0
    icc_max_ka: float = 0.0
    norma: str = NORMA_60898

    # filtros opcionales
    polos: Optional[str] = None
    curva: Optional[str] = None
    accesorios: FrozenSet[str] = frozenset()
    corriente_diferencial_ma: Optional[float] = None
    serie: Optional[str] = None
    fabricante: Optional[str] = None

    # regla de siguiente tamaño
    umbral_corriente_a: float = UMBRAL_CORRIENTE_A
    factor_bajo: float = FACTOR_BAJO
    factor_alto: float = FACTOR_ALTO

    # lista completa de la serie (sin filtro de nominal ni regla de margen)
    mostrar_toda_serie: bool = False


# ==========================================================
# Filtros duros
# ==========================================================

def poder_corte_aplicable(v: VarianteCatalogo, norma: str) -> Optional[float]:
    """
    Capacidad de ruptura que se compara con Icc máx.

    60898 -> nivel modelo (Icn); otra norma -> nivel variante (Ics).
    Los diferenciales (RCD) no tienen: None.
    """
    if not v.modelo.categoria.usa_poder_corte:
        return None
    if "60898" in str(norma or ""):
        return v.modelo.poder_corte_ka
    return v.poder_corte_servicio_ka


def _cumple(v: VarianteCatalogo, cr: CriteriosSeleccion) -> bool:
    cat = cr.categoria

    if cat.usa_poder_corte:
        if (poder_corte_aplicable(v, cr.norma) or 0.0) < float(cr.icc_max_ka or 0.0):
            return False

    if not cr.mostrar_toda_serie and v.corriente_nominal_a < float(cr.corriente_carga_a or 0.0):
        return False

    if cr.polos and cr.polos.strip() not in v.polos:
        return False

    if cat.usa_curva and cr.curva:
        if (v.curva or "") != cr.curva.strip():
            return False

    if cat.usa_curva and cr.accesorios:
        if not set(cr.accesorios) <= v.adiciones_parseadas.accesorios:
            return False

    if cat.usa_diferencial and cr.corriente_diferencial_ma is not None:
        if v.corriente_diferencial_ma is None:
            return False
        if abs(v.corriente_diferencial_ma - float(cr.corriente_diferencial_ma)) >= _EPS:
            return False

    return True


def filtrar_variantes(variantes: Iterable[VarianteCatalogo], cr: CriteriosSeleccion) -> List[VarianteCatalogo]:
    out: List[VarianteCatalogo] = []
    for v in variantes:
        m = v.modelo
        if m.categoria is not cr.categoria:
            continue
        if cr.serie and m.serie != cr.serie:
            continue
        if cr.fabricante and m.fabricante != cr.fabricante:
            continue
        if _cumple(v, cr):
            out.append(v)
    return out


# ==========================================================
# Regla de siguiente tamaño + deduplicación
# ==========================================================

def nominal_elegido(nominales: Sequence[float], cr: CriteriosSeleccion) -> Optional[float]:
    """
    Nominal elegido para un modelo.

    utilización = I_carga / primer nominal; si supera el factor del régimen
    (bajo si I_carga < umbral, alto si no) y existe un segundo nominal, se sube a ese.
    """
    distintos = sorted(set(nominales))
    if not distintos:
        return None

    primero = distintos[0]
    if primero <= 0:
        return primero

    carga = float(cr.corriente_carga_a or 0.0)
    factor = cr.factor_bajo if carga < cr.umbral_corriente_a else cr.factor_alto
    if carga / primero >= factor and len(distintos) > 1:
        return distintos[1]
    return primero


def clave_visible(v: VarianteCatalogo, norma: str = NORMA_60898) -> Tuple:
    """Lo que distingue dos filas a ojos del usuario (sin ids de catálogo)."""
    return (
        v.modelo.nombre,
        round(v.corriente_nominal_a, 3),
        poder_corte_aplicable(v, norma),
        v.curva,
        v.polos_texto,
        v.corriente_diferencial_ma,
    )


def _orden(v: VarianteCatalogo):
    return (v.corriente_nominal_a, v.modelo.nombre)


def seleccionar_candidatos(variantes: Iterable[VarianteCatalogo], cr: CriteriosSeleccion) -> List[VarianteCatalogo]:
    """
    Lista de candidatos ordenada por nominal y nombre de modelo.

    Vacía si nada supera los filtros duros.
    """
    pasan = sorted(filtrar_variantes(variantes, cr), key=lambda v: v.id)

    if cr.mostrar_toda_serie:
        unicos: Dict[Tuple[str, str], VarianteCatalogo] = {}
        for v in pasan:
            k = (v.modelo.nombre.strip(), f"{v.corriente_nominal_a:.2f}")
            if k not in unicos:
                unicos[k] = v
        return sorted(unicos.values(), key=_orden)

    por_modelo: Dict[str, List[VarianteCatalogo]] = {}
    for v in pasan:
        por_modelo.setdefault(v.modelo.nombre, []).append(v)

    out: List[VarianteCatalogo] = []
    for grupo in por_modelo.values():
        elegido = nominal_elegido([v.corriente_nominal_a for v in grupo], cr)
        if elegido is None:
            continue
        vistos = set()
        for v in grupo:
            if abs(v.corriente_nominal_a - elegido) >= _EPS:
                continue
            k = clave_visible(v, cr.norma)
            if k in vistos:
                continue
            vistos.add(k)
            out.append(v)

    logger.debug(
        "Selección %s: %d pasan filtros, %d candidatos (I=%.2f A)",
        cr.categoria.value, len(pasan), len(out), float(cr.corriente_carga_a or 0.0),
    )
    return sorted(out, key=_orden)


def seleccionar_por_id(candidatos: Iterable[VarianteCatalogo], variante_id: int) -> Optional[VarianteCatalogo]:
    for v in candidatos:
        if v.id == variante_id:
            return v
    return None


# ==========================================================
# Descripción del dispositivo elegido
# ==========================================================

def describir_dispositivo(
    v: VarianteCatalogo,
    *,
    curva: Optional[str] = None,
    accesorios: Iterable[str] = (),
) -> str:
    """
    Texto que queda en el consumidor, una línea por dato:

        interruptor:              "NDB1-63\\nC 16 A\\nOF1, SD1"
        diferencial (RCD):        "S9R\\n25 A, 30 мА"
        interruptor diferencial:  "S9D\\nC 16 A, 30 мА"

    Solo se muestran los accesorios pedidos que el dispositivo realmente trae.
    """
    cat = v.modelo.categoria
    nominal = f"{fmt_nominal(v.corriente_nominal_a)} A"

    if cat.usa_curva:
        letra = curva or v.curva or ""
        linea2 = f"{letra} {nominal}" if letra else nominal
    else:
        linea2 = nominal

    if cat.usa_diferencial and v.corriente_diferencial_ma is not None:
        linea2 = f"{linea2}, {fmt_nominal(v.corriente_diferencial_ma)} мА"

    linea3 = ""
    if cat.usa_curva:
        propios = v.adiciones_parseadas.accesorios
        linea3 = ", ".join(a for a in accesorios if a in propios)

    return "\n".join(x for x in (v.modelo.nombre, linea2, linea3) if x.strip())


def describir_combinado(interruptor: str, rcd: str) -> str:
    """Interruptor + diferencial en un mismo consumidor."""
    return "\n\n".join(x for x in (interruptor, rcd) if x and x.strip())


def corriente_desde_descripcion(texto: str) -> Optional[float]:
    """Nominal (A) leído de la descripción del dispositivo: primer "<n> A"."""
    m = _RE_NOMINAL.search(str(texto or ""))
    if not m:
        return None
    return parse_num(m.group(1))


def criterios_desde_tablero(tablero, consumidor, categoria: Categoria, **filtros) -> CriteriosSeleccion:
    """Criterios con los datos del tablero (norma, Icc, umbrales) y la corriente del consumidor."""
    base = dict(
        categoria=categoria,
        corriente_carga_a=parse_num(consumidor.corriente_a) or 0.0,
        icc_max_ka=parse_num(tablero.icc_max_ka) or 0.0,
        norma=tablero.norma_proteccion,
        fabricante=tablero.fabricante_proteccion or None,
        umbral_corriente_a=float(tablero.umbral_corriente_a),
        factor_bajo=float(tablero.factor_bajo),
        factor_alto=float(tablero.factor_alto),
        polos=consumidor.polos_proteccion or None,
    )
    base.update(filtros)
    if "accesorios" in base:
        base["accesorios"] = frozenset(base["accesorios"] or ())
    return CriteriosSeleccion(**base)


def categorias_de_proteccion(tipo_proteccion: str) -> List[Categoria]:
    """Categorías a seleccionar según el tipo de protección del consumidor."""
    if tipo_proteccion == PROTECCION_INTERRUPTOR_Y_RCD:
        return [Categoria.INTERRUPTOR, Categoria.DIFERENCIAL]
    if tipo_proteccion == PROTECCION_DIFERENCIAL:
        return [Categoria.INTERRUPTOR_DIFERENCIAL]
    return [Categoria.INTERRUPTOR]
