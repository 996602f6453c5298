# core/orquestador.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from electrical.cargas import calcular_agregados, calcular_corrientes_tablero, distribuir_fases
from electrical.catalogos import Catalogo, cargar_catalogo
from electrical.conductores import (
    caida_tension,
    cambiar_seccion,
    corriente_cortocircuito,
    dimensionar_cable,
    formatear_linea,
    longitud_efectiva,
    material_y_aislamiento,
    numero_nucleos,
    reserva_por_tramos,
    seccion_de_linea,
    secciones_para_tipo,
    texto_caida,
    texto_cortocircuito,
)
from electrical.protecciones import corriente_desde_descripcion

from .estado import construir_huella, construir_huella_cable, guardar_huella
from .modelo import Consumidor, Tablero
from .numeros import parse_num

logger = logging.getLogger(__name__)


# ==========================================================
# Helpers
# ==========================================================

def _material(tablero: Tablero, c: Consumidor) -> str:
    if str(c.tipo_cable or "").strip():
        return material_y_aislamiento(c.tipo_cable)[0]
    return tablero.material_cable


def longitud_calculo(tablero: Tablero, c: Consumidor) -> Optional[float]:
    """Longitud efectiva del tramo con reserva (fija o por tramos), bajada y terminaciones."""
    largo = parse_num(c.longitud_cable_m)
    if largo is None or largo <= 0:
        return None
    if tablero.reserva_tramos_pct:
        reserva = reserva_por_tramos(largo, tablero.reserva_tramos_pct)
    else:
        reserva = tablero.reserva_pct
    return longitud_efectiva(
        largo,
        reserva_pct=reserva,
        descenso_pct=tablero.descenso_pct,
        terminacion_m=tablero.terminacion_m,
    )


# ==========================================================
# Por consumidor
# ==========================================================

def dimensionar_cable_consumidor(
    tablero: Tablero, c: Consumidor, catalogo: Optional[Catalogo] = None
) -> Dict[str, Any]:
    """Sección del cable a partir del nominal de la protección elegida."""
    i_n = corriente_desde_descripcion(c.proteccion)
    res = dimensionar_cable(
        tipo_cable=c.tipo_cable,
        corriente_nominal_a=i_n,
        tension_v=c.tension_v,
        tendido=c.tendido,
        tiene_proteccion_sobrecarga=tablero.tiene_proteccion_sobrecarga,
        longitud_m=c.longitud_cable_m,
        umbral_unipolar_m=tablero.umbral_unipolar_m,
        catalogo=catalogo,
        material_defecto=tablero.material_cable,
        aislamiento_defecto=tablero.aislamiento_cable,
    )
    c.linea_cable = res.get("linea", "")
    c.huella_cable = construir_huella_cable(tablero, c)
    return res


def cambiar_seccion_consumidor(
    tablero: Tablero, c: Consumidor, paso: int, catalogo: Optional[Catalogo] = None
) -> str:
    """
    Sube/baja una sección la línea del consumidor y vuelve a verificarla.

    La sección manual se mantiene en los recálculos hasta que cambie la
    protección, el cable, la tensión, el tendido o la longitud del consumidor.
    """
    lista = secciones_para_tipo(
        c.tipo_cable,
        catalogo,
        material_defecto=tablero.material_cable,
        aislamiento_defecto=tablero.aislamiento_cable,
    )
    nueva = cambiar_seccion(c.linea_cable, paso, lista)
    nucleos = numero_nucleos(parse_num(c.tension_v))
    c.linea_cable = formatear_linea(nucleos, nueva, c.longitud_cable_m, tablero.umbral_unipolar_m)
    c.huella_cable = construir_huella_cable(tablero, c)
    verificar_consumidor(tablero, c)
    return c.linea_cable


def verificar_consumidor(tablero: Tablero, c: Consumidor) -> None:
    """Caída de tensión e Icc al final del cable; vacíos si faltan datos."""
    largo = longitud_calculo(tablero, c)
    seccion = seccion_de_linea(c.linea_cable)
    tension = parse_num(c.tension_v)
    material = _material(tablero, c)

    if largo is None or seccion is None or tension is None:
        c.caida_tension = ""
        c.corriente_cc_ka = ""
        return

    cos_phi = parse_num(c.cos_phi)
    res = caida_tension(
        corriente_a=parse_num(c.corriente_a) or 0.0,
        tension_v=tension,
        cos_phi=1.0 if cos_phi is None else cos_phi,
        longitud_m=largo,
        seccion_mm2=seccion,
        material=material,
        temperatura_c=tablero.temperatura_c,
        reactancia_mohm_m=tablero.reactancia_mohm_m,
    )
    c.caida_tension = texto_caida(res, tablero.caida_max_pct)

    icc = parse_num(tablero.icc_max_ka)
    if icc is None:
        c.corriente_cc_ka = ""
        return
    c.corriente_cc_ka = texto_cortocircuito(corriente_cortocircuito(
        icc_max_ka=icc,
        tension_v=tension,
        longitud_m=largo,
        seccion_mm2=seccion,
        material=material,
        temperatura_c=tablero.temperatura_c,
        reactancia_mohm_m=tablero.reactancia_mohm_m,
    ))


# ==========================================================
# ENTRYPOINT OFICIAL
# ==========================================================

def recalcular_tablero(
    tablero: Tablero,
    *,
    catalogo: Optional[Catalogo] = None,
    dimensionar_cables: bool = True,
) -> Dict[str, Any]:
    """
    Recalcula todos los derivados del tablero:
    corrientes -> fases -> agregados -> cables -> verificación.

    Un consumidor con datos incompatibles se omite sin frenar a los demás.
    El cable solo se redimensiona cuando cambian sus entradas (ver construir_huella_cable).
    """
    calcular_corrientes_tablero(tablero)
    totales = distribuir_fases(tablero)
    agregados = calcular_agregados(tablero)

    cat = catalogo
    omitidos: List[Dict[str, Any]] = []
    for n, c in enumerate(tablero.consumidores):
        try:
            if dimensionar_cables:
                if not str(c.proteccion or "").strip():
                    # sin protección no hay nominal del que colgar el cable
                    c.linea_cable = ""
                    c.huella_cable = ""
                elif not c.linea_cable or c.huella_cable != construir_huella_cable(tablero, c):
                    if cat is None:
                        cat = cargar_catalogo()
                    dimensionar_cable_consumidor(tablero, c, cat)
            verificar_consumidor(tablero, c)
        except (ValueError, ArithmeticError) as e:
            logger.warning("Consumidor %d (%r) omitido: %s", n, c.nombre, e)
            omitidos.append({"indice": n, "nombre": c.nombre, "error": str(e)})

    huella = guardar_huella(tablero)
    logger.debug(
        "Tablero %r recalculado: %d consumidores, %d omitidos",
        tablero.nombre, len(tablero.consumidores), len(omitidos),
    )
    return {
        "ok": not omitidos,
        "agregados": agregados,
        "fases": totales,
        "omitidos": omitidos,
        "huella": huella,
    }


def recalcular_si_cambia(tablero: Tablero, **kwargs) -> Optional[Dict[str, Any]]:
    """Recalcula solo si las entradas cambiaron desde el último cálculo (None si no)."""
    if tablero.huella_resultados and tablero.huella_resultados == construir_huella(tablero):
        return None
    return recalcular_tablero(tablero, **kwargs)
