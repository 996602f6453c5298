# electrical/catalogos/catalogos_yaml.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .adiciones import formatear_adiciones
from .modelos import (
    POLOS_VALIDOS,
    Categoria,
    FilaAmpacidad,
    ModeloCatalogo,
    TipoCable,
    VarianteCatalogo,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data"

# Clave raíz de cada archivo según categoría
ARCHIVOS: Dict[Categoria, Tuple[str, str]] = {
    Categoria.INTERRUPTOR: ("interruptores.yaml", "interruptores"),
    Categoria.DIFERENCIAL: ("diferenciales.yaml", "diferenciales"),
    Categoria.INTERRUPTOR_DIFERENCIAL: ("interruptores_diferenciales.yaml", "interruptores_diferenciales"),
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"No existe catálogo: {path}")
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        raise ValueError(f"Catálogo inválido (debe ser dict): {path}")
    return doc


def _req(d: Dict[str, Any], k: str, ctx: str) -> Any:
    if k not in d or d[k] is None:
        raise ValueError(f"Falta '{k}' en {ctx}")
    return d[k]


def _req_num(d: Dict[str, Any], k: str, ctx: str) -> float:
    v = _req(d, k, ctx)
    try:
        return float(v)
    except Exception as e:
        raise ValueError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _req_lista(d: Dict[str, Any], k: str, ctx: str) -> List[Any]:
    v = _req(d, k, ctx)
    if not isinstance(v, list) or not v:
        raise ValueError(f"'{k}' debe ser lista no vacía en {ctx}")
    return v


def _nums(valores: Sequence[Any], k: str, ctx: str) -> List[float]:
    out: List[float] = []
    for v in valores:
        try:
            out.append(float(v))
        except Exception as e:
            raise ValueError(f"'{k}' debe contener números en {ctx}. Valor={v!r}") from e
    return out


def _polos(valores: Sequence[Any], ctx: str) -> List[str]:
    out = [str(p).strip() for p in valores]
    for p in out:
        if p not in POLOS_VALIDOS:
            raise ValueError(f"Polos desconocidos {p!r} en {ctx}")
    return out


def _opt_num(d: Dict[str, Any], k: str, ctx: str) -> Optional[float]:
    if k not in d or d[k] is None:
        return None
    return _req_num(d, k, ctx)


# ==========================================================
# Dispositivos de protección
# ==========================================================

def _validar_dispositivo(cat: Categoria, d: Dict[str, Any], ctx: str) -> None:
    for k in ("fabricante", "serie", "modelo"):
        _req(d, k, ctx)
    _req_lista(d, "corrientes_a", ctx)
    _req_lista(d, "polos", ctx)
    if cat.usa_curva:
        _req_lista(d, "curvas", ctx)
    if cat.usa_poder_corte:
        _req_num(d, "poder_corte_ka", ctx)
    if cat.usa_diferencial:
        _req_lista(d, "diferencial_ma", ctx)


def expandir_variantes(
    cat: Categoria,
    entradas: Sequence[Dict[str, Any]],
    *,
    id_modelo0: int = 1,
    id_variante0: int = 1,
) -> List[VarianteCatalogo]:
    """
    Expande cada entrada de modelo en sus variantes.

    - interruptor: corrientes × curvas × polos (una variante por polo)
    - diferencial: corrientes × diferenciales (conjunto completo de polos)
    - interruptor_diferencial: corrientes × polos × curvas × diferenciales
    """
    out: List[VarianteCatalogo] = []
    id_mod = int(id_modelo0)
    id_var = int(id_variante0)

    for n, d in enumerate(entradas):
        ctx = f"{cat.value}[{n}]"
        if not isinstance(d, dict):
            raise ValueError(f"Entrada inválida (debe ser dict) en {ctx}")
        _validar_dispositivo(cat, d, ctx)

        modelo = ModeloCatalogo(
            id=id_mod,
            categoria=cat,
            fabricante=str(d["fabricante"]).strip(),
            serie=str(d["serie"]).strip(),
            nombre=str(d["modelo"]).strip(),
            poder_corte_ka=_opt_num(d, "poder_corte_ka", ctx) if cat.usa_poder_corte else None,
        )
        id_mod += 1

        corrientes = _nums(d["corrientes_a"], "corrientes_a", ctx)
        polos = _polos(d["polos"], ctx)
        ics = _opt_num(d, "poder_corte_servicio_ka", ctx) if cat.usa_poder_corte else None
        if cat.usa_poder_corte and ics is None:
            ics = modelo.poder_corte_ka
        accesorios = [str(a).strip() for a in (d.get("accesorios") or [])]
        curvas = [str(c).strip() for c in (d.get("curvas") or [])]
        difs = _nums(d.get("diferencial_ma") or [], "diferencial_ma", ctx)

        if cat is Categoria.DIFERENCIAL:
            for i_n in corrientes:
                for i_dn in difs:
                    out.append(VarianteCatalogo(
                        id=id_var,
                        modelo=modelo,
                        corriente_nominal_a=i_n,
                        polos=frozenset(polos),
                        corriente_diferencial_ma=i_dn,
                    ))
                    id_var += 1
            continue

        for i_n in corrientes:
            for p in polos:
                for curva in curvas:
                    adic = formatear_adiciones(curva, accesorios)
                    for i_dn in (difs if cat.usa_diferencial else [None]):
                        out.append(VarianteCatalogo(
                            id=id_var,
                            modelo=modelo,
                            corriente_nominal_a=i_n,
                            polos=frozenset([p]),
                            adiciones=adic,
                            corriente_diferencial_ma=i_dn,
                            poder_corte_servicio_ka=ics,
                        ))
                        id_var += 1

    return out


def cargar_dispositivos_yaml(cat: Categoria, path: Optional[Path] = None) -> List[VarianteCatalogo]:
    archivo, clave = ARCHIVOS[cat]
    doc = _read_yaml(path or (DATA_DIR / archivo))
    entradas = doc.get(clave) or []
    if not isinstance(entradas, list):
        raise ValueError(f"'{clave}' debe ser lista en {archivo}")
    variantes = expandir_variantes(cat, entradas)
    logger.debug("Catálogo %s: %d modelos, %d variantes", cat.value, len(entradas), len(variantes))
    return variantes


# ==========================================================
# Cables
# ==========================================================

def material_de_codigo(codigo: str) -> str:
    """Material del conductor según el código del cable ("А..." = aluminio)."""
    c = str(codigo or "").strip()
    return "Al" if c[:1] in ("А", "A") else "Cu"


def cargar_cables_yaml(path: Optional[Path] = None) -> Tuple[List[TipoCable], List[FilaAmpacidad]]:
    doc = _read_yaml(path or (DATA_DIR / "cables.yaml"))

    tipos = [
        TipoCable(codigo=str(c).strip(), material=material_de_codigo(c))
        for c in (doc.get("tipos_cable") or [])
    ]

    filas: List[FilaAmpacidad] = []
    for n, bloque in enumerate(doc.get("ampacidad") or []):
        ctx = f"ampacidad[{n}]"
        material = str(_req(bloque, "material", ctx)).strip()
        aislamiento = str(_req(bloque, "aislamiento", ctx)).strip().upper()
        for k, fila in enumerate(_req_lista(bloque, "filas", ctx)):
            if not isinstance(fila, (list, tuple)) or len(fila) != 3:
                raise ValueError(f"Fila inválida en {ctx}.filas[{k}]: {fila!r}")
            s, aire, tierra = _nums(fila, "filas", f"{ctx}.filas[{k}]")
            filas.append(FilaAmpacidad(
                material=material,
                aislamiento=aislamiento,
                seccion_mm2=s,
                amp_aire_a=aire,
                amp_tierra_a=tierra,
            ))

    logger.debug("Catálogo cables: %d tipos, %d filas de ampacidad", len(tipos), len(filas))
    return tipos, filas


__all__ = [
    "DATA_DIR",
    "expandir_variantes",
    "cargar_dispositivos_yaml",
    "cargar_cables_yaml",
    "material_de_codigo",
]
