# electrical/catalogos/catalogos.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from .catalogos_yaml import DATA_DIR, cargar_cables_yaml, cargar_dispositivos_yaml
from .modelos import Categoria, FilaAmpacidad, TipoCable, VarianteCatalogo


# ==========================================================
# Catálogo en memoria (solo lectura)
# ==========================================================

@dataclass(frozen=True)
class Catalogo:
    interruptores: Tuple[VarianteCatalogo, ...] = ()
    diferenciales: Tuple[VarianteCatalogo, ...] = ()
    interruptores_diferenciales: Tuple[VarianteCatalogo, ...] = ()
    tipos_cable: Tuple[TipoCable, ...] = ()
    ampacidad: Tuple[FilaAmpacidad, ...] = ()

    def variantes(self, categoria: Categoria) -> Tuple[VarianteCatalogo, ...]:
        if categoria is Categoria.INTERRUPTOR:
            return self.interruptores
        if categoria is Categoria.DIFERENCIAL:
            return self.diferenciales
        return self.interruptores_diferenciales

    def variantes_por_serie(self, categoria: Categoria, serie: str) -> List[VarianteCatalogo]:
        s = str(serie).strip()
        return [v for v in self.variantes(categoria) if v.modelo.serie == s]

    def series(self, categoria: Categoria, fabricante: Optional[str] = None) -> List[str]:
        """Series distintas (en orden de catálogo), opcionalmente por fabricante."""
        out: List[str] = []
        for v in self.variantes(categoria):
            if fabricante and v.modelo.fabricante != fabricante:
                continue
            if v.modelo.serie not in out:
                out.append(v.modelo.serie)
        return out

    def fabricantes(self, categoria: Optional[Categoria] = None) -> List[str]:
        cats = [categoria] if categoria else list(Categoria)
        out: List[str] = []
        for c in cats:
            for v in self.variantes(c):
                if v.modelo.fabricante not in out:
                    out.append(v.modelo.fabricante)
        return out

    def filas_ampacidad(self, material: str, aislamiento: str) -> List[FilaAmpacidad]:
        """Filas material+aislamiento ordenadas por sección ascendente."""
        m = str(material).strip().lower()
        a = str(aislamiento).strip().upper()
        filas = [f for f in self.ampacidad if f.material.lower() == m and f.aislamiento == a]
        return sorted(filas, key=lambda f: f.seccion_mm2)

    def secciones(self, material: str, aislamiento: str) -> List[float]:
        return sorted({f.seccion_mm2 for f in self.filas_ampacidad(material, aislamiento)})

    def variante_por_id(self, categoria: Categoria, variante_id: int) -> Optional[VarianteCatalogo]:
        for v in self.variantes(categoria):
            if v.id == variante_id:
                return v
        return None


def construir_catalogo(data_dir: Optional[Path] = None) -> Catalogo:
    base = Path(data_dir) if data_dir else DATA_DIR
    tipos, filas = cargar_cables_yaml(base / "cables.yaml")
    return Catalogo(
        interruptores=tuple(cargar_dispositivos_yaml(Categoria.INTERRUPTOR, base / "interruptores.yaml")),
        diferenciales=tuple(cargar_dispositivos_yaml(Categoria.DIFERENCIAL, base / "diferenciales.yaml")),
        interruptores_diferenciales=tuple(
            cargar_dispositivos_yaml(
                Categoria.INTERRUPTOR_DIFERENCIAL, base / "interruptores_diferenciales.yaml"
            )
        ),
        tipos_cable=tuple(tipos),
        ampacidad=tuple(filas),
    )


# ==========================================================
# API pública (fuente de verdad)
# ==========================================================

@lru_cache(maxsize=1)
def cargar_catalogo() -> Catalogo:
    """Catálogo por defecto (data/), cargado una sola vez por proceso."""
    return construir_catalogo()
