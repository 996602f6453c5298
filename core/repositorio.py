# core/repositorio.py
from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional

from .configuracion import ConfigTablero, nuevo_tablero
from .modelo import Consumidor, Tablero

logger = logging.getLogger(__name__)

CONSUMIDORES_INICIALES = 5


class RepositorioTablerosMemoria:
    """
    Implementación en memoria de PuertoTableros.

    Guarda y entrega copias: quien edita un tablero no modifica el almacenado
    hasta llamar a guardar().
    """

    def __init__(self) -> None:
        self._tableros: Dict[str, Tablero] = {}

    def obtener(self, tablero_id: str) -> Tablero:
        if tablero_id not in self._tableros:
            raise KeyError(f"Tablero no existe: {tablero_id}")
        return copy.deepcopy(self._tableros[tablero_id])

    def guardar(self, tablero_id: str, tablero: Tablero) -> None:
        self._tableros[str(tablero_id)] = copy.deepcopy(tablero)
        logger.debug("Tablero %s guardado (%d consumidores)", tablero_id, len(tablero.consumidores))

    def obtener_o_crear(self, tablero_id: str, cfg: Optional[ConfigTablero] = None) -> Tablero:
        """Tablero existente o uno nuevo con cinco consumidores en blanco."""
        if tablero_id in self._tableros:
            return self.obtener(tablero_id)

        if cfg is not None:
            t = nuevo_tablero(cfg, nombre=str(tablero_id), n_consumidores=CONSUMIDORES_INICIALES)
        else:
            t = Tablero(
                nombre=str(tablero_id),
                consumidores=[Consumidor() for _ in range(CONSUMIDORES_INICIALES)],
            )
        self.guardar(tablero_id, t)
        return copy.deepcopy(t)

    def eliminar(self, tablero_id: str) -> None:
        self._tableros.pop(tablero_id, None)

    def ids(self) -> List[str]:
        return sorted(self._tableros.keys())
