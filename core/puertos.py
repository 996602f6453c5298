from typing import Protocol

from .modelo import Tablero


class PuertoTableros(Protocol):
    def obtener(self, tablero_id: str) -> Tablero: ...

    def guardar(self, tablero_id: str, tablero: Tablero) -> None: ...
