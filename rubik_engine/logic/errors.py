# rubik_engine/logic/errors.py
from __future__ import annotations

from typing import Optional


class InvalidMove(ValueError):
    """Token que no es uno de los 18 movimientos válidos.

    Attributes:
        token: La entrada original, tal como la recibió el parser.
        position: Índice (0-based) del token dentro de la secuencia, o None si se
            validó un token suelto.
    """

    def __init__(self, token: str, position: Optional[int] = None) -> None:
        self.token = token
        self.position = position
        msg = f"Invalid move: {token}"
        if position is not None:
            msg += f" (token {position})"
        super().__init__(msg)
