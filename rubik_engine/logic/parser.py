# rubik_engine/logic/parser.py
from __future__ import annotations

import logging
import re
from typing import FrozenSet, List

from rubik_engine.core.cube_model import Cube
from rubik_engine.logic.errors import InvalidMove
from rubik_engine.logic.moves import MOVES, apply_move

logger = logging.getLogger("rubik_engine.parser")

VALID_MOVES: FrozenSet[str] = frozenset(MOVES)

_WS = re.compile(r"\s+")


def parse_move(token: str) -> str:
    """Valida un token de movimiento.

    Se eliminan los espacios alrededor y el resultado debe coincidir exactamente
    (distinguiendo mayúsculas) con uno de los 18 movimientos.

    Args:
        token: Movimiento en notación, por ejemplo: "R", " U' ", "F2".

    Returns:
        El token sin espacios.

    Raises:
        InvalidMove: Si el token está vacío, usa una cara desconocida, minúsculas o
            un sufijo distinto de "", "'" o "2".
    """
    move = token.strip()
    if move not in VALID_MOVES:
        raise InvalidMove(token)
    return move


def _tokens(text: str) -> List[str]:
    return [t for t in _WS.sub(" ", text).strip().split(" ") if t]


def parse_sequence(text: str) -> List[str]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    Ejemplo:
        "R U R' U'" -> ["R", "U", "R'", "U'"]

    Raises:
        InvalidMove: En el primer token inválido (con su posición).
    """
    out: List[str] = []
    for i, tok in enumerate(_tokens(text)):
        try:
            out.append(parse_move(tok))
        except InvalidMove as exc:
            raise InvalidMove(exc.token, i) from None
    return out


def apply_moves(cube: Cube, sequence: str) -> Cube:
    """Aplica una secuencia de movimientos separada por espacios.

    Los tokens se validan y aplican uno a uno; el primero inválido corta el proceso
    (el cubo de entrada nunca se modifica, así que no hay nada que revertir).

    Args:
        cube: Estado inicial.
        sequence: String con movimientos, por ejemplo: "R U R' U'". Vacío = identidad.

    Returns:
        El estado final.

    Raises:
        InvalidMove: Si algún token no es válido.
    """
    current = cube
    count = 0
    for i, tok in enumerate(_tokens(sequence)):
        try:
            move = parse_move(tok)
        except InvalidMove as exc:
            logger.debug("Secuencia cortada en el token %d: %r", i, tok)
            raise InvalidMove(exc.token, i) from None
        current = apply_move(current, move)
        count += 1

    logger.debug("Aplicados %d movimientos", count)
    return current
