# rubik_engine/logic/moves.py
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from rubik_engine.core.cube_model import FACES, Cube, Face
from rubik_engine.core.face import Color, rotate_face

Strip = Tuple[Face, Tuple[int, int, int]]

# Tiras de stickers que mueve un giro horario de cada cara, en el orden en que
# viajan: el contenido de la tira k pasa a la tira k+1 (y la última a la primera).
# Los índices de cada tira están alineados posición a posición con la siguiente.
FACE_CYCLES: Dict[Face, Tuple[Strip, Strip, Strip, Strip]] = {
    "U": (("F", (0, 1, 2)), ("L", (0, 1, 2)), ("B", (0, 1, 2)), ("R", (0, 1, 2))),
    "D": (("F", (6, 7, 8)), ("R", (6, 7, 8)), ("B", (6, 7, 8)), ("L", (6, 7, 8))),
    "R": (("F", (2, 5, 8)), ("U", (2, 5, 8)), ("B", (6, 3, 0)), ("D", (2, 5, 8))),
    "L": (("U", (0, 3, 6)), ("F", (0, 3, 6)), ("D", (0, 3, 6)), ("B", (8, 5, 2))),
    "F": (("U", (6, 7, 8)), ("R", (0, 3, 6)), ("D", (2, 1, 0)), ("L", (8, 5, 2))),
    "B": (("U", (2, 1, 0)), ("L", (0, 3, 6)), ("D", (6, 7, 8)), ("R", (8, 5, 2))),
}

SUFFIX_TURNS: Dict[str, int] = {"": 1, "2": 2, "'": 3}

MOVES: Tuple[str, ...] = tuple(f + s for f in FACES for s in ("", "'", "2"))

INV: Dict[str, str] = {
    m: (m[0] if m.endswith("'") else m if m.endswith("2") else m + "'") for m in MOVES
}


def turn_face(cube: Cube, face: Face, turns: int) -> Cube:
    """Aplica `turns` cuartos de vuelta horarios a una cara.

    Algoritmo genérico para los 18 movimientos:
        1. La cara girada rota con `rotate_face`.
        2. Cada tira k de `FACE_CYCLES[face]` se copia en la tira (k + turns) mod 4.
        3. El resto de stickers (incluida la cara opuesta) se conserva.

    Args:
        cube: Estado de entrada (no se modifica).
        face: Cara a girar (U R F D L B).
        turns: Cuartos de vuelta; se normaliza mod 4.

    Returns:
        Un cubo nuevo con el giro aplicado.
    """
    t = turns % 4
    if t == 0:
        return cube

    # Buffers locales: solo esta llamada los ve
    new: Dict[Face, List[Color]] = {f: list(getattr(cube, f)) for f in FACES}
    new[face] = list(rotate_face(getattr(cube, face), t))

    strips = FACE_CYCLES[face]
    for k, (src_face, src_idx) in enumerate(strips):
        dst_face, dst_idx = strips[(k + t) % 4]
        src = getattr(cube, src_face)
        for si, di in zip(src_idx, dst_idx):
            new[dst_face][di] = src[si]

    return Cube(**new)


def apply_move(cube: Cube, move: str) -> Cube:
    """Aplica un movimiento ya validado (ver `parse_move`).

    Args:
        cube: Estado de entrada.
        move: Uno de los 18 tokens de `MOVES` (ej: "R", "U'", "F2").

    Returns:
        El estado resultante.
    """
    return turn_face(cube, move[0], SUFFIX_TURNS[move[1:]])  # type: ignore[arg-type]


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"  -> "R'"
        - "R'" -> "R"
        - "R2" -> "R2"

    Raises:
        KeyError: Si `m` no es uno de los 18 tokens.
    """
    return INV[m]


def invert_sequence(moves: Iterable[str]) -> List[str]:
    """Secuencia que deshace `moves` (inversos en orden contrario)."""
    return [INV[m] for m in reversed(list(moves))]
