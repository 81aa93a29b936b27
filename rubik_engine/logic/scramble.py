# rubik_engine/logic/scramble.py
from __future__ import annotations

import random
from typing import List, Optional

from rubik_engine.logic.moves import MOVES


def scramble_moves(n: int, rng: Optional[random.Random] = None) -> List[str]:
    """Elige `n` movimientos de `MOVES` sin repetir cara en dos pasos seguidos.

    Args:
        n: Cantidad de movimientos.
        rng: Generador a usar; por defecto uno nuevo sin semilla.

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    if n <= 0:
        raise ValueError("n debe ser mayor que 0.")

    rng = rng or random.Random()
    out: List[str] = []
    for _ in range(n):
        last_face = out[-1][0] if out else None
        out.append(rng.choice([m for m in MOVES if m[0] != last_face]))
    return out


def generate_scramble(n: int, seed: Optional[int] = None) -> str:
    """Genera una secuencia de mezcla (scramble) aleatoria para el cubo.

    Args:
        n: Cantidad de movimientos a generar.
        seed: Semilla opcional para obtener resultados reproducibles.

    Returns:
        Movimientos separados por espacios, listos para `apply_moves`
        (por ejemplo: "R U' F2 L D2").

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    return " ".join(scramble_moves(n, random.Random(seed)))
