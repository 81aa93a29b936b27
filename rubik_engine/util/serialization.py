# rubik_engine/util/serialization.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

from rubik_engine.core.cube_model import FACES, Cube

NET_INDENT = " " * 6


def _row(face: Sequence[str], row: int) -> str:
    return " ".join(face[row * 3 : row * 3 + 3])


def print_cube(cube: Cube) -> str:
    """Dibuja el cubo desplegado (net) en texto plano.

    Layout:
              U U U
              U U U
              U U U
        L L L F F F R R R B B B
        L L L F F F R R R B B B
        L L L F F F R R R B B B
              D D D
              D D D
              D D D

    Args:
        cube: Cubo a dibujar.

    Returns:
        Las 9 líneas del net unidas por "\\n".
    """
    lines: List[str] = []
    for r in range(3):
        lines.append(NET_INDENT + _row(cube.U, r))
    for r in range(3):
        lines.append(" ".join(_row(getattr(cube, f), r) for f in ("L", "F", "R", "B")))
    for r in range(3):
        lines.append(NET_INDENT + _row(cube.D, r))
    return "\n".join(lines)


def to_structured(cube: Cube) -> Dict[str, List[str]]:
    """Mapeo cara -> lista de 9 stickers, en el orden de `FACES`."""
    return {f: list(getattr(cube, f)) for f in FACES}


def from_structured(data: Mapping[str, Any]) -> Cube:
    """Reconstruye un cubo desde `to_structured`.

    Raises:
        ValueError: Si faltan caras o alguna cara no tiene 9 colores válidos.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Se esperaba un objeto cara -> stickers, no {type(data).__name__}")
    return Cube.from_faces(data)


def to_json(cube: Cube, indent: Optional[int] = 2) -> str:
    return json.dumps(to_structured(cube), indent=indent)


def from_json(text: str) -> Cube:
    """Inverso de `to_json`.

    Raises:
        ValueError: Si el texto no es JSON válido o no describe un cubo.
    """
    return from_structured(json.loads(text))
