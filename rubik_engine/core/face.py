# rubik_engine/core/face.py
from __future__ import annotations

from typing import Literal, Sequence, Tuple

Color = Literal["W", "O", "G", "R", "B", "Y"]
FaceArray = Tuple[Color, ...]

COLORS: Tuple[Color, ...] = ("W", "O", "G", "R", "B", "Y")

# out[i] = face[PERM[i]]
PERM_CW: Tuple[int, ...] = (6, 3, 0, 7, 4, 1, 8, 5, 2)
PERM_CCW: Tuple[int, ...] = (2, 5, 8, 1, 4, 7, 0, 3, 6)
PERM_180: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 1, 0)


def _permute(face: Sequence[Color], perm: Tuple[int, ...]) -> FaceArray:
    return tuple(face[p] for p in perm)


def rotate_face_cw(face: Sequence[Color]) -> FaceArray:
    """Gira una cara 90° en sentido horario.

    Original:     Girada:
        0 1 2         6 3 0
        3 4 5   =>    7 4 1
        6 7 8         8 5 2

    Args:
        face: Los 9 stickers de la cara (orden fila-columna).

    Returns:
        Una tupla nueva con los stickers reubicados. La entrada no se modifica.
    """
    return _permute(face, PERM_CW)


def rotate_face_ccw(face: Sequence[Color]) -> FaceArray:
    """Gira una cara 90° en sentido antihorario (inverso de `rotate_face_cw`)."""
    return _permute(face, PERM_CCW)


def rotate_face_180(face: Sequence[Color]) -> FaceArray:
    """Gira una cara 180° (la secuencia queda invertida de punta a punta)."""
    return _permute(face, PERM_180)


def rotate_face(face: Sequence[Color], turns: int) -> FaceArray:
    """Gira una cara `turns` cuartos de vuelta en sentido horario.

    Args:
        face: Los 9 stickers de la cara.
        turns: Cuartos de vuelta (se normaliza mod 4). 3 equivale a un giro antihorario.

    Returns:
        Una tupla nueva con la cara girada.
    """
    t = turns % 4
    if t == 1:
        return rotate_face_cw(face)
    if t == 2:
        return rotate_face_180(face)
    if t == 3:
        return rotate_face_ccw(face)
    return tuple(face)
