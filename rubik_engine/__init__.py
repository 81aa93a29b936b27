"""Motor de estado y movimientos para un cubo Rubik 3x3.

Uso típico:
    >>> from rubik_engine import create_solved, apply_moves, print_cube
    >>> cube = apply_moves(create_solved(), "R U R' U'")
    >>> print(print_cube(cube))
"""
from rubik_engine.core import (
    COLORS,
    COLORS_SOLVED,
    FACES,
    Cube,
    clone,
    create_solved,
    rotate_face_180,
    rotate_face_ccw,
    rotate_face_cw,
)
from rubik_engine.logic import (
    MOVES,
    InvalidMove,
    apply_move,
    apply_moves,
    generate_scramble,
    inverse_move,
    invert_sequence,
    parse_move,
    parse_sequence,
)
from rubik_engine.util import from_json, from_structured, print_cube, to_json, to_structured

__all__ = [
    "COLORS",
    "COLORS_SOLVED",
    "FACES",
    "MOVES",
    "Cube",
    "InvalidMove",
    "apply_move",
    "apply_moves",
    "clone",
    "create_solved",
    "from_json",
    "from_structured",
    "generate_scramble",
    "inverse_move",
    "invert_sequence",
    "parse_move",
    "parse_sequence",
    "print_cube",
    "rotate_face_180",
    "rotate_face_ccw",
    "rotate_face_cw",
    "to_json",
    "to_structured",
]
