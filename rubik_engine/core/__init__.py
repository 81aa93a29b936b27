from rubik_engine.core.cube_model import COLORS_SOLVED, FACES, Cube, clone, create_solved
from rubik_engine.core.face import (
    COLORS,
    rotate_face,
    rotate_face_180,
    rotate_face_ccw,
    rotate_face_cw,
)

__all__ = [
    "COLORS",
    "COLORS_SOLVED",
    "FACES",
    "Cube",
    "clone",
    "create_solved",
    "rotate_face",
    "rotate_face_180",
    "rotate_face_ccw",
    "rotate_face_cw",
]
