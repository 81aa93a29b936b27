# rubik_engine/core/cube_model.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Literal, Mapping, Sequence, Tuple

from rubik_engine.core.face import COLORS, Color, FaceArray

Face = Literal["U", "R", "F", "D", "L", "B"]
CubeHash = Tuple[FaceArray, ...]

FACES: Tuple[Face, ...] = ("U", "R", "F", "D", "L", "B")
COLORS_SOLVED: Dict[Face, Color] = {
    "U": "W",
    "R": "R",
    "F": "G",
    "D": "Y",
    "L": "O",
    "B": "B",
}


def _as_face(name: str, stickers: Sequence[str]) -> FaceArray:
    """Valida y congela los stickers de una cara.

    Raises:
        ValueError: Si la cara no tiene exactamente 9 stickers de colores válidos.
    """
    try:
        face = tuple(stickers)
    except TypeError:
        raise ValueError(f"La cara {name} debe ser una secuencia de 9 stickers") from None
    if len(face) != 9:
        raise ValueError(f"La cara {name} debe tener 9 stickers (tiene {len(face)})")
    for s in face:
        if s not in COLORS:
            raise ValueError(f"Color inválido en la cara {name}: {s!r}")
    return face  # type: ignore[return-value]


@dataclass(frozen=True, eq=True)
class Cube:
    """Estado inmutable de un cubo Rubik 3x3.

    Representación:
        - Seis caras `U R F D L B`, cada una una tupla de 9 stickers (índices 0..8,
          layout fila-columna).
        - U se mira desde arriba con B en el borde superior; F, R, B y L desde afuera
          con U arriba; D desde abajo con F en el borde superior.

    Ningún método modifica la instancia: los movimientos devuelven cubos nuevos, así
    que un mismo valor puede compartirse sin copias (por ejemplo, en un historial de undo).
    """

    U: FaceArray
    R: FaceArray
    F: FaceArray
    D: FaceArray
    L: FaceArray
    B: FaceArray

    def __post_init__(self) -> None:
        for f in FACES:
            object.__setattr__(self, f, _as_face(f, getattr(self, f)))

    # --------------------------
    # Construcción
    # --------------------------
    @classmethod
    def solved(cls) -> Cube:
        """Crea un cubo resuelto con el esquema U=W, R=R, F=G, D=Y, L=O, B=B."""
        return cls(**{f: (COLORS_SOLVED[f],) * 9 for f in FACES})

    @classmethod
    def from_faces(cls, faces: Mapping[str, Sequence[str]]) -> Cube:
        """Construye un cubo desde un mapeo cara -> 9 stickers.

        Raises:
            ValueError: Si faltan caras, sobran claves o alguna cara es inválida.
        """
        keys = set(faces)
        if keys != set(FACES):
            raise ValueError(f"Se esperaban las caras {FACES}, se recibió {sorted(keys)}")
        return cls(**{f: tuple(faces[f]) for f in FACES})

    def clone(self) -> Cube:
        """Devuelve una copia con tuplas propias para cada cara."""
        return Cube(**{f: tuple(getattr(self, f)) for f in FACES})

    def replace(self, **faces: Sequence[str]) -> Cube:
        """Devuelve un cubo nuevo reemplazando solo las caras indicadas."""
        data = {f: getattr(self, f) for f in FACES}
        for name, stickers in faces.items():
            if name not in data:
                raise ValueError(f"Cara desconocida: {name}")
            data[name] = tuple(stickers)
        return Cube(**data)

    # --------------------------
    # Consultas
    # --------------------------
    def face(self, name: str) -> FaceArray:
        if name not in FACES:
            raise ValueError(f"Cara desconocida: {name}")
        return getattr(self, name)

    def faces(self) -> Dict[Face, List[Color]]:
        """Copia mutable del estado: dict[cara] -> lista de 9 stickers."""
        return {f: list(getattr(self, f)) for f in FACES}

    def is_solved(self) -> bool:
        """Indica si cada cara tiene un único color."""
        return all(len(set(getattr(self, f))) == 1 for f in FACES)

    def to_hashable(self) -> CubeHash:
        """Tupla de caras en el orden de `FACES`."""
        return tuple(getattr(self, f) for f in FACES)

    def color_counts(self) -> Dict[Color, int]:
        """Cantidad de stickers por color (siempre 54 en total)."""
        counts: Counter = Counter()
        for f in FACES:
            counts.update(getattr(self, f))
        return dict(counts)


def create_solved() -> Cube:
    """Atajo funcional de `Cube.solved()`."""
    return Cube.solved()


def clone(cube: Cube) -> Cube:
    """Atajo funcional de `Cube.clone()`."""
    return cube.clone()
