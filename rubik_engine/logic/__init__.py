from rubik_engine.logic.errors import InvalidMove
from rubik_engine.logic.moves import MOVES, apply_move, inverse_move, invert_sequence
from rubik_engine.logic.parser import apply_moves, parse_move, parse_sequence
from rubik_engine.logic.scramble import generate_scramble

__all__ = [
    "MOVES",
    "InvalidMove",
    "apply_move",
    "apply_moves",
    "generate_scramble",
    "inverse_move",
    "invert_sequence",
    "parse_move",
    "parse_sequence",
]
