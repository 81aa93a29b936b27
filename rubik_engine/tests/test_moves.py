import unittest

from rubik_engine.core import FACES, Cube, create_solved
from rubik_engine.logic import MOVES, apply_move, apply_moves, inverse_move, invert_sequence

OPPOSITE = {"U": "D", "D": "U", "R": "L", "L": "R", "F": "B", "B": "F"}
SCRAMBLE = "R U R' U' F2 D L B"


def faces(**rows):
    """Cubo desde strings de 9 letras por cara (espacios ignorados)."""
    return Cube(**{k: tuple(v.replace(" ", "")) for k, v in rows.items()})


class TestMoveLaws(unittest.TestCase):
    def setUp(self):
        self.states = [
            create_solved(),
            apply_moves(create_solved(), SCRAMBLE),
            apply_moves(create_solved(), "F' L2 B D' R2 U F B2 L' D2"),
        ]

    def test_eighteen_moves(self):
        self.assertEqual(len(MOVES), 18)
        self.assertEqual(len(set(MOVES)), 18)

    def test_four_times_is_identity(self):
        for cube in self.states:
            for m in MOVES:
                c = cube
                for _ in range(4):
                    c = apply_move(c, m)
                self.assertEqual(c, cube, m)

    def test_prime_is_inverse(self):
        for cube in self.states:
            for face in FACES:
                self.assertEqual(apply_move(apply_move(cube, face), face + "'"), cube, face)
                self.assertEqual(apply_move(apply_move(cube, face + "'"), face), cube, face)

    def test_double_is_twice(self):
        for cube in self.states:
            for face in FACES:
                twice = apply_move(apply_move(cube, face), face)
                self.assertEqual(apply_move(cube, face + "2"), twice, face)

    def test_opposite_face_untouched(self):
        for cube in self.states:
            for m in MOVES:
                opp = OPPOSITE[m[0]]
                self.assertEqual(apply_move(cube, m).face(opp), cube.face(opp), m)

    def test_sticker_conservation(self):
        for cube in self.states:
            counts = cube.color_counts()
            for m in MOVES:
                self.assertEqual(apply_move(cube, m).color_counts(), counts, m)

    def test_centers_fixed(self):
        for cube in self.states:
            for m in MOVES:
                moved = apply_move(cube, m)
                for f in FACES:
                    self.assertEqual(moved.face(f)[4], cube.face(f)[4])

    def test_exactly_twelve_side_stickers_move(self):
        # En el cubo resuelto un giro cambia 12 stickers laterales (la cara girada es uniforme)
        solved = create_solved()
        for m in MOVES:
            moved = apply_move(solved, m)
            changed = sum(
                1
                for f in FACES
                for a, b in zip(solved.face(f), moved.face(f))
                if a != b
            )
            self.assertEqual(changed, 12, m)

    def test_inverse_move(self):
        self.assertEqual(inverse_move("R"), "R'")
        self.assertEqual(inverse_move("R'"), "R")
        self.assertEqual(inverse_move("R2"), "R2")

    def test_invert_sequence_undoes(self):
        seq = SCRAMBLE.split()
        cube = apply_moves(create_solved(), SCRAMBLE)
        self.assertEqual(apply_moves(cube, " ".join(invert_sequence(seq))), create_solved())


class TestMoveFixtures(unittest.TestCase):
    def test_R_on_solved(self):
        expected = faces(
            U="WWG WWG WWG",
            R="RRR RRR RRR",
            F="GGY GGY GGY",
            D="YYB YYB YYB",
            L="OOO OOO OOO",
            B="WBB WBB WBB",
        )
        self.assertEqual(apply_move(create_solved(), "R"), expected)

    def test_up_after_R_matches_known_pattern(self):
        cube = apply_move(create_solved(), "R")
        self.assertEqual(list(cube.U), ["W", "W", "G", "W", "W", "G", "W", "W", "G"])

    def test_U_on_solved(self):
        expected = faces(
            U="WWW WWW WWW",
            R="BBB RRR RRR",
            F="RRR GGG GGG",
            D="YYY YYY YYY",
            L="GGG OOO OOO",
            B="OOO BBB BBB",
        )
        self.assertEqual(apply_move(create_solved(), "U"), expected)

    def test_F_on_solved(self):
        expected = faces(
            U="WWW WWW OOO",
            R="WRR WRR WRR",
            F="GGG GGG GGG",
            D="RRR YYY YYY",
            L="OOY OOY OOY",
            B="BBB BBB BBB",
        )
        self.assertEqual(apply_move(create_solved(), "F"), expected)

    def test_known_scramble(self):
        expected = faces(
            U="WRG BWG RYY",
            R="ORW ORY YGO",
            F="WGG WGG ROR",
            D="GYG WYW BBB",
            L="OOB WOO RBW",
            B="OBB RBR YYY",
        )
        self.assertEqual(apply_moves(create_solved(), SCRAMBLE), expected)

    def test_sexy_move_differs(self):
        solved = create_solved()
        result = apply_moves(solved, "R U R' U'")
        self.assertNotEqual(result, solved)
        self.assertNotEqual(result, apply_move(solved, "R"))


if __name__ == "__main__":
    unittest.main()
