import unittest

from rubik_engine.core.face import (
    rotate_face,
    rotate_face_180,
    rotate_face_ccw,
    rotate_face_cw,
)

LETTERS = ("A", "B", "C", "D", "E", "F", "G", "H", "I")


class TestFaceRotation(unittest.TestCase):
    def test_cw(self):
        # A B C    G D A
        # D E F -> H E B
        # G H I    I F C
        self.assertEqual(rotate_face_cw(LETTERS), ("G", "D", "A", "H", "E", "B", "I", "F", "C"))

    def test_ccw(self):
        self.assertEqual(rotate_face_ccw(LETTERS), ("C", "F", "I", "B", "E", "H", "A", "D", "G"))

    def test_180_reverses(self):
        self.assertEqual(rotate_face_180(LETTERS), tuple(reversed(LETTERS)))

    def test_four_cw_is_identity(self):
        face = LETTERS
        for _ in range(4):
            face = rotate_face_cw(face)
        self.assertEqual(face, LETTERS)

    def test_cw_then_ccw_is_identity(self):
        self.assertEqual(rotate_face_ccw(rotate_face_cw(LETTERS)), LETTERS)
        self.assertEqual(rotate_face_cw(rotate_face_ccw(LETTERS)), LETTERS)

    def test_180_is_two_cw(self):
        self.assertEqual(rotate_face_180(LETTERS), rotate_face_cw(rotate_face_cw(LETTERS)))

    def test_center_fixed(self):
        for fn in (rotate_face_cw, rotate_face_ccw, rotate_face_180):
            self.assertEqual(fn(LETTERS)[4], "E")

    def test_input_not_mutated(self):
        face = list(LETTERS)
        rotate_face_cw(face)
        rotate_face_ccw(face)
        rotate_face_180(face)
        self.assertEqual(face, list(LETTERS))

    def test_rotate_face_turns(self):
        self.assertEqual(rotate_face(LETTERS, 0), LETTERS)
        self.assertEqual(rotate_face(LETTERS, 1), rotate_face_cw(LETTERS))
        self.assertEqual(rotate_face(LETTERS, 2), rotate_face_180(LETTERS))
        self.assertEqual(rotate_face(LETTERS, 3), rotate_face_ccw(LETTERS))
        self.assertEqual(rotate_face(LETTERS, -1), rotate_face_ccw(LETTERS))


if __name__ == "__main__":
    unittest.main()
