
"""Piece model, shape catalogue, rotation"""
from dataclasses import dataclass
from typing import List, Tuple, Iterator

Matrix = Tuple[Tuple[bool, ...], ...]

COLORS = {
    "T": "#F00",
    "O": "#0F0",
    "S": "#00F",
    "Z": "#FF0",
    "L": "#0FF",
    "J": "#F0F",
    "I": "#FFA500",
}

SHAPES = {
    "T": [[1,1,1],[0,1,0]],
    "O": [[1,1],[1,1]],
    "S": [[1,1,0],[0,1,1]],
    "Z": [[0,1,1],[1,1,0]],
    "L": [[1,0,0],[1,1,1]],
    "J": [[0,0,1],[1,1,1]],
    "I": [[1,1,1,1]],
}


def as_matrix(rows: List[List[int]]) -> Matrix:
    return tuple(tuple(bool(v) for v in r) for r in rows)


def rotate_matrix(m: Matrix) -> Matrix:
    """Transpose, then reverse the row order (a quarter turn)."""
    return tuple(zip(*m))[::-1]


@dataclass(frozen=True)
class PieceShape:
    name: str
    color: str
    matrix: Matrix

    @property
    def width(self) -> int:
        return len(self.matrix[0])

    @property
    def height(self) -> int:
        return len(self.matrix)

    def rotated(self) -> "PieceShape":
        return PieceShape(self.name, self.color, rotate_matrix(self.matrix))

    def cells(self) -> Iterator[Tuple[int, int]]:
        """(row, col) of every occupied cell, relative to the top-left corner."""
        for r, row in enumerate(self.matrix):
            for c, v in enumerate(row):
                if v:
                    yield r, c


CATALOGUE = tuple(PieceShape(t, COLORS[t], as_matrix(SHAPES[t])) for t in SHAPES)


def spawn_position(shape: PieceShape, cols: int) -> Tuple[int, int]:
    return cols // 2 - shape.width // 2, 0


@dataclass
class ActivePiece:
    shape: PieceShape
    x: int
    y: int

    @staticmethod
    def spawn(shape: PieceShape, cols: int) -> "ActivePiece":
        x, y = spawn_position(shape, cols)
        return ActivePiece(shape, x, y)

    @property
    def color(self) -> str:
        return self.shape.color

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) board coordinates of the occupied cells."""
        return [(self.x + c, self.y + r) for r, c in self.shape.cells()]
