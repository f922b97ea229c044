
"""Board grid, collision, lock-in, row clearing"""
import logging
from typing import Optional, List, Tuple
from tetris_piece import ActivePiece

log = logging.getLogger(__name__)

Cell = Optional[str]


class PlacementError(ValueError):
    """Locking a piece onto walls, floor or settled cells."""


class Board:
    def __init__(self, rows: int = 20, cols: int = 10):
        self.rows, self.cols = rows, cols
        self.grid: List[List[Cell]] = [[None] * cols for _ in range(rows)]

    def reset(self):
        for row in self.grid:
            row[:] = [None] * self.cols

    def is_occupied(self, x: int, y: int) -> bool:
        # walls and floor are solid, the space above row 0 is open
        if x < 0 or x >= self.cols or y >= self.rows: return True
        if y < 0: return False
        return self.grid[y][x] is not None

    def lock(self, piece: ActivePiece):
        if collides(self, piece):
            raise PlacementError(f"cannot lock {piece.shape.name} at ({piece.x}, {piece.y})")
        for x, y in piece.cells():
            if y >= 0:
                self.grid[y][x] = piece.color

    def clear_completed_rows(self) -> int:
        """Remove full rows bottom-to-top, one at a time; returns the count."""
        c = 0; y = self.rows - 1
        while y >= 0:
            if all(self.grid[y]):
                del self.grid[y]
                self.grid.insert(0, [None] * self.cols)
                c += 1
            else:
                y -= 1
        if c:
            log.debug("cleared %d row(s)", c)
        return c

    def rows_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(r) for r in self.grid)

    def is_empty(self) -> bool:
        return not any(any(r) for r in self.grid)


def collides(board: Board, piece: ActivePiece) -> bool:
    for x, y in piece.cells():
        if x < 0 or x >= board.cols or y >= board.rows: return True
        if board.is_occupied(x, y): return True
    return False
