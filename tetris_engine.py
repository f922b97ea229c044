
"""Game engine: spawn -> fall -> lock -> clear -> respawn -> game over"""
import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from tetris_board import Board, Cell, collides
from tetris_config import Settings
from tetris_piece import ActivePiece, Matrix
from tetris_rng import PieceRandomizer

log = logging.getLogger(__name__)


class EngineStateError(RuntimeError):
    """An operation that needs a game in progress was called without one."""


class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PieceView:
    name: str
    color: str
    x: int
    y: int
    matrix: Matrix
    cells: Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the render sink."""
    rows: int
    cols: int
    grid: Tuple[Tuple[Cell, ...], ...]
    piece: Optional[PieceView]
    state: GameState
    lines_cleared: int

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING


Listener = Callable[[Snapshot], None]


class GameEngine:
    def __init__(self, settings: Optional[Settings] = None, randomizer: Optional[PieceRandomizer] = None):
        self.settings = settings or Settings.from_config()
        self.randomizer = randomizer or PieceRandomizer(self.settings.seed)
        self.board = Board(self.settings.rows, self.settings.cols)
        self.piece: Optional[ActivePiece] = None
        self.state = GameState.IDLE
        self.lines_cleared = 0
        self._listeners: List[Listener] = []
        self._game_over_listeners: List[Listener] = []

    # ---------- listeners ----------
    def add_listener(self, fn: Listener):
        """fn(snapshot) after every committed state change."""
        self._listeners.append(fn)

    def add_game_over_listener(self, fn: Listener):
        """fn(snapshot) once per RUNNING -> GAME_OVER transition."""
        self._game_over_listeners.append(fn)

    def _changed(self):
        if self._listeners:
            snap = self.snapshot()
            for fn in self._listeners:
                fn(snap)

    # ---------- state ----------
    @property
    def is_running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def active_piece(self) -> ActivePiece:
        if self.piece is None:
            raise EngineStateError("no active piece; call start() first")
        return self.piece

    def snapshot(self) -> Snapshot:
        view = None
        if self.piece is not None:
            p = self.piece
            view = PieceView(p.shape.name, p.color, p.x, p.y, p.shape.matrix, tuple(p.cells()))
        return Snapshot(self.board.rows, self.board.cols, self.board.rows_snapshot(),
                        view, self.state, self.lines_cleared)

    # ---------- lifecycle ----------
    def start(self):
        self.reset()

    def reset(self):
        self.board.reset()
        self.lines_cleared = 0
        self.state = GameState.RUNNING
        log.info("new game (%dx%d)", self.board.rows, self.board.cols)
        self._spawn()
        self._changed()

    def _spawn(self):
        self.piece = ActivePiece.spawn(self.randomizer.create_piece(), self.board.cols)
        log.debug("spawn %s at (%d, %d)", self.piece.shape.name, self.piece.x, self.piece.y)
        if collides(self.board, self.piece):
            self.state = GameState.GAME_OVER
            log.info("game over: no room to spawn %s", self.piece.shape.name)
            snap = self.snapshot()
            for fn in self._game_over_listeners:
                fn(snap)

    def _rejected(self, op: str) -> bool:
        log.debug("%s ignored in state %s", op, self.state.value)
        return False

    # ---------- controls ----------
    def move_horizontal(self, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        if not self.is_running: return self._rejected("move")
        p = self.piece
        p.x += direction
        if collides(self.board, p):
            p.x -= direction
            return False
        self._changed()
        return True

    def move_left(self) -> bool:
        return self.move_horizontal(-1)

    def move_right(self) -> bool:
        return self.move_horizontal(1)

    def rotate(self) -> bool:
        if not self.is_running: return self._rejected("rotate")
        p = self.piece
        old = p.shape
        p.shape = old.rotated()
        if collides(self.board, p):
            p.shape = old
            return False
        self._changed()
        return True

    def tick(self) -> bool:
        """One gravity step; locks, clears and respawns when the piece cannot fall."""
        if not self.is_running: return self._rejected("tick")
        p = self.piece
        p.y += 1
        if collides(self.board, p):
            p.y -= 1
            self.board.lock(p)
            log.debug("lock %s at (%d, %d)", p.shape.name, p.x, p.y)
            self.lines_cleared += self.board.clear_completed_rows()
            self._spawn()
        self._changed()
        return True

    soft_drop = tick
