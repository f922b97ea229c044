# tetris_layout.py
from dataclasses import dataclass

MARGIN = 16
PANEL_W = 180
MIN_CELL = 8

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims(cell: int, rows: int, cols: int) -> Dims:
    margin = MARGIN
    panel_w = PANEL_W

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )

def fit_cell_size(width: int, height: int, rows: int, cols: int) -> int:
    """Largest cell size whose layout fits a width x height window."""
    by_w = (width - 3 * MARGIN - PANEL_W) // cols
    by_h = (height - 2 * MARGIN) // rows
    return max(MIN_CELL, min(by_w, by_h))
