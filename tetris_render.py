
"""
Rendering for the pygame shell.

- Pre-render block cell Surfaces per color and blit them.
- Pre-render static background (grid + panel frame) when Dims change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims
from tetris_engine import Snapshot, GameState

BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)


def to_rgb(tag: str) -> Tuple[int,int,int]:
    """'#F00' / '#FFA500' -> (r, g, b)"""
    h = tag.lstrip("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) != 6:
        raise ValueError(f"not a hex color: {tag!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


@dataclass
class HudCache:
    lines: int = -1
    title: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font, rows: int, cols: int):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.rows, self.cols = rows, cols
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.hud = HudCache()
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def cell(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c-2, c-2))
            s.fill(to_rgb(color))
            # light outline, like the original canvas strokeRect
            pygame.draw.rect(s, (204,204,204), (0,0,c-2,c-2), 1)
            self.cell_surf[color] = s
        return s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, color in enumerate(row):
                if color:
                    self.board_surface.blit(self.cell(color), (x*c + 1, y*c + 1))
        self._board_grid = grid

    def draw_cell(self, screen: pygame.Surface, color: str, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell(color), (rx, ry))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 44))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rotate", True, DIM_TEXT),
                f.render("R Restart", True, DIM_TEXT),
                f.render("Esc Quit", True, DIM_TEXT),
            ]
        y = d.panel_y + 90
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        if snap.grid != self._board_grid:
            self.rebuild_board_surface(snap.grid)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if snap.piece is not None:
            for x, y in snap.piece.cells:
                if y >= 0:
                    self.draw_cell(screen, snap.piece.color, x, y)
        self.draw_panel_hud(screen, snap.lines_cleared)
        if snap.state is GameState.GAME_OVER:
            msg = self.big_font.render("GAME OVER (R to Restart)", True, (255,220,220))
            rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
            back = rect.inflate(16, 12)
            pygame.draw.rect(screen, BG, back)
            screen.blit(msg, rect)
