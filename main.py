import logging
import sys

import pygame

from tetris_config import Settings
from tetris_engine import GameEngine
from tetris_drive import DriveLoop
from tetris_input import Intent, translate, dispatch
from tetris_layout import compute_dims, fit_cell_size
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF | pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(settings=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings = settings or Settings.from_config()

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, pygame.VIDEORESIZE])

    dims = compute_dims(settings.cell_size, settings.rows, settings.cols)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, font, big_font, settings.rows, settings.cols)
    clock = pygame.time.Clock()

    engine = GameEngine(settings)
    drive = DriveLoop(engine)

    # render sink: keep the latest snapshot, draw it once per frame
    pending = None

    def on_change(snap):
        nonlocal pending
        pending = snap

    engine.add_listener(on_change)
    engine.add_game_over_listener(lambda snap: log.info("game over after %d line(s)", snap.lines_cleared))

    drive.start()
    need_redraw = True

    while True:
        dt = clock.tick(settings.fps)

        for e in pygame.event.get():
            if e.type == pygame.VIDEORESIZE:
                cell = fit_cell_size(e.w, e.h, settings.rows, settings.cols)
                if cell != dims.cell:
                    dims = compute_dims(cell, settings.rows, settings.cols)
                    screen = recreate_window(dims)
                    render = RenderAssets(dims, font, big_font, settings.rows, settings.cols)
                need_redraw = True
                continue
            intent = translate(e)
            if intent is None:
                continue
            if intent is Intent.QUIT:
                pygame.quit(); sys.exit()
            dispatch(intent, drive)

        drive.update(dt)

        if pending is not None or need_redraw:
            snap = pending if pending is not None else engine.snapshot()
            pending = None
            render.draw(screen, snap)
            pygame.display.flip()
            need_redraw = False


if __name__ == '__main__':
    main()
