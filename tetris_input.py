
"""Keyboard -> intent mapping"""
import enum
from typing import Dict, Optional
import pygame
from tetris_drive import DriveLoop


class Intent(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP_START = "soft_drop_start"
    SOFT_DROP_STOP = "soft_drop_stop"
    RESET = "reset"
    QUIT = "quit"


KEYDOWN_INTENTS: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_UP: Intent.ROTATE,
    pygame.K_DOWN: Intent.SOFT_DROP_START,
    pygame.K_r: Intent.RESET,
    pygame.K_ESCAPE: Intent.QUIT,
}

KEYUP_INTENTS: Dict[int, Intent] = {
    pygame.K_DOWN: Intent.SOFT_DROP_STOP,
}


def translate(event) -> Optional[Intent]:
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEYDOWN_INTENTS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEYUP_INTENTS.get(event.key)
    return None


def dispatch(intent: Intent, drive: DriveLoop):
    """Apply an intent immediately; QUIT is left to the caller."""
    engine = drive.engine
    if intent is Intent.MOVE_LEFT: engine.move_left()
    elif intent is Intent.MOVE_RIGHT: engine.move_right()
    elif intent is Intent.ROTATE: engine.rotate()
    elif intent is Intent.SOFT_DROP_START: drive.soft_drop_start()
    elif intent is Intent.SOFT_DROP_STOP: drive.soft_drop_stop()
    elif intent is Intent.RESET: drive.reset()
