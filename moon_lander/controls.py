"""
Keyboard -> control state adapter.

The session never sees device events: this module turns pygame KEYDOWN/KEYUP
events into a ControlState of held flags plus discrete commands.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame


class Command(Enum):
    CONFIRM = "confirm"
    QUIT = "quit"


@dataclass
class ControlState:
    thrusting: bool = False
    rotating_left: bool = False
    rotating_right: bool = False


THRUST_KEYS = (pygame.K_UP, pygame.K_w)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_ESCAPE,)


class InputAdapter:
    def __init__(self):
        self.controls = ControlState()

    def release_all(self) -> None:
        self.controls = ControlState()

    def handle(self, event) -> Optional[Command]:
        if event.type == pygame.QUIT:
            return Command.QUIT

        if event.type == pygame.KEYDOWN:
            if event.key in CONFIRM_KEYS:
                return Command.CONFIRM
            if event.key in QUIT_KEYS:
                return Command.QUIT
            self._set(event.key, True)
        elif event.type == pygame.KEYUP:
            self._set(event.key, False)
        return None

    def _set(self, key, held: bool) -> None:
        if key in THRUST_KEYS:
            self.controls.thrusting = held
        elif key in LEFT_KEYS:
            self.controls.rotating_left = held
        elif key in RIGHT_KEYS:
            self.controls.rotating_right = held
