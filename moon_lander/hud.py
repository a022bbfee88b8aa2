"""
HUD overlay.

Responsibilities:
- Telemetry readout (altitude, orientation, vertical speed, x, level)
- State banners for title / landed / crashed screens
"""
import math

import pygame

from . import config as C
from .collision import contact_height
from .session import GameState

BANNERS = {
    GameState.START: ("MOON LANDER", C.TEXT_COLOR, "Press ENTER to start"),
    GameState.LANDED: ("LANDED SAFELY!", C.LANDED_COLOR, "Press ENTER to continue"),
    GameState.CRASHED: ("YOU CRASHED!", C.CRASHED_COLOR, "Press ENTER to try again"),
}

FAIL_TEXT = {
    "MISS_PAD": "Missed the pad",
    "HARD_PAD": "Touched down too fast",
    "TILT": "Touched down tilted",
}


class Fonts:
    def __init__(self):
        self.small = pygame.font.SysFont("monospace", C.HUD_FONT_SIZE)
        self.big = pygame.font.SysFont("monospace", C.BANNER_FONT_SIZE, bold=True)
        self.hint = pygame.font.SysFont("monospace", C.HINT_FONT_SIZE)


def altitude(session) -> float:
    lander = session.lander
    return max(0.0, contact_height(lander, session.terrain, session.footprint) - lander.bottom_y)


def telemetry_lines(session):
    lander = session.lander
    return [
        f"Altitude: {altitude(session):.1f} px",
        f"Orientation: {math.degrees(lander.angle):.1f}°",
        f"V-Speed: {lander.vy:.2f} px/frame",
        f"X: {lander.x:.1f} px",
        f"Level: {session.level}  Difficulty: {session.difficulty}",
    ]


def draw_telemetry(screen, session, fonts):
    y = C.HUD_Y
    for line in telemetry_lines(session):
        txt = fonts.small.render(line, True, C.TEXT_COLOR)
        screen.blit(txt, (C.HUD_X, y))
        y += C.HUD_LINE_H


def draw_banner(screen, session, fonts):
    banner = BANNERS.get(session.state)
    if banner is None:
        return

    title, color, hint = banner
    cx, cy = screen.get_width() // 2, screen.get_height() // 2

    big = fonts.big.render(title, True, color)
    screen.blit(big, (cx - big.get_width() // 2, cy - big.get_height()))

    y = cy + 10
    reason = FAIL_TEXT.get(session.lander.fail_reason) if session.state is GameState.CRASHED else None
    if reason:
        txt = fonts.hint.render(reason, True, color)
        screen.blit(txt, (cx - txt.get_width() // 2, y))
        y += txt.get_height() + 6

    txt = fonts.hint.render(hint, True, color)
    screen.blit(txt, (cx - txt.get_width() // 2, y))


def draw_overlay(screen, session, fonts):
    draw_telemetry(screen, session, fonts)
    draw_banner(screen, session, fonts)
