"""
Lander physics, state representation, and drawing.

Responsibilities:
- Maintain craft state (x, y, vx, vy, angle, control flags, alive/landed)
- Randomized reset at episode start
- Per-tick physics step from the current control flags
- Render craft and thrust flame
"""
import math
import random

import pygame

from . import config as C


class Lander:
    def __init__(self, world_width: float = C.WIDTH, rng: random.Random = None):
        self.reset(world_width, rng)

    def reset(self, world_width: float = C.WIDTH, rng: random.Random = None):
        rng = rng or random.Random()
        self.x = world_width / 2
        self.y = float(C.SPAWN_Y)
        self.vx = rng.uniform(*C.SPAWN_VX)
        self.vy = rng.uniform(*C.SPAWN_VY)
        self.angle = rng.uniform(*C.SPAWN_ANGLE)

        self.thrusting = False
        self.rotating_left = False
        self.rotating_right = False

        self.alive = True
        self.landed = False
        self.fail_reason = None

    @property
    def in_flight(self) -> bool:
        return self.alive and not self.landed

    @property
    def bottom_y(self) -> float:
        # projection of the bottom vertex; exact for both feet only when upright
        return self.y + math.cos(self.angle) * C.LANDER_HEIGHT / 2

    def step(self):
        if not self.in_flight:
            return

        if self.rotating_left:
            self.angle -= C.ROTATE_SPEED
        if self.rotating_right:
            self.angle += C.ROTATE_SPEED

        ax = 0.0
        ay = C.GRAVITY
        if self.thrusting:
            ax += math.sin(self.angle) * C.THRUST
            ay += math.cos(self.angle) * C.THRUST

        self.vx += ax
        self.vy += ay

        self.x += self.vx
        self.y += self.vy

    def snapshot(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "vx": self.vx,
            "vy": self.vy,
            "angle": self.angle,
            "thrusting": self.thrusting,
            "rotating_left": self.rotating_left,
            "rotating_right": self.rotating_right,
            "alive": self.alive,
            "landed": self.landed,
        }

    def draw(self, screen, flicker: float = 1.0):
        hw, hh = C.LANDER_WIDTH / 2, C.LANDER_HEIGHT / 2
        body = [(-hw, hh), (hw, hh), (0, -hh)]

        # drawn rotated by -angle so the nose leans the way thrust pushes
        ca, sa = math.cos(self.angle), math.sin(self.angle)

        def rotate(p):
            x, y = p
            return (x * ca + y * sa, -x * sa + y * ca)

        if self.landed:
            color = C.LANDED_COLOR
        elif not self.alive:
            color = C.CRASHED_COLOR
        else:
            color = C.LANDER_COLOR

        pts = [(self.x + rx, self.y + ry) for rx, ry in map(rotate, body)]
        pygame.draw.polygon(screen, color, pts)

        if self.thrusting and self.in_flight:
            flame = [(-hw / 2, hh), (hw / 2, hh), (0, hh + 20 * flicker)]
            fpts = [(self.x + rx, self.y + ry) for rx, ry in map(rotate, flame)]
            pygame.draw.polygon(screen, C.FLAME_COLOR, fpts)
