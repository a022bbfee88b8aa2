"""
Terrain generation and landing pad logic.

Responsibilities:
- Generate a bounded random-walk height profile for a difficulty level
- Flatten landing pads into the profile
- Provide height_at(x), on_pad(x), pad_at(x)
- Render terrain/pads
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pygame

from . import config as C


@dataclass(frozen=True)
class LandingPad:
    x: float
    width: float
    y: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def center(self) -> float:
        return self.x + self.width / 2

    def contains(self, x: float) -> bool:
        return self.x <= x <= self.x2


class TerrainProfile:
    """Height samples at a fixed spacing plus the pads flattened into them."""

    def __init__(self, points: Sequence[Tuple[float, float]], pads: Sequence[LandingPad], ground_y: float):
        if len(points) < 2:
            raise ValueError("Need at least two terrain samples")
        self.points: List[Tuple[float, float]] = [(float(x), float(y)) for x, y in points]
        self.pads: List[LandingPad] = list(pads)
        self.ground_y = float(ground_y)

        self._xs = np.array([p[0] for p in self.points], dtype=np.float64)
        self._ys = np.array([p[1] for p in self.points], dtype=np.float64)
        if np.any(np.diff(self._xs) <= 0):
            raise ValueError("Terrain sample x values must be strictly increasing")

    @classmethod
    def from_points(cls, points, pads=(), ground_y=None) -> "TerrainProfile":
        """Build a profile from hand-written samples (maps, tests)."""
        if ground_y is None:
            ground_y = max(y for _, y in points)
        return cls(points, pads, ground_y)

    def height_at(self, x: float) -> float:
        # outside the sampled range the ground sits at ground_y
        return float(np.interp(x, self._xs, self._ys, left=self.ground_y, right=self.ground_y))

    def on_pad(self, x: float) -> bool:
        return any(pad.contains(x) for pad in self.pads)

    def pad_at(self, x: float) -> Optional[LandingPad]:
        for pad in self.pads:
            if pad.contains(x):
                return pad
        return None

    def nearest_pad(self, x: float) -> Optional[LandingPad]:
        if not self.pads:
            return None
        return min(self.pads, key=lambda pad: abs(pad.center - x))

    def draw(self, screen):
        h = screen.get_height()
        outline = [(self.points[0][0], h)] + self.points + [(self.points[-1][0], h)]
        pygame.draw.polygon(screen, C.TERRAIN_COLOR, outline)
        pygame.draw.lines(screen, C.TERRAIN_EDGE_COLOR, False, self.points, 2)

        for pad in self.pads:
            pygame.draw.rect(screen, C.PAD_COLOR, pygame.Rect(pad.x, pad.y - 4, pad.width, 8))


def roughness(difficulty: int) -> float:
    return C.BASE_ROUGHNESS + C.ROUGHNESS_PER_LEVEL * difficulty


def pad_count(difficulty: int) -> int:
    return max(1, C.BASE_PAD_COUNT - difficulty + 1)


def pad_width(difficulty: int) -> float:
    return max(C.MIN_PAD_WIDTH, C.BASE_PAD_WIDTH - C.PAD_WIDTH_PER_LEVEL * difficulty)


def generate_terrain(world_width: float, ground_y: float, difficulty: int,
                     rng: Optional[random.Random] = None) -> TerrainProfile:
    """
    Random-walk height profile clamped to [ground_y - 180, ground_y - 20],
    with pad_count(difficulty) flat pads written into it.

    Pads are placed independently and may coincide or overlap.
    """
    rng = rng or random.Random()
    lo = ground_y - C.TERRAIN_MAX_DEPTH
    hi = ground_y - C.TERRAIN_MIN_DEPTH
    half_step = roughness(difficulty) / 2

    points: List[List[float]] = []
    x = 0.0
    last_y = ground_y - C.TERRAIN_START_DEPTH
    while x < world_width:
        y = last_y + rng.uniform(-half_step, half_step)
        y = max(lo, min(hi, y))
        points.append([x, y])
        last_y = y
        x += C.TERRAIN_STEP

    width = pad_width(difficulty)
    span = math.ceil(width / C.TERRAIN_STEP)
    if len(points) - span < 1:
        raise ValueError(f"World width {world_width} is too narrow for a {width}px pad")

    pads: List[LandingPad] = []
    for _ in range(pad_count(difficulty)):
        idx = rng.randrange(len(points) - span)
        pad_y = points[idx][1]
        for j in range(idx, idx + span + 1):
            points[j][1] = pad_y
        pads.append(LandingPad(x=points[idx][0], width=width, y=pad_y))

    return TerrainProfile([(px, py) for px, py in points], pads, ground_y)
