"""
Ground contact and outcome classification.

Responsibilities:
- Detect contact between the craft's bottom and the terrain
- Classify contact as safe landing (on a pad, slow, upright) or crash
- Set the craft's terminal flags exactly once
"""
import math
from enum import Enum

from . import config as C
from .lander import Lander
from .terrain import TerrainProfile


class Outcome(Enum):
    NONE = "none"
    LANDED = "landed"
    CRASHED = "crashed"


def normalize_angle(angle: float) -> float:
    """Map an angle in radians into (-pi, pi]."""
    a = math.fmod(angle, 2 * math.pi)
    if a > math.pi:
        a -= 2 * math.pi
    elif a <= -math.pi:
        a += 2 * math.pi
    return a


def contact_height(lander: Lander, terrain: TerrainProfile, footprint: bool = C.CONTACT_FOOTPRINT) -> float:
    """Highest ground (smallest y) under the craft's centre, or under either edge with footprint."""
    ground = terrain.height_at(lander.x)
    if footprint:
        half = C.LANDER_WIDTH / 2
        ground = min(ground, terrain.height_at(lander.x - half), terrain.height_at(lander.x + half))
    return ground


def is_safe_touchdown(lander: Lander, terrain: TerrainProfile) -> bool:
    return (
        terrain.on_pad(lander.x)
        and abs(lander.vy) < C.SAFE_LANDING_VY
        and abs(normalize_angle(lander.angle)) < C.SAFE_LANDING_ANGLE
    )


def _fail_reason(lander: Lander, terrain: TerrainProfile) -> str:
    if not terrain.on_pad(lander.x):
        return "MISS_PAD"
    if abs(lander.vy) >= C.SAFE_LANDING_VY:
        return "HARD_PAD"
    return "TILT"


def evaluate_collision(lander: Lander, terrain: TerrainProfile, footprint: bool = C.CONTACT_FOOTPRINT) -> Outcome:
    if not lander.in_flight:
        return Outcome.NONE

    if lander.bottom_y < contact_height(lander, terrain, footprint):
        return Outcome.NONE

    if is_safe_touchdown(lander, terrain):
        lander.landed = True
        outcome = Outcome.LANDED
    else:
        lander.alive = False
        lander.fail_reason = _fail_reason(lander, terrain)
        outcome = Outcome.CRASHED

    lander.vx = 0.0
    lander.vy = 0.0
    return outcome
