"""
Game session state machine.

Responsibilities:
- Sequence START -> PLAYING -> LANDED / CRASHED -> PLAYING
- Gate physics + collision so they only run while PLAYING
- Track level and difficulty across restarts
- Regenerate terrain and reset the craft on restart
- Expose discrete edge events (thrust on/off, landed, crashed) for audio and logging
"""
from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional

from . import config as C
from .collision import Outcome, evaluate_collision
from .controls import ControlState
from .lander import Lander
from .terrain import TerrainProfile, generate_terrain


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    LANDED = "landed"
    CRASHED = "crashed"


class GameEvent(Enum):
    STARTED = "started"
    RESTARTED = "restarted"
    THRUST_ON = "thrust_on"
    THRUST_OFF = "thrust_off"
    LANDED = "landed"
    CRASHED = "crashed"


class Session:
    def __init__(
        self,
        world_width: float = C.WIDTH,
        world_height: float = C.HEIGHT,
        rng: Optional[random.Random] = None,
        footprint: bool = C.CONTACT_FOOTPRINT,
    ):
        self.world_width = world_width
        self.world_height = world_height
        self.ground_y = world_height - C.GROUND_MARGIN
        self.rng = rng or random.Random()
        self.footprint = footprint

        self.state = GameState.START
        self.level = C.START_LEVEL
        self.difficulty = C.START_DIFFICULTY
        self.ticks = 0
        self.touchdown_vy: Optional[float] = None

        self._events: List[GameEvent] = []
        self.terrain: TerrainProfile = self._new_terrain()
        self.lander = Lander(world_width, self.rng)

    def _new_terrain(self) -> TerrainProfile:
        return generate_terrain(self.world_width, self.ground_y, self.difficulty, self.rng)

    @property
    def finished(self) -> bool:
        return self.state in (GameState.LANDED, GameState.CRASHED)

    def begin(self) -> bool:
        if self.state is not GameState.START:
            return False
        self.state = GameState.PLAYING
        self.ticks = 0
        self._events.append(GameEvent.STARTED)
        if self.lander.thrusting:
            self._events.append(GameEvent.THRUST_ON)
        return True

    def restart(self) -> bool:
        if not self.finished:
            return False
        self.terrain = self._new_terrain()
        self.lander.reset(self.world_width, self.rng)
        self.state = GameState.PLAYING
        self.ticks = 0
        self.touchdown_vy = None
        self._events.append(GameEvent.RESTARTED)
        return True

    def confirm(self) -> Optional[GameEvent]:
        """ENTER / SPACE: start from the title screen or fly again after an outcome."""
        if self.begin():
            return GameEvent.STARTED
        if self.restart():
            return GameEvent.RESTARTED
        return None

    def apply_controls(self, controls: ControlState) -> None:
        lander = self.lander
        was_thrusting = lander.thrusting

        lander.thrusting = controls.thrusting
        lander.rotating_left = controls.rotating_left
        lander.rotating_right = controls.rotating_right

        if self.state is not GameState.PLAYING or not lander.in_flight:
            return
        if lander.thrusting and not was_thrusting:
            self._events.append(GameEvent.THRUST_ON)
        elif was_thrusting and not lander.thrusting:
            self._events.append(GameEvent.THRUST_OFF)

    def tick(self) -> Outcome:
        if self.state is not GameState.PLAYING or not self.lander.in_flight:
            return Outcome.NONE

        self.lander.step()
        self.ticks += 1
        vy = self.lander.vy
        outcome = evaluate_collision(self.lander, self.terrain, self.footprint)

        if outcome is Outcome.NONE:
            return outcome

        self.touchdown_vy = vy

        if self.lander.thrusting:
            self._events.append(GameEvent.THRUST_OFF)

        if outcome is Outcome.LANDED:
            self.level += 1
            self.difficulty += 1
            self.state = GameState.LANDED
            self._events.append(GameEvent.LANDED)
        else:
            self.state = GameState.CRASHED
            self._events.append(GameEvent.CRASHED)
        return outcome

    def drain_events(self) -> List[GameEvent]:
        events, self._events = self._events, []
        return events
