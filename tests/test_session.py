import math
import random
import unittest

from moon_lander import config as C
from moon_lander.collision import Outcome
from moon_lander.controls import ControlState
from moon_lander.session import GameEvent, GameState, Session

WORLD_W, WORLD_H = 1000, 700


def make_session(seed=0) -> Session:
    return Session(WORLD_W, WORLD_H, rng=random.Random(seed))


def park_over_pad(session: Session, vy: float, angle: float = 0.0, on_pad: bool = True):
    """Place the craft a hair above the terrain so the next tick touches down."""
    pad = session.terrain.pads[-1]
    lander = session.lander
    if on_pad:
        lander.x = pad.center
    else:
        lander.x = next(x + 10 for x, _ in session.terrain.points
                        if not any(p.x - 20 <= x + 10 <= p.x2 + 20 for p in session.terrain.pads))
    lander.vx = 0.0
    lander.vy = vy
    lander.angle = angle
    ground = min(session.terrain.height_at(lander.x + dx) for dx in (-10, 0, 10))
    lander.y = ground - math.cos(angle) * C.LANDER_HEIGHT / 2 - vy / 2


class TestStateMachine(unittest.TestCase):
    def test_starts_on_title_screen(self):
        s = make_session()
        self.assertIs(s.state, GameState.START)
        self.assertEqual(s.level, 0)
        self.assertEqual(s.difficulty, C.START_DIFFICULTY)
        self.assertEqual(s.ground_y, WORLD_H - C.GROUND_MARGIN)
        self.assertEqual(len(s.terrain.pads), 3)

    def test_physics_gated_until_begin(self):
        s = make_session()
        before = s.lander.snapshot()
        self.assertIs(s.tick(), Outcome.NONE)
        self.assertEqual(s.lander.snapshot(), before)

        self.assertIs(s.confirm(), GameEvent.STARTED)
        self.assertIs(s.state, GameState.PLAYING)
        s.tick()
        self.assertNotEqual(s.lander.y, before["y"])

    def test_confirm_is_noop_while_playing(self):
        s = make_session()
        s.begin()
        s.drain_events()
        self.assertIsNone(s.confirm())
        self.assertFalse(s.restart())
        self.assertEqual(s.drain_events(), [])

    def test_landing_advances_level_and_difficulty(self):
        s = make_session(1)
        s.begin()
        park_over_pad(s, vy=1.0)
        self.assertIs(s.tick(), Outcome.LANDED)
        self.assertIs(s.state, GameState.LANDED)
        self.assertTrue(s.lander.landed)
        self.assertEqual(s.level, 1)
        self.assertEqual(s.difficulty, C.START_DIFFICULTY + 1)
        self.assertAlmostEqual(s.touchdown_vy, 1.0 + C.GRAVITY)
        self.assertIn(GameEvent.LANDED, s.drain_events())

    def test_hard_touchdown_crashes(self):
        s = make_session(2)
        s.begin()
        park_over_pad(s, vy=1.5)
        self.assertIs(s.tick(), Outcome.CRASHED)
        self.assertIs(s.state, GameState.CRASHED)
        self.assertFalse(s.lander.alive)
        self.assertEqual(s.level, 0)
        self.assertEqual(s.difficulty, C.START_DIFFICULTY)

    def test_soft_touchdown_off_pad_crashes(self):
        s = make_session(3)
        s.begin()
        park_over_pad(s, vy=0.1, on_pad=False)
        self.assertIs(s.tick(), Outcome.CRASHED)
        self.assertEqual(s.lander.fail_reason, "MISS_PAD")

    def test_tilted_touchdown_crashes(self):
        s = make_session(4)
        s.begin()
        park_over_pad(s, vy=0.5, angle=math.pi / 4)
        self.assertIs(s.tick(), Outcome.CRASHED)

    def test_no_ticks_after_outcome(self):
        s = make_session(5)
        s.begin()
        park_over_pad(s, vy=1.5)
        s.tick()
        frozen = s.lander.snapshot()
        for _ in range(5):
            self.assertIs(s.tick(), Outcome.NONE)
        self.assertEqual(s.lander.snapshot(), frozen)

    def test_restart_after_crash(self):
        s = make_session(6)
        s.begin()
        park_over_pad(s, vy=1.5)
        s.tick()
        s.lander.thrusting = True
        old_terrain = s.terrain

        self.assertIs(s.confirm(), GameEvent.RESTARTED)
        self.assertIs(s.state, GameState.PLAYING)
        self.assertTrue(s.lander.alive)
        self.assertFalse(s.lander.landed)
        self.assertFalse(s.lander.thrusting)
        self.assertIsNone(s.touchdown_vy)
        self.assertIsNot(s.terrain, old_terrain)

        ground_y = s.ground_y
        xs = [x for x, _ in s.terrain.points]
        self.assertTrue(all(b > a for a, b in zip(xs, xs[1:])))
        self.assertEqual(xs[0], 0.0)
        self.assertTrue(all(ground_y - 180 <= y <= ground_y - 20 for _, y in s.terrain.points))

    def test_restart_after_landing_uses_harder_terrain(self):
        s = make_session(7)
        s.begin()
        park_over_pad(s, vy=0.5)
        s.tick()
        s.restart()
        self.assertEqual(s.level, 1)
        self.assertEqual(len(s.terrain.pads), 2)
        self.assertTrue(all(p.width == 60 for p in s.terrain.pads))

    def test_full_descent_reaches_an_outcome(self):
        s = make_session(8)
        s.begin()
        outcome = Outcome.NONE
        for _ in range(5000):
            outcome = s.tick()
            if outcome is not Outcome.NONE:
                break
        self.assertIsNot(outcome, Outcome.NONE)
        # exactly one terminal flag
        self.assertTrue(s.lander.landed ^ (not s.lander.alive))
        self.assertTrue(s.finished)


class TestEvents(unittest.TestCase):
    def test_thrust_edges(self):
        s = make_session()
        s.begin()
        s.drain_events()

        s.apply_controls(ControlState(thrusting=True))
        s.apply_controls(ControlState(thrusting=True))
        s.apply_controls(ControlState(thrusting=False))
        self.assertEqual(s.drain_events(), [GameEvent.THRUST_ON, GameEvent.THRUST_OFF])

    def test_no_thrust_events_on_title_screen(self):
        s = make_session()
        s.apply_controls(ControlState(thrusting=True))
        self.assertTrue(s.lander.thrusting)
        self.assertEqual(s.drain_events(), [])
        s.begin()
        self.assertEqual(s.drain_events(), [GameEvent.STARTED, GameEvent.THRUST_ON])

    def test_outcome_while_thrusting_stops_thrust(self):
        s = make_session(9)
        s.begin()
        s.apply_controls(ControlState(thrusting=True))
        park_over_pad(s, vy=3.0)
        s.tick()
        self.assertEqual(s.drain_events()[-2:], [GameEvent.THRUST_OFF, GameEvent.CRASHED])

    def test_controls_copied_into_lander(self):
        s = make_session()
        s.apply_controls(ControlState(rotating_left=True, rotating_right=True))
        self.assertTrue(s.lander.rotating_left)
        self.assertTrue(s.lander.rotating_right)
        self.assertFalse(s.lander.thrusting)

    def test_drain_clears(self):
        s = make_session()
        s.begin()
        self.assertEqual(s.drain_events(), [GameEvent.STARTED])
        self.assertEqual(s.drain_events(), [])


if __name__ == "__main__":
    unittest.main()
