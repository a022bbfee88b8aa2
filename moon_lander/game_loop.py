import random
import time
from pathlib import Path
from typing import Optional

import pygame

from . import config as C
from .audio import SoundBoard
from .controls import Command, InputAdapter
from .hud import Fonts, draw_overlay
from .metrics import FlightLog
from .session import GameEvent, GameState, Session


def render_scene(screen, session, fonts):
    screen.fill(C.BG_COLOR)
    session.terrain.draw(screen)
    session.lander.draw(screen, flicker=random.uniform(0.7, 1.0))
    draw_overlay(screen, session, fonts)
    pygame.display.flip()


def run(
    width: int = C.WIDTH,
    height: int = C.HEIGHT,
    fps: int = C.FPS,
    seed: Optional[int] = None,
    mute: bool = C.MUTE,
    footprint: bool = C.CONTACT_FOOTPRINT,
    report_dir: Optional[Path] = None,
):
    pygame.init()
    pygame.display.set_caption(C.CAPTION)
    screen = pygame.display.set_mode((width, height))
    clock = pygame.time.Clock()
    fonts = Fonts()

    session = Session(width, height, rng=random.Random(seed), footprint=footprint)
    adapter = InputAdapter()
    sounds = SoundBoard(mute=mute)
    flight_log = FlightLog()

    episode = 0
    episode_start = time.perf_counter()
    running = True

    while running:
        clock.tick(fps)

        # 1. input
        for e in pygame.event.get():
            command = adapter.handle(e)
            if command is Command.QUIT:
                running = False
                break
            if command is Command.CONFIRM:
                started = session.confirm()
                if started is GameEvent.RESTARTED:
                    adapter.release_all()
                if started is not None:
                    episode_start = time.perf_counter()
        if not running:
            break
        session.apply_controls(adapter.controls)

        # 2. physics + collision
        session.tick()

        events = session.drain_events()
        sounds.handle(events)
        if GameEvent.LANDED in events or GameEvent.CRASHED in events:
            episode += 1
            record = flight_log.record_episode(
                episode,
                lander=session.lander,
                terrain=session.terrain,
                level=session.level,
                difficulty=session.difficulty,
                steps=session.ticks,
                touchdown_vy=session.touchdown_vy,
                wall_time_sec_episode=time.perf_counter() - episode_start,
            )
            label = "Landed" if session.state is GameState.LANDED else "Crashed"
            print(
                f"Ep {episode:04d} | {label:<7} | level={session.level} | difficulty={session.difficulty} "
                f"| vy={record.touchdown_vy:.2f} | reason={record.fail_reason or '-'} "
                f"| landing rate={record.rolling_landing_rate:.2f}"
            )

        # 3. render
        render_scene(screen, session, fonts)

    pygame.quit()

    if report_dir is not None:
        try:
            for path in flight_log.finalize_and_export(
                out_dir=report_dir,
                export_csv=C.EXPORT_CSV,
                export_json=C.EXPORT_JSON,
            ):
                print(f"✅ Wrote flight log to {path}")
        except OSError as ex:
            print(f"⚠️ Failed to write flight log to {report_dir}: {ex}")
