"""
Synthesized sound cues driven by session events.

Responsibilities:
- Build thruster / landed / crashed tones from numpy sine tables
- Loop the thruster hum between THRUST_ON and THRUST_OFF
- One-shot cues on LANDED and CRASHED
"""
import numpy as np
import pygame

from . import config as C
from .session import GameEvent


def _tone(freqs, duration_ms, volume, fade=True):
    """Stereo int16 sound playing each frequency in turn."""
    sample_rate = pygame.mixer.get_init()[0]
    max_amp = 2 ** 15 - 1
    per_note = int(duration_ms * sample_rate / 1000 / len(freqs))

    chunks = []
    for freq in freqs:
        t = np.arange(per_note) / sample_rate
        wave = np.sin(2 * np.pi * freq * t)
        if fade:
            wave *= np.linspace(1.0, 0.0, per_note)
        chunks.append(wave)

    mono = (np.concatenate(chunks) * max_amp * volume).astype(np.int16)
    stereo = np.ascontiguousarray(np.column_stack([mono, mono]))
    return pygame.sndarray.make_sound(stereo)


class SoundBoard:
    def __init__(self, mute: bool = C.MUTE):
        self.enabled = False
        self._thrust_channel = None
        if mute:
            return

        try:
            pygame.mixer.init(frequency=C.SAMPLE_RATE, size=-16, channels=2)
            # whole periods so the loop has no click
            hum_ms = 1000 * 20 / C.THRUST_FREQ
            self.thrust = _tone((C.THRUST_FREQ,), hum_ms, C.THRUST_VOLUME, fade=False)
            self.landed = _tone(C.LANDED_FREQS, 450, C.CUE_VOLUME)
            self.crashed = _tone((C.CRASH_FREQ,), 700, C.CUE_VOLUME)
        except pygame.error as ex:
            print(f"⚠️ Audio disabled: {ex}")
            return
        self.enabled = True

    def handle(self, events) -> None:
        if not self.enabled:
            return

        for event in events:
            if event is GameEvent.THRUST_ON:
                if self._thrust_channel is None:
                    self._thrust_channel = self.thrust.play(loops=-1)
            elif event in (GameEvent.THRUST_OFF, GameEvent.RESTARTED):
                self._stop_thrust()
            elif event is GameEvent.LANDED:
                self._stop_thrust()
                self.landed.play()
            elif event is GameEvent.CRASHED:
                self._stop_thrust()
                self.crashed.play()

    def _stop_thrust(self) -> None:
        if self._thrust_channel is not None:
            self._thrust_channel.stop()
            self._thrust_channel = None
