import math
import threading
import time

import numpy as np
import pygame

from .settings import SAMPLE_RATE, CHUNK_SIZE, VOLUME, TONE_BASE, TONE_STEP

# ============================================================
# ====================== SOUND ENGINE ========================
# ============================================================
#
# HOW THE TONE WORKS
# ==================
#
# One continuous sine oscillator follows the value of the element the
# sort touched last. The logic thread publishes that value with a plain
# attribute store; the feeder thread reads it once per chunk without a
# lock. The read may be one chunk stale.
#
# WAVEFORM:
#   freq  = 0 if value <= 0 else TONE_BASE + TONE_STEP * value
#   wave  = VOLUME * sin(phase + 2pi * freq * t / sr)
#   phase is carried over between chunks, so pitch changes never click.
#   freq == 0 gives silence and leaves the phase where it was.

TWO_PI = 2.0 * math.pi


def tone_frequency(value: int) -> float:
    if value <= 0:
        return 0.0
    return TONE_BASE + TONE_STEP * value


class SoundEngine:
    def __init__(self, sample_rate=SAMPLE_RATE, chunk_size=CHUNK_SIZE, channels=1):
        self.sample_rate = sample_rate
        self.chunk_size  = chunk_size
        self.channels    = channels
        self.value       = 0
        self.phase       = 0.0
        self._running    = False
        self._thread     = None
        self._channel    = None

    def set_value(self, value: int):
        self.value = value

    def start(self):
        self._channel = pygame.mixer.Channel(0)
        self._running = True
        self._thread  = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def stop(self):
        self._running = False
        if self._channel:
            self._channel.stop()

    def _gen_chunk(self) -> np.ndarray:
        """One chunk of float64 samples in [-VOLUME, VOLUME]."""
        freq = tone_frequency(self.value)
        if freq <= 0.0:
            return np.zeros(self.chunk_size, dtype=np.float64)
        inc    = TWO_PI * freq / self.sample_rate
        phases = self.phase + inc * np.arange(self.chunk_size, dtype=np.float64)
        buf    = VOLUME * np.sin(phases)
        self.phase = (self.phase + inc * self.chunk_size) % TWO_PI
        return buf

    def _to_pcm(self, mono: np.ndarray) -> bytes:
        pcm = (np.clip(mono, -1.0, 1.0) * 32767).astype(np.int16)
        if self.channels > 1:
            pcm = np.repeat(pcm[:, None], self.channels, axis=1)
        return np.ascontiguousarray(pcm).tobytes()

    def _loop(self):
        """
        Feeder thread: keeps one chunk queued behind the one playing on
        the mixer channel.
        """
        chunk_secs = self.chunk_size / self.sample_rate
        while self._running:
            snd = pygame.mixer.Sound(buffer=self._to_pcm(self._gen_chunk()))
            deadline = time.monotonic() + chunk_secs * 4
            while self._channel.get_queue() is not None and self._running:
                time.sleep(0.001)
                if time.monotonic() > deadline:
                    break
            if self._running:
                self._channel.queue(snd)
            time.sleep(chunk_secs * 0.75)


def init_sound() -> SoundEngine | None:
    """
    Open the mixer and start the tone. Returns None when no audio
    device is available; the program then runs silently.
    """
    try:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, CHUNK_SIZE)
        pygame.mixer.init()
        got = pygame.mixer.get_init()
        if not got:
            raise pygame.error("mixer did not initialise")
        freq, _fmt, channels = got
        engine = SoundEngine(sample_rate=freq, channels=channels)
        engine.start()
        return engine
    except pygame.error as e:
        print(f"Audio unavailable, running silent: {e}")
        return None


def stop_sound(engine: SoundEngine | None):
    if engine:
        engine.stop()
    if pygame.mixer.get_init():
        pygame.mixer.quit()
