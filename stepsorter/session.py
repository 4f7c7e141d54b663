import sys
import time
import random

import pygame

from .settings import (
    WINDOW_WIDTH, WINDOW_HEIGHT, FPS, CAPTION, ALGORITHMS, SHUFFLE_DELAY,
    DEFAULTS, load_settings,
)
from .dataset import Dataset
from .engine import RunStats, StepResult, make_sorter
from .progress import ProgressTracker
from .presentation import describe
from .render import build_font, draw_frame
from .sound import init_sound, stop_sound


def _digit_keys():
    """Top-row and keypad digits 1..5 -> algorithm key."""
    keys = {}
    for i, (_, algo) in enumerate(ALGORITHMS, start=1):
        keys[getattr(pygame, f"K_{i}")]   = algo
        keys[getattr(pygame, f"K_KP{i}")] = algo
    return keys


KEY_TO_ALGO = _digit_keys()


class Session:
    """
    Everything one window's worth of sorting needs: the dataset, the
    active sorter and its statistics, progress and the step delay.
    """

    def __init__(self, cfg: dict | None = None, sound=None):
        cfg = dict(DEFAULTS, **cfg) if cfg is not None else load_settings()
        rng = random.Random(cfg["seed"])
        self.sound    = sound
        self.dataset  = Dataset(cfg["num_bars"], rng=rng, shuffle_mode=cfg["shuffle"])
        self.progress = ProgressTracker()
        self.delay    = cfg["start_delay"]
        self.running  = True
        self.key      = ALGORITHMS[0][1]
        self.prepare()

    # ---- lifecycle -------------------------------------------------

    def prepare(self):
        """Start a fresh run on the current values."""
        self.sorter = make_sorter(self.key, len(self.dataset))
        self.stats  = RunStats()
        self.last_step = StepResult()
        self.progress.reset()

    def select(self, key: str):
        self.key = key
        self.dataset.regenerate()
        self.prepare()
        self.publish(0)

    def reshuffle(self):
        self.dataset.begin_shuffle()
        self.last_step = StepResult()
        self.progress.reset()
        self.publish(0)

    @property
    def completed(self) -> bool:
        return not self.dataset.shuffling and self.sorter.done

    # ---- input -----------------------------------------------------

    def slower(self):
        self.delay += 1

    def faster(self):
        if self.delay > 0:
            self.delay -= 1

    def handle_key(self, key):
        if key in KEY_TO_ALGO:
            self.select(KEY_TO_ALGO[key])
        elif key == pygame.K_r:
            self.reshuffle()
        elif key == pygame.K_UP:
            self.faster()
        elif key == pygame.K_DOWN:
            self.slower()
        elif key == pygame.K_ESCAPE:
            self.running = False

    def handle_event(self, ev):
        if ev.type == pygame.QUIT:
            self.running = False
        elif ev.type == pygame.KEYDOWN:
            self.handle_key(ev.key)

    # ---- per-frame logic -------------------------------------------

    def publish(self, value: int):
        if self.sound:
            self.sound.set_value(value)

    def tick(self) -> int:
        """
        Run at most one shuffle or sort step and return how many ms the
        caller should wait before drawing.
        """
        value = 0
        wait  = 0
        ds    = self.dataset
        if ds.shuffling:
            k = ds.shuffle_step()
            if k is None:
                self.prepare()
            else:
                value = ds.values[k]
                wait  = SHUFFLE_DELAY
        elif not self.sorter.done:
            t0  = time.perf_counter()
            res = self.sorter.step(ds.values, self.stats)
            self.stats.logic_ms += (time.perf_counter() - t0) * 1000.0
            self.last_step = res
            value = res.value
            wait  = self.delay + self.sorter.extra_delay
        if not ds.shuffling:
            self.progress.update(self.sorter, ds.values, self.sorter.done)
        self.publish(value)
        return wait


def main():
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    except pygame.error as e:
        print(f"Could not open window: {e}", file=sys.stderr)
        pygame.quit()
        sys.exit(1)
    pygame.display.set_caption(CAPTION)

    cfg   = load_settings()
    sound = init_sound() if cfg["sound"] else None
    session = Session(cfg, sound)
    font  = build_font()
    clock = pygame.time.Clock()

    try:
        while session.running:
            clock.tick(FPS)
            for ev in pygame.event.get():
                session.handle_event(ev)
            if not session.running:
                break
            wait = session.tick()
            if wait:
                pygame.time.wait(wait)
            draw_frame(screen, describe(session), font)
    finally:
        stop_sound(sound)
        pygame.quit()
