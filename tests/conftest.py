import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest


class ScriptedRng:
    """Stands in for random.Random, handing out a fixed sequence of values."""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        if not self.values:
            raise AssertionError("random source used unexpectedly")
        self.calls += 1
        return self.values.pop(0) % n


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def display():
    pygame.init()
    screen = pygame.display.set_mode((300, 300))
    yield screen
    pygame.quit()
