import colorsys
from typing import Tuple

import pygame

HUE_BUCKETS = 256

RGB = Tuple[int, int, int]


def hsv_to_rgb(h: float, s: float = 1.0, v: float = 1.0) -> RGB:
    # colorsys works in [0, 1]; scale back to 0-255 channels
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return (round(r * 255), round(g * 255), round(b * 255))


def random_tint(rng) -> RGB:
    """Pick a fully saturated, full brightness tint.

    The hue is drawn from HUE_BUCKETS discrete values scaled to [0, 1).
    `rng` is anything with a `randrange(n)` method, usually `random.Random`.
    """
    hue = rng.randrange(HUE_BUCKETS) / HUE_BUCKETS
    return hsv_to_rgb(hue, 1.0, 1.0)


def parse_color(value: str) -> RGB:
    try:
        color = pygame.Color(value)
    except ValueError:
        raise ValueError(f"Invalid color format: {value}")
    return (color.r, color.g, color.b)
