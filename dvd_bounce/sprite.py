import uuid
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import pygame


class Vec(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class Size(NamedTuple):
    width: float = 0.0
    height: float = 0.0


class Box(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float


@dataclass
class SpriteRecord:
    """Per-sprite motion state, filled in once the sprite has been laid out."""
    size: Size
    tint: Tuple[int, int, int]
    position: Vec = Vec()
    velocity: Vec = Vec()

    def box(self) -> Box:
        x, y = self.position
        return Box(x, y, x + self.size.width, y + self.size.height)


class Sprite:
    def __init__(self, image: pygame.Surface):
        self.id = uuid.uuid4()
        self.image = image

    def measure(self) -> Size:
        return Size(*self.image.get_size())
