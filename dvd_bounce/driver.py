import logging
import random
from dataclasses import replace
from typing import Dict, Hashable, Mapping, Optional

from .color import random_tint
from .layout import LayoutTracker
from .sprite import Size, SpriteRecord, Vec

logger = logging.getLogger(__name__)


def bounce(record: SpriteRecord, surface: Size, speed: float, rng) -> SpriteRecord:
    """Advance one sprite by a single step, reflecting off any wall it touches.

    The walls are checked in the order right, bottom, left, top, and each one
    that fires draws a fresh tint. On a corner hit the last tint drawn wins.
    """
    box = record.box()
    vx, vy = record.velocity
    tint = record.tint
    walls = []

    if box.max_x >= surface.width:
        vx = -speed
        tint = random_tint(rng)
        walls.append("right")

    if box.max_y >= surface.height:
        vy = -speed
        tint = random_tint(rng)
        walls.append("bottom")

    if box.min_x <= 0:
        vx = speed
        tint = random_tint(rng)
        walls.append("left")

    if box.min_y <= 0:
        vy = speed
        tint = random_tint(rng)
        walls.append("top")

    if walls:
        logger.debug("Bounce off %s at (%s, %s)", "+".join(walls), box.min_x, box.min_y)

    position = Vec(record.position.x + vx, record.position.y + vy)
    return replace(record, position=position, velocity=Vec(vx, vy), tint=tint)


def advance(records: Mapping[Hashable, SpriteRecord], surface: Size, speed: float,
            rng) -> Dict[Hashable, SpriteRecord]:
    """One tick over every record. The input mapping is left untouched."""
    return {
        sprite_id: bounce(record, surface, speed, rng)
        for sprite_id, record in records.items()
    }


class AnimationDriver:
    """Runs `advance` once per frame while started.

    The host loop calls `tick()` every frame; ticks while stopped are ignored.
    """

    def __init__(self, tracker: LayoutTracker, rng: Optional[random.Random] = None):
        self.tracker = tracker
        self.rng = rng or random.Random()
        self.running = False
        self.ticks = 0

    def start(self) -> None:
        if not self.running:
            logger.debug("Animation driver started")
        self.running = True

    def stop(self) -> None:
        if self.running:
            logger.debug("Animation driver stopped after %d ticks", self.ticks)
        self.running = False

    def tick(self) -> None:
        if not self.running:
            return
        self.tracker.records = advance(
            self.tracker.records, self.tracker.surface, self.tracker.speed, self.rng
        )
        self.ticks += 1
