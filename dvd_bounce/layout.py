import logging
from typing import Dict, Hashable, Iterable, Optional, Tuple

from .sprite import Size, SpriteRecord, Vec

logger = logging.getLogger(__name__)

SizeReport = Tuple[Hashable, Size]


class LayoutTracker:
    """Keeps the sprite record map in step with measured layout.

    Records are keyed by sprite id. The surface size is captured on the
    first layout pass only; the window is not resizable.
    """

    def __init__(self, speed: float, default_tint: Tuple[int, int, int]):
        self.speed = speed
        self.default_tint = default_tint
        self.records: Dict[Hashable, SpriteRecord] = {}
        self.surface = Size()
        self._surface_captured = False

    def capture_surface(self, size: Size) -> None:
        if self._surface_captured:
            return
        self.surface = Size(*size)
        self._surface_captured = True
        logger.debug("Captured surface size %sx%s", self.surface.width, self.surface.height)

    def report(self, reports: Iterable[SizeReport]) -> None:
        for sprite_id, size in reports:
            record = self.records.get(sprite_id)
            if record is not None:
                record.size = Size(*size)
                continue
            self.records[sprite_id] = SpriteRecord(
                size=Size(*size),
                position=Vec(0.0, 0.0),
                velocity=Vec(self.speed, self.speed),
                tint=self.default_tint,
            )
            logger.debug("New record for sprite %s (size %sx%s)", sprite_id, size[0], size[1])

    def get(self, sprite_id: Hashable) -> Optional[SpriteRecord]:
        return self.records.get(sprite_id)
