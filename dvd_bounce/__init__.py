from .config import BounceConfig, load_config
from .driver import AnimationDriver, advance, bounce
from .layout import LayoutTracker
from .sprite import Size, Sprite, SpriteRecord, Vec

__all__ = [
    "AnimationDriver",
    "BounceConfig",
    "LayoutTracker",
    "Size",
    "Sprite",
    "SpriteRecord",
    "Vec",
    "advance",
    "bounce",
    "load_config",
]
