from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .color import parse_color


class BounceConfig(BaseModel):
    screen_width: int = Field(800, gt=0)
    screen_height: int = Field(600, gt=0)
    speed: float = Field(10, gt=0)
    fps: int = Field(60, gt=0)
    duration: Optional[float] = Field(None, gt=0)
    background_color: str = "black"
    default_tint: str = "blue"
    logo_path: Optional[str] = None
    logo_height: int = Field(60, gt=0)
    window_title: str = "DVD Logo"

    @field_validator('background_color', 'default_tint')
    @classmethod
    def validate_color(cls, v):
        parse_color(v)
        return v


def load_config(path: Optional[str] = None) -> BounceConfig:
    if path is None:
        return BounceConfig()
    return BounceConfig.model_validate_json(Path(path).read_text())
