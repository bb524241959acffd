import json

import pytest
from pydantic import ValidationError

from dvd_bounce.config import BounceConfig, load_config


def test_defaults():
    config = load_config()
    assert config.screen_width == 800
    assert config.screen_height == 600
    assert config.speed == 10
    assert config.default_tint == "blue"
    assert config.duration is None
    assert config.logo_path is None


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"screen_width": 300, "screen_height": 300, "speed": 4,
                                "background_color": "#101010"}))
    config = load_config(str(path))
    assert config.screen_width == 300
    assert config.speed == 4
    assert config.background_color == "#101010"


@pytest.mark.parametrize("field, value", [
    ("speed", 0),
    ("fps", -1),
    ("screen_width", 0),
    ("duration", 0),
    ("default_tint", "definitely-not-a-color"),
    ("background_color", "#zzzzzz"),
])
def test_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        BounceConfig(**{field: value})


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_config(str(tmp_path / "missing.json"))
