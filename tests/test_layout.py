import pytest

from dvd_bounce.layout import LayoutTracker
from dvd_bounce.sprite import Size, SpriteRecord, Vec

BLUE = (0, 0, 255)


def test_first_report_creates_record_at_origin():
    tracker = LayoutTracker(speed=10, default_tint=BLUE)
    tracker.report([("a", Size(50, 20))])

    record = tracker.get("a")
    assert record.position == Vec(0, 0)
    assert record.velocity == Vec(10, 10)
    assert record.tint == BLUE
    assert record.size == Size(50, 20)


def test_later_report_only_updates_size():
    tracker = LayoutTracker(speed=10, default_tint=BLUE)
    tracker.report([("a", Size(50, 20))])
    record = tracker.get("a")
    record.position = Vec(40, 30)
    record.velocity = Vec(-10, 10)
    record.tint = (255, 0, 0)

    tracker.report([("a", Size(60, 25))])

    record = tracker.get("a")
    assert record.size == Size(60, 25)
    assert record.position == Vec(40, 30)
    assert record.velocity == Vec(-10, 10)
    assert record.tint == (255, 0, 0)


def test_batch_report_covers_every_sprite():
    tracker = LayoutTracker(speed=5, default_tint=BLUE)
    tracker.report([("a", Size(1, 1)), ("b", Size(2, 2)), ("c", Size(3, 3))])
    assert set(tracker.records) == {"a", "b", "c"}


def test_surface_captured_once():
    tracker = LayoutTracker(speed=10, default_tint=BLUE)
    assert tracker.surface == Size(0, 0)

    tracker.capture_surface(Size(300, 200))
    tracker.capture_surface(Size(640, 480))

    assert tracker.surface == Size(300, 200)


def test_missing_record_lookup_is_none():
    tracker = LayoutTracker(speed=10, default_tint=BLUE)
    assert tracker.get("nope") is None


def test_record_tint_comes_from_the_tracker():
    tracker = LayoutTracker(speed=10, default_tint=(255, 0, 0))
    tracker.report([("a", Size(5, 5))])
    assert tracker.get("a").tint == (255, 0, 0)

    with pytest.raises(TypeError):
        SpriteRecord(size=Size(5, 5))
