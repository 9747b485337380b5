import pytest

from app.core.config_loader import get_duration_limits, get_min_guests, get_slot_labels, load_restaurant_config


def test_bundled_config():
    config = load_restaurant_config()
    assert get_slot_labels(config) == ["6:00 PM", "7:00 PM", "8:00 PM", "9:00 PM"]
    assert get_duration_limits(config) == (1, 5)
    assert get_min_guests(config) == 1


def test_missing_config_fails_fast(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_restaurant_config(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_restaurant_config(str(path))


def test_defaults_and_empty_slots():
    assert get_duration_limits({}) == (1, 5)
    with pytest.raises(ValueError):
        get_slot_labels({"slots": []})
