from app.services.availability import build_availability

SLOTS = ["6:00 PM", "7:00 PM", "8:00 PM", "9:00 PM"]


def flags(view):
    return {slot.time: slot.available for slot in view}


def test_all_free_without_bookings():
    view = build_availability(SLOTS, "2024-01-01", [])
    assert [s.time for s in view] == SLOTS
    assert all(s.available for s in view)


def test_multi_hour_booking_blocks_covered_slots_only():
    bookings = [{"date": "2024-01-01", "time": "6:00 PM", "hours": 2}]
    assert flags(build_availability(SLOTS, "2024-01-01", bookings)) == {
        "6:00 PM": False,
        "7:00 PM": False,
        "8:00 PM": True,
        "9:00 PM": True,
    }


def test_longer_candidate_duration_is_checked():
    bookings = [{"date": "2024-01-01", "time": "9:00 PM", "hours": 1}]
    view = flags(build_availability(SLOTS, "2024-01-01", bookings, hours=2))
    # 8 PM + 2h runs into the 9 PM booking
    assert view["8:00 PM"] is False
    assert view["7:00 PM"] is True


def test_other_dates_do_not_affect_view():
    bookings = [{"date": "2024-01-02", "time": "6:00 PM", "hours": 5}]
    assert all(s.available for s in build_availability(SLOTS, "2024-01-01", bookings))
