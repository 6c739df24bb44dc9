"""
Tests for time-of-day helpers.
"""

from datetime import date, datetime

from deeper_life.routines.clock import (
    format_time_remaining,
    get_greeting,
    get_time_until,
    is_first_visit_today,
)

from tests.fake_store import InMemoryStore


class TestTimeUntil:
    def test_later_today(self):
        assert get_time_until("21:00", datetime(2024, 3, 13, 18, 45)) == (2, 15)

    def test_rolls_over_to_tomorrow(self):
        assert get_time_until("06:30", datetime(2024, 3, 13, 22, 0)) == (8, 30)

    def test_exactly_now(self):
        assert get_time_until("06:30", datetime(2024, 3, 13, 6, 30)) == (0, 0)

    def test_format(self):
        assert format_time_remaining(2, 15) == "2h 15m"
        assert format_time_remaining(0, 45) == "45m"


class TestGreeting:
    def test_greetings_by_hour(self):
        assert get_greeting(datetime(2024, 3, 13, 7)) == "Good morning"
        assert get_greeting(datetime(2024, 3, 13, 13)) == "Good afternoon"
        assert get_greeting(datetime(2024, 3, 13, 18)) == "Good evening"
        assert get_greeting(datetime(2024, 3, 13, 23)) == "Good night"


class TestFirstVisit:
    def test_first_visit_is_recorded(self):
        store = InMemoryStore()
        today = date(2024, 3, 13)

        assert is_first_visit_today(store, today) is True
        assert is_first_visit_today(store, today) is False
        assert store.get_last_visit() == "2024-03-13"

    def test_new_day_counts_again(self):
        store = InMemoryStore()
        store.set_last_visit("2024-03-12")

        assert is_first_visit_today(store, date(2024, 3, 13)) is True
