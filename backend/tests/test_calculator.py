"""
Unit tests for the slot generator.
"""

import math
import random

import pytest

from salonbook.services.slots.calculator import format_minutes_12h, generate_slot_minutes
from salonbook.services.slots.schedule import BreakPeriod
from salonbook.services.slots.timeutils import minutes_to_time_str


def display(*args):
    return [format_minutes_12h(t) for t in generate_slot_minutes(*args)]


def test_morning_with_break():
    slots = display("09:00", "12:00", 30, [BreakPeriod("10:00", "10:30")])
    assert slots == ["9:00 AM", "9:30 AM", "10:30 AM", "11:00 AM", "11:30 AM"]


def test_default_interval_is_30_minutes():
    assert display("09:00", "10:30") == ["9:00 AM", "9:30 AM", "10:00 AM"]


def test_start_equal_to_end_is_empty():
    assert generate_slot_minutes("09:00", "09:00") == []


def test_end_is_exclusive_and_partial_step_kept():
    # 09:00-10:15 step 30 → 9:00, 9:30, 10:00
    assert generate_slot_minutes("09:00", "10:15", 30) == [540, 570, 600]


def test_break_outside_window_has_no_effect():
    breaks = [BreakPeriod("07:00", "08:00"), BreakPeriod("18:00", "19:00")]
    assert generate_slot_minutes("09:00", "11:00", 30, breaks) == [540, 570, 600, 630]


def test_overlapping_breaks_are_tolerated():
    breaks = [BreakPeriod("13:00", "14:00"), BreakPeriod("13:30", "14:30")]
    slots = display("12:00", "15:00", 30, breaks)
    assert slots == ["12:00 PM", "12:30 PM", "2:30 PM"]


def test_break_end_is_exclusive():
    slots = generate_slot_minutes("09:00", "11:00", 30, [BreakPeriod("09:30", "10:00")])
    assert slots == [540, 600, 630]


def test_invalid_interval():
    with pytest.raises(ValueError):
        generate_slot_minutes("09:00", "10:00", 0)


def test_generator_properties_on_random_windows():
    rng = random.Random(1234)
    for _ in range(300):
        start = rng.randrange(0, 1380)
        end = rng.randrange(start + 1, 1440)
        interval = rng.choice([15, 30, 45, 60])
        breaks = []
        for _ in range(rng.randrange(0, 4)):
            b_start = rng.randrange(0, 1439)
            b_end = rng.randrange(b_start + 1, 1440)
            breaks.append(BreakPeriod(minutes_to_time_str(b_start), minutes_to_time_str(b_end)))

        slots = generate_slot_minutes(
            minutes_to_time_str(start), minutes_to_time_str(end), interval, breaks,
        )

        assert len(slots) <= math.ceil((end - start) / interval)
        assert slots == sorted(set(slots))
        for t in slots:
            assert start <= t < end
            assert (t - start) % interval == 0
            assert not any(b.start_minutes <= t < b.end_minutes for b in breaks)

        # every grid point not in a break is emitted
        expected = [
            t for t in range(start, end, interval)
            if not any(b.start_minutes <= t < b.end_minutes for b in breaks)
        ]
        assert slots == expected


def test_generation_is_deterministic():
    breaks = [BreakPeriod("13:00", "14:00")]
    first = display("09:00", "18:00", 30, breaks)
    assert first == display("09:00", "18:00", 30, breaks)
    assert len(first) == 16
