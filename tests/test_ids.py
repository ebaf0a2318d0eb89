"""Tests for identifier generation."""

import string

from studio_projects.services.ids import IdGenerator
from tests.conftest import StepClock


def test_ids_use_clock_millis() -> None:
    generator = IdGenerator(clock=StepClock(1_700_000_000_123))

    assert generator.next_id() == "1700000000123"


def test_ids_do_not_repeat_within_same_millisecond() -> None:
    generator = IdGenerator(clock=StepClock(1_000))

    assert [generator.next_id() for _ in range(3)] == ["1000", "1001", "1002"]


def test_ids_follow_clock_when_it_moves_ahead() -> None:
    clock = StepClock(1_000)
    generator = IdGenerator(clock=clock)
    generator.next_id()

    clock.value = 5_000

    assert generator.next_id() == "5000"


def test_file_ids_have_base36_suffix() -> None:
    generator = IdGenerator(clock=StepClock(42))

    file_id = generator.next_file_id()

    assert file_id.startswith("42")
    suffix = file_id[2:]
    assert len(suffix) == 9
    assert set(suffix) <= set(string.digits + string.ascii_lowercase)
