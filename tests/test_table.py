import io
import re

import pytest

from philosophers.parsing import Settings
from philosophers.table import Table, clamp_durations

LINE = re.compile(r"^(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|died)$")


def _lines(buffer):
    return buffer.getvalue().splitlines()


@pytest.mark.parametrize(
    "die, eat, sleep, expected",
    [
        (100, 60, 60, (100, 100)),
        (200, 60, 60, (60, 60)),
        (50, 60, 10, (50, 50)),
        (100, 100, 10, (100, 100)),
        (100, 10, 100, (100, 100)),
    ],
)
def test_clamp_durations(die, eat, sleep, expected):
    assert clamp_durations(die, eat, sleep) == expected


def test_seating_assigns_neighbouring_forks():
    table = Table(Settings(3, 800, 200, 200), output=io.StringIO())
    seats = [(p.id, p.right_fork, p.left_fork) for p in table.philosophers]
    assert seats == [(1, 0, 1), (2, 1, 2), (3, 2, 0)]
    assert len(table.forks) == 3


def test_elapsed_is_monotonic():
    table = Table(Settings(2, 800, 200, 200), output=io.StringIO())
    first = table.elapsed_ms()
    second = table.elapsed_ms()
    assert 0 <= first <= second


def test_announce_format():
    out = io.StringIO()
    table = Table(Settings(3, 800, 200, 200), output=out)
    table.announce(table.philosophers[2], "is thinking")
    (line,) = _lines(out)
    match = LINE.match(line)
    assert match is not None
    assert match.group(2) == "3"
    assert match.group(3) == "is thinking"


def test_check_starvation_declares_death():
    out = io.StringIO()
    table = Table(Settings(2, 800, 200, 200), output=out)
    philosopher = table.philosophers[0]
    philosopher.last_meal = table.elapsed_ms() - 800
    assert table.check_starvation(philosopher) is True
    assert table.is_dead is True
    assert _lines(out)[-1].endswith(" 1 died")
    assert table.should_stop(table.philosophers[1]) is True


def test_check_starvation_clamps_durations():
    table = Table(Settings(2, 100, 60, 60), output=io.StringIO())
    philosopher = table.philosophers[0]
    philosopher.last_meal = table.elapsed_ms()
    assert table.check_starvation(philosopher) is False
    assert (table.time_to_eat, table.time_to_sleep) == (100, 100)
    assert table.is_dead is False


def test_eat_refused_after_death_releases_forks():
    table = Table(Settings(2, 800, 10, 10), output=io.StringIO())
    table.is_dead = True
    philosopher = table.philosophers[0]
    assert philosopher.take_forks_and_eat() is False
    assert all(fork.acquire(blocking=False) for fork in table.forks)


def test_eat_updates_last_meal_and_frees_forks():
    out = io.StringIO()
    table = Table(Settings(2, 800, 10, 10), output=out)
    philosopher = table.philosophers[1]
    philosopher.last_meal = table.elapsed_ms()
    assert philosopher.take_forks_and_eat() is True
    assert [line.split(" ", 2)[2] for line in _lines(out)] == ["has taken a fork", "is eating"]
    assert philosopher.last_meal >= 10
    assert all(fork.acquire(blocking=False) for fork in table.forks)


def test_sleep_and_think_messages():
    out = io.StringIO()
    table = Table(Settings(2, 800, 10, 10), output=out)
    philosopher = table.philosophers[0]
    philosopher.last_meal = table.elapsed_ms()
    assert philosopher.sleep_and_think() is True
    assert [line.split(" ", 2)[2] for line in _lines(out)] == ["is sleeping", "is thinking"]


def test_single_philosopher_dies():
    out = io.StringIO()
    table = Table(Settings(1, 60, 60, 60), output=out)
    table.run()
    lines = _lines(out)
    assert [line.split(" ", 1)[1] for line in lines] == ["1 has taken a fork", "1 died"]
    assert int(lines[1].split()[0]) >= 60


def test_meal_limit_stops_everyone():
    out = io.StringIO()
    table = Table(Settings(3, 1000, 10, 10, max_meals=2), output=out)
    table.run()
    lines = _lines(out)
    assert all(LINE.match(line) for line in lines)
    for philosopher in table.philosophers:
        assert philosopher.meals_eaten == 2
        eats = [l for l in lines if l.split()[1] == str(philosopher.id) and l.endswith("is eating")]
        assert len(eats) == 2
    assert not any(line.endswith("died") for line in lines)
    stamps = [int(line.split()[0]) for line in lines]
    assert stamps == sorted(stamps)


def test_starvation_ends_simulation():
    out = io.StringIO()
    table = Table(Settings(2, 20, 50, 50), output=out)
    table.run()
    lines = _lines(out)
    assert table.is_dead is True
    assert any(line.endswith("died") for line in lines)
    assert all(LINE.match(line) for line in lines)