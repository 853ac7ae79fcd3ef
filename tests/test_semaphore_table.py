import io
import re
from collections import Counter

import pytest

from diningtable.config import Settings
from diningtable.semaphore_table import SemaphoreTable

LINE = re.compile(r"^(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|died)$")


def _run(settings):
    out = io.StringIO()
    result = SemaphoreTable(settings, out).run()
    return result, out.getvalue().splitlines()


def test_rejects_single_philosopher():
    with pytest.raises(ValueError):
        SemaphoreTable(Settings(1, 800, 200, 200))


def test_meal_limit_ends_without_death():
    result, lines = _run(Settings(4, 410, 200, 200, 2))
    assert result is None
    assert not any(line.endswith("died") for line in lines)
    meals = Counter(
        line.split()[1] for line in lines if line.endswith("is eating")
    )
    assert all(meals[str(pid)] >= 2 for pid in range(1, 5))


def test_lines_are_well_formed():
    _, lines = _run(Settings(4, 410, 200, 200, 1))
    assert lines
    for line in lines:
        match = LINE.match(line)
        assert match is not None
        assert 1 <= int(match.group(2)) <= 4


def test_starvation_reports_death_last():
    result, lines = _run(Settings(4, 310, 200, 100))
    assert result in {1, 2, 3, 4}
    assert lines[-1].endswith(f"{result} died")
    assert sum(line.endswith("died") for line in lines) == 1
    assert int(lines[-1].split()[0]) >= 310


def test_each_eating_follows_two_forks():
    _, lines = _run(Settings(4, 410, 200, 200, 1))
    taken = Counter()
    for line in lines:
        _, pid, action = line.split(" ", 2)
        if action == "has taken a fork":
            taken[pid] += 1
        elif action == "is eating":
            assert taken[pid] >= 2
            taken[pid] -= 2