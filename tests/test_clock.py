import time

from diningtable.clock import now_ms, sleep_ms


def test_now_ms_matches_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_sleep_ms_waits_full_duration():
    start = now_ms()
    assert sleep_ms(20) is True
    assert now_ms() - start >= 20


def test_sleep_ms_zero_duration_completes():
    assert sleep_ms(0, lambda: True) is True


def test_sleep_ms_negative_duration_completes():
    assert sleep_ms(-10) is True


def test_sleep_ms_stops_when_told():
    start = now_ms()
    assert sleep_ms(5000, lambda: False) is False
    assert now_ms() - start < 1000


def test_sleep_ms_interrupted_midway():
    calls = []

    def keep_going():
        calls.append(None)
        return len(calls) < 5

    start = now_ms()
    assert sleep_ms(5000, keep_going) is False
    assert len(calls) == 5
    assert now_ms() - start < 1000