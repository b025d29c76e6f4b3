from qniokit.backoff import CEILING, INITIAL, ExponentialBackoff


def test_default_start():
    assert ExponentialBackoff().value() == INITIAL
    assert INITIAL == 512


def test_wait_doubles_below_ceiling():
    backoff = ExponentialBackoff(3, 100)
    before = backoff.value()
    backoff.wait()
    assert backoff.value() == before * 2


def test_growth_stops_once_ceiling_reached():
    backoff = ExponentialBackoff(3, 10)
    while backoff.value() < 10:
        previous = backoff.value()
        backoff.wait()
        assert backoff.value() == previous * 2
    settled = backoff.value()
    backoff.wait()
    backoff.wait()
    assert backoff.value() == settled
    assert settled >= 10


def test_default_sequence_stays_near_ceiling():
    backoff = ExponentialBackoff(CEILING // 2 + 1)
    backoff.wait()
    top = backoff.value()
    backoff.wait()
    assert backoff.value() == top
    assert top > CEILING


def test_zero_never_grows():
    backoff = ExponentialBackoff(0, 8)
    backoff.wait()
    assert backoff.value() == 0