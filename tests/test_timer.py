import pytest

from cnge.timer import Timer


def test_not_going_does_not_advance():
    t = Timer(1.0)
    assert t.update(0.5) is False
    assert t.elapsed == 0.0


def test_update_until_done():
    t = Timer(1.0)
    t.start()
    assert t.update(0.5) is False
    assert t.along() == pytest.approx(0.5)
    assert t.update(0.5) is True
    assert t.going is False
    assert t.elapsed == 0.0


def test_update_continual_wraps():
    t = Timer(1.0, True)
    assert t.update_continual(1.5) is True
    assert t.going is True
    assert t.elapsed == pytest.approx(0.5)


def test_update_continual_not_yet():
    t = Timer(2.0, True)
    assert t.update_continual(1.0) is False
    assert t.elapsed == pytest.approx(1.0)


def test_pause_and_resume():
    t = Timer(1.0, True)
    t.update(0.25)
    t.pause()
    assert t.update(0.25) is False
    assert t.elapsed == pytest.approx(0.25)
    t.resume()
    t.update(0.25)
    assert t.elapsed == pytest.approx(0.5)


def test_stop_resets():
    t = Timer(3.0, True)
    t.update(1.0)
    t.stop()
    assert t.going is False
    assert t.elapsed == 0.0


def test_start_resets_elapsed():
    t = Timer(3.0, True)
    t.update(1.0)
    t.start()
    assert t.elapsed == 0.0
    assert t.going is True


def test_set_max_and_add():
    t = Timer(4.0)
    t.set_max()
    assert t.elapsed == t.time
    assert t.along() == pytest.approx(1.0)
    t.add(-2.0)
    assert t.elapsed == pytest.approx(2.0)