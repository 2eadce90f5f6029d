import pytest

from engine import InvalidConfiguration, ReplacementPolicy, simulate
from playback import MAX_SPEED, MIN_SPEED, PlaybackController


@pytest.fixture
def controller():
    steps = simulate(["A", "B", "A", "C"], 2, ReplacementPolicy.FIFO)
    return PlaybackController(steps)


def test_starts_before_first_step(controller):
    assert controller.position == 0
    assert controller.current is None
    assert controller.playing is False
    assert controller.stats()["total_refs"] == 0
    assert controller.event_log() == []


def test_step_reveals_one_request_at_a_time(controller):
    assert controller.step() is True
    assert controller.current.key == "A"
    controller.step()
    controller.step()
    assert controller.current.hit is True
    assert controller.stats() == {
        "hits": 1, "faults": 2, "hit_ratio": 0.3333, "fault_rate": 0.6667, "total_refs": 3,
    }


def test_step_past_end_is_noop(controller):
    for _ in range(4):
        controller.step()
    assert controller.finished
    assert controller.step() is False
    assert controller.position == 4
    assert controller.current.evicted == "A"


def test_tick_only_advances_while_playing(controller):
    assert controller.tick() is False
    assert controller.position == 0

    controller.play()
    assert controller.tick() is True
    assert controller.position == 1
    controller.pause()
    assert controller.tick() is False
    assert controller.position == 1


def test_play_pauses_automatically_at_end(controller):
    controller.play()
    ticks = 0
    while controller.playing:
        controller.tick()
        ticks += 1
    assert ticks == 4
    assert controller.finished

    controller.play()
    assert controller.playing is False


def test_toggle_and_reset(controller):
    controller.toggle()
    assert controller.playing is True
    controller.tick()
    controller.toggle()
    assert controller.playing is False

    controller.play()
    controller.reset()
    assert controller.position == 0
    assert controller.playing is False


def test_seek_is_clamped(controller):
    controller.seek(2)
    assert controller.current.key == "B"
    assert controller.stats()["faults"] == 2
    controller.seek(-5)
    assert controller.position == 0
    controller.play()
    controller.seek(100)
    assert controller.position == 4
    assert controller.playing is False


def test_speed_and_interval(controller):
    controller.set_speed(2.0)
    assert controller.interval == pytest.approx(0.5)
    controller.set_speed(MIN_SPEED)
    assert controller.interval == pytest.approx(5.0)
    for bad in (0, MIN_SPEED / 2, MAX_SPEED + 0.1):
        with pytest.raises(InvalidConfiguration):
            controller.set_speed(bad)
    with pytest.raises(InvalidConfiguration):
        PlaybackController([], speed=0)


def test_event_log_follows_cursor(controller):
    controller.seek(4)
    log = controller.event_log()
    assert log[0] == "Fault: A not in cache (request 1)"
    assert log[-2:] == ["Evicting: A", "Loaded: C"]
    assert controller.event_log(limit=1) == ["Loaded: C"]
    assert controller.event_log(limit=0) == []


def test_empty_steps():
    controller = PlaybackController([])
    assert controller.finished
    controller.play()
    assert controller.playing is False
    assert controller.step() is False
