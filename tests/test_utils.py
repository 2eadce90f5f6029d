from engine import ReplacementPolicy, simulate
from utils import get_color, slot_labels


def test_slot_colors():
    steps = simulate(["A", "B", "A"], 3, ReplacementPolicy.LRU)
    assert get_color("B", steps[1]) == "#ffd580"
    assert get_color("A", steps[1]) == "lightgray"
    assert get_color("A", steps[2]) == "lightgreen"
    assert get_color(None, steps[2]) == "#eeeeee"
    assert get_color("A", None) == "lightgray"


def test_slot_labels_pad_empty_slots():
    steps = simulate(["A", "B"], 3, ReplacementPolicy.FIFO)
    assert slot_labels(steps[1], 3) == ["S0: A", "S1: B", "S2: Empty"]
    assert slot_labels(None, 2) == ["S0: Empty", "S1: Empty"]
