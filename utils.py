# utils.py

from typing import Hashable, List, Optional

from engine import Step


def get_color(key: Optional[Hashable], step: Optional[Step]):
    """Return a color for a cache slot given the step being displayed."""
    if key is None:
        return "#eeeeee"  # empty slot
    if step is not None and key == step.key:
        return "lightgreen" if step.hit else "#ffd580"  # hit / freshly loaded
    return "lightgray"


def slot_labels(step: Optional[Step], capacity: int) -> List[str]:
    """Label every cache slot, padding unused slots with 'Empty'."""
    contents = list(step.cache) if step is not None else []
    labels = [f"S{i}: {key}" for i, key in enumerate(contents)]
    labels += [f"S{i}: Empty" for i in range(len(contents), capacity)]
    return labels
