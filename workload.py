# workload.py

import random
from typing import Iterable, List, Optional, Sequence

from engine import InvalidConfiguration

CITIES = ['Tokyo', 'Paris', 'Rome', 'London', 'Berlin', 'Bangkok', 'Manila', 'Seoul', 'Oslo', 'Beijing']

# Classic reference string used in textbooks to compare FIFO, LRU and OPT
DEFAULT_REQUESTS = "7,0,1,2,0,3,0,4,2,3,0,3,2"

DEFAULT_LENGTH = 20


def generate_requests(length: int = DEFAULT_LENGTH, keys: Sequence[str] = CITIES, seed: Optional[int] = None) -> List[str]:
    """Draw `length` keys uniformly (with replacement) from `keys`."""
    if length < 0:
        raise InvalidConfiguration(f"Request count must be non-negative, got {length}")
    if not keys:
        raise InvalidConfiguration("Cannot generate requests from an empty key set")
    rng = random.Random(seed)
    return [rng.choice(keys) for _ in range(length)]


def parse_requests(text: str) -> List[str]:
    """Parse a comma separated request sequence, skipping empty entries."""
    return [x.strip() for x in text.split(',') if x.strip() != '']


def format_requests(requests: Iterable[str]) -> str:
    return " → ".join(str(r) for r in requests)
