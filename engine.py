# engine.py
"""
Cache Replacement Engine: FIFO, LRU and OPT (Belady)

Replays a request sequence against a fixed-capacity cache and records, for
every request, the cache contents after the access, whether it was a hit, and
which key (if any) was evicted. The engine is pure: no I/O, no randomness,
no timers. Playback and rendering live in playback.py and app.py.
"""

import operator
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple


class InvalidConfiguration(ValueError):
    """Raised when a simulation is configured with unusable parameters."""


class ReplacementPolicy:
    """
    Enumeration of available replacement algorithms.

    FIFO: First-In-First-Out - replaces the key resident the longest
    LRU:  Least Recently Used - replaces the key not used for longest time
    OPT:  Optimal (Belady) - replaces the key needed farthest in the future
    """
    FIFO = "FIFO"
    LRU = "LRU"
    OPT = "OPT"

    ALL = (FIFO, LRU, OPT)

    @classmethod
    def validate(cls, policy: str) -> str:
        if policy not in cls.ALL:
            raise InvalidConfiguration(
                f"Unknown replacement policy {policy!r}; expected one of {', '.join(cls.ALL)}"
            )
        return policy


@dataclass(frozen=True)
class Step:
    """
    Result of processing a single request.

    Attributes:
        index (int): Position of the request in the sequence
        key (Hashable): The requested key
        hit (bool): True if the key was resident before the request
        cache (Tuple): Cache contents after the request, in display order
        evicted (Optional[Hashable]): Key removed to make room, None if nothing was evicted
    """
    index: int
    key: Hashable
    hit: bool
    cache: Tuple[Hashable, ...]
    evicted: Optional[Hashable] = None

    @property
    def fault(self) -> bool:
        return not self.hit


# -----------------------------
# Validation
# -----------------------------

def validate_capacity(capacity) -> int:
    # bool is an int subclass; True must not pass as a capacity of 1
    if isinstance(capacity, bool):
        raise InvalidConfiguration(f"Capacity must be an integer, got {capacity!r}")
    try:
        capacity = operator.index(capacity)
    except TypeError:
        raise InvalidConfiguration(f"Capacity must be an integer, got {capacity!r}") from None
    if capacity < 1:
        raise InvalidConfiguration(f"Capacity must be at least 1, got {capacity}")
    return capacity


def next_use_indices(requests: Sequence[Hashable]) -> List[Optional[int]]:
    """
    For each index i, the index of the next request for the same key, or None.

    Computed in a single backward pass so OPT can look up a resident key's
    next use in O(1) instead of rescanning the remaining requests.
    """
    upcoming: Dict[Hashable, int] = {}
    result: List[Optional[int]] = [None] * len(requests)
    for i in range(len(requests) - 1, -1, -1):
        key = requests[i]
        result[i] = upcoming.get(key)
        upcoming[key] = i
    return result


# =============================================================================
# SIMULATOR
# =============================================================================

class ReplacementSimulator:
    """
    Deterministic replacement-policy simulator.

    A single OrderedDict holds the resident keys and is the only source of
    truth for membership. Its iteration order is the display order:
        - FIFO: insertion order (never reordered on hit)
        - LRU:  recency order, least recently used first
        - OPT:  insertion order; the value stored per key is the index of its
                next request (None if it is never requested again)

    Attributes:
        capacity (int): Maximum number of resident keys
        policy (str): One of ReplacementPolicy.ALL
    """

    def __init__(self, capacity: int, policy: str = ReplacementPolicy.FIFO):
        self.capacity = validate_capacity(capacity)
        self.policy = ReplacementPolicy.validate(policy)

    def run(self, requests: Optional[Iterable[Hashable]]) -> List[Step]:
        """
        Replay the full request sequence from an empty cache.

        Args:
            requests: Ordered request keys

        Returns:
            List[Step]: One step per request, indexed like the requests

        Raises:
            InvalidConfiguration: If requests is None or contains a None key
        """
        if requests is None:
            raise InvalidConfiguration("Request sequence must not be None")
        trace = tuple(requests)
        # None is reserved for "nothing evicted" / "empty slot"
        if any(key is None for key in trace):
            raise InvalidConfiguration("Request keys must not be None")

        cache: "OrderedDict[Hashable, Optional[int]]" = OrderedDict()
        next_use = next_use_indices(trace) if self.policy == ReplacementPolicy.OPT else None
        steps: List[Step] = []

        for index, key in enumerate(trace):
            evicted = None
            hit = key in cache

            if hit:
                if self.policy == ReplacementPolicy.LRU:
                    cache.move_to_end(key)
            else:
                if len(cache) >= self.capacity:
                    evicted = self._select_victim(cache)
                    del cache[evicted]
                cache[key] = None

            if next_use is not None:
                cache[key] = next_use[index]

            step = Step(index=index, key=key, hit=hit, cache=tuple(cache), evicted=evicted)
            steps.append(step)

        return steps

    def _select_victim(self, cache: "OrderedDict[Hashable, Optional[int]]") -> Hashable:
        """
        Choose the resident key to evict when the cache is full.

        - FIFO/LRU: the first key in the OrderedDict (oldest insertion or
          least recent use respectively)
        - OPT: the first key never requested again; otherwise the key whose
          next request is farthest away, first found winning ties
        """
        if self.policy != ReplacementPolicy.OPT:
            return next(iter(cache))

        victim = None
        farthest = -1
        for resident, upcoming in cache.items():
            if upcoming is None:
                return resident
            if upcoming > farthest:
                farthest = upcoming
                victim = resident
        return victim


# =============================================================================
# CONVENIENCE API
# =============================================================================

def simulate(requests: Optional[Iterable[Hashable]], capacity: int, policy: str) -> List[Step]:
    """Run one policy over the requests and return its steps."""
    return ReplacementSimulator(capacity, policy).run(requests)


def simulate_all(requests: Optional[Iterable[Hashable]], capacity: int) -> Dict[str, List[Step]]:
    """
    Run every policy over the same requests for side-by-side comparison.

    Each run owns its own cache state, so the results are independent.
    """
    if requests is None:
        raise InvalidConfiguration("Request sequence must not be None")
    trace = tuple(requests)
    validate_capacity(capacity)
    return {policy: simulate(trace, capacity, policy) for policy in ReplacementPolicy.ALL}


def count_faults(steps: Iterable[Step]) -> int:
    return sum(1 for step in steps if not step.hit)


def compute_stats(steps: Sequence[Step], upto: Optional[int] = None) -> Dict[str, float]:
    """
    Calculate statistics for the first `upto` steps (all steps by default).

    Returns:
        Dict[str, float]: Statistics including:
            - hits: Total hits
            - faults: Total faults
            - hit_ratio: Hits / Total requests
            - fault_rate: Faults / Total requests
            - total_refs: Total requests considered
    """
    if upto is None:
        upto = len(steps)
    upto = max(0, min(upto, len(steps)))

    hits = sum(1 for step in steps[:upto] if step.hit)
    faults = upto - hits
    hit_ratio = (hits / upto) if upto > 0 else 0.0
    fault_rate = (faults / upto) if upto > 0 else 0.0

    return {
        "hits": hits,
        "faults": faults,
        "hit_ratio": round(hit_ratio, 4),
        "fault_rate": round(fault_rate, 4),
        "total_refs": upto,
    }


def describe_step(step: Step) -> List[str]:
    """Event log lines for one step."""
    if step.hit:
        return [f"Hit: {step.key} (request {step.index + 1})"]

    lines = [f"Fault: {step.key} not in cache (request {step.index + 1})"]
    if step.evicted is not None:
        lines.append(f"Evicting: {step.evicted}")
    lines.append(f"Loaded: {step.key}")
    return lines
