"""
Random sources for palette generation. Generation takes a `random_between(min, max)`
callable (inclusive on both ends) so tests and --seed runs are reproducible.
Default source uses the secrets module.
"""
import random
import secrets
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

RandomBetween = Callable[[int, int], int]


def secure_random_between(lo: int, hi: int) -> int:
    """Cryptographically secure uniform int in [lo, hi]."""
    return lo + secrets.randbelow(hi - lo + 1)


def seeded_random_between(seed: int | None) -> RandomBetween:
    """Deterministic source for a given seed. None falls back to the secure source."""
    if seed is None:
        return secure_random_between
    rng = random.Random(seed)
    return rng.randint


def sequence_random_between(values: Sequence[int]) -> RandomBetween:
    """
    Replay fixed values in order, each clamped into the requested range.
    Cycles when exhausted. Useful to script a generation pass exactly.
    """
    if not values:
        raise ValueError("sequence_random_between needs at least one value")
    state = {"i": 0}

    def _next(lo: int, hi: int) -> int:
        v = values[state["i"] % len(values)]
        state["i"] += 1
        return max(lo, min(hi, int(v)))

    return _next


def choice_between(items: Sequence[T], random_between: RandomBetween) -> T:
    """Pick one item using an injected random_between source."""
    if not items:
        raise ValueError("choice_between needs a non-empty sequence")
    return items[random_between(0, len(items) - 1)]
