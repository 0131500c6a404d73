"""Colourset factory and the generate-and-reject search for alternatives.

All randomness comes from a numpy Generator. Pass ``rng`` explicitly for
reproducible results; otherwise a process-wide generator is used.

Both searches are unbounded rejection sampling unless ``max_tries`` is
given. Pinning a hue and shade that always equals or clashes with the base
(or with earlier members of a set) never terminates without a cap.
"""

from collections.abc import Sequence
from types import MappingProxyType

import numpy as np

from colourset.core import oracle, table
from colourset.core.types import Colourset, SearchExhausted

SHADES = (1, 2, 3, 4)

# Candidate hue steps away from the base; the grey step is added per base
HUE_OFFSETS = (0, 30, 60, 90, 120, -30, -60, -90, -120)

_shared_rng: np.random.Generator | None = None


def default_rng() -> np.random.Generator:
    """The process-wide generator used when no rng is passed."""
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = np.random.default_rng()
    return _shared_rng


def seed(value: int | None) -> np.random.Generator:
    """Replace the process-wide generator with a freshly seeded one."""
    global _shared_rng
    _shared_rng = np.random.default_rng(value)
    return _shared_rng


def normalize_hue(hue: int | None) -> int:
    """Missing hue means red (0). Values outside 0-360 are the caller's problem."""
    return 0 if hue is None else int(hue)


def normalize_shade(shade: int | None, rng: np.random.Generator) -> int:
    """Keep a shade in 1..4, otherwise pick one at random."""
    if shade in SHADES:
        return int(shade)
    return int(rng.integers(1, 5))


def create(hue: int | None = None, shade: int | None = None, rng: np.random.Generator | None = None) -> Colourset:
    """Build a colourset from a hue (0-360, 360 = grey) and a shade (1-4, else random)."""
    if rng is None:
        rng = default_rng()
    hue = normalize_hue(hue)
    shade = normalize_shade(shade, rng)
    return Colourset(hue=hue, shade=shade, colours=MappingProxyType(table.lookup(hue, shade)))


def _is_unset(hue: int | None) -> bool:
    return hue is None or hue < 0


def _wrap(hue: int) -> int:
    if hue < 0:
        hue += 360
    if hue > 360:
        hue -= 360
    return hue


def random_hue(base: Colourset, rng: np.random.Generator) -> int:
    """Step a random interval away from the base hue, or jump to grey."""
    offsets = (*HUE_OFFSETS, 360 - base.hue)
    offset = offsets[int(rng.integers(len(offsets)))]
    return _wrap(base.hue + offset)


def _check_budget(what: str, attempts: int, max_tries: int | None) -> None:
    if max_tries is not None and attempts >= max_tries:
        raise SearchExhausted(what, attempts)


def alternative(
    base: Colourset,
    hue: int | None = None,
    shade: int | None = None,
    rng: np.random.Generator | None = None,
    max_tries: int | None = None,
) -> Colourset:
    """Make a colourset that differs from base and does not clash with it.

    An unset hue (None or negative) is drawn relative to the base hue on every
    attempt; an unset shade is drawn at random on every attempt.
    """
    if rng is None:
        rng = default_rng()
    attempts = 0
    while True:
        _check_budget('alternative', attempts, max_tries)
        attempts += 1
        candidate_hue = random_hue(base, rng) if _is_unset(hue) else hue
        candidate = create(candidate_hue, shade, rng)
        if not (base.equals(candidate) or oracle.clashes(base, candidate)):
            return candidate


def generate_set(
    base: Colourset,
    n: int,
    hues: Sequence[int | None] | None = None,
    shades: Sequence[int | None] | None = None,
    rng: np.random.Generator | None = None,
    max_tries: int | None = None,
) -> list[Colourset]:
    """Make n alternatives that are compatible with base and with each other.

    hues/shades pin slot i when given; they may be shorter than n. Accepted
    members are never revisited, so a hard last slot can spin forever.
    """
    if rng is None:
        rng = default_rng()
    hues = list(hues or [])
    shades = list(shades or [])
    colsets: list[Colourset] = []

    while len(colsets) < n:
        ind = len(colsets)
        slot_hue = hues[ind] if ind < len(hues) else None
        slot_shade = shades[ind] if ind < len(shades) else None
        attempts = 0
        while True:
            _check_budget(f'slot {ind}', attempts, max_tries)
            attempts += 1
            newalt = alternative(base, slot_hue, slot_shade, rng=rng, max_tries=max_tries)
            if not any(newalt.equals(cs) or oracle.clashes(newalt, cs) for cs in colsets):
                break
        colsets.append(newalt)

    return colsets
