"""
Player identifier generation.

Identifiers have the shape ``PL`` followed by four zero-padded digits. Each
generator owns one ``random.Random`` that is seeded exactly once, when the
generator is built, and it never hands out the same identifier twice.

The process-wide generator is created lazily by ``get_id_generator`` and
lives until ``reset_id_generator`` drops it (tests use this to start from a
known seed).
"""

from __future__ import annotations

import random
import re
from functools import lru_cache
from typing import Optional, Set

ID_PREFIX = "PL"
ID_SPACE = 10_000
ID_PATTERN = re.compile(r"^PL\d{4}$")


class IdentifierSpaceExhausted(RuntimeError):
    """Raised when all ID_SPACE identifiers have been handed out."""


class PlayerIdGenerator:
    """
    Draw ``PL####`` identifiers from a single explicitly owned random source.

    Parameters
    ----------
    seed : int | None
        Seed for a fresh ``random.Random``. None seeds from OS entropy.
    rng : random.Random | None
        Pre-built random source; takes precedence over ``seed``.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._issued: Set[int] = set()

    @property
    def issued_count(self) -> int:
        return len(self._issued)

    def generate(self) -> str:
        if len(self._issued) >= ID_SPACE:
            raise IdentifierSpaceExhausted(
                f"All {ID_SPACE} {ID_PREFIX} identifiers have been issued"
            )
        value = self._rng.randrange(ID_SPACE)
        while value in self._issued:
            value = self._rng.randrange(ID_SPACE)
        self._issued.add(value)
        return f"{ID_PREFIX}{value:04d}"

    __call__ = generate


@lru_cache(maxsize=1)
def get_id_generator() -> PlayerIdGenerator:
    """
    Process-wide generator, initialized on first use.
    """
    return PlayerIdGenerator()


def reset_id_generator() -> None:
    get_id_generator.cache_clear()


__all__ = [
    "ID_PATTERN",
    "ID_PREFIX",
    "ID_SPACE",
    "IdentifierSpaceExhausted",
    "PlayerIdGenerator",
    "get_id_generator",
    "reset_id_generator",
]
