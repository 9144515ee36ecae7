"""
Rule-Seed Random Number Generator
=================================

Bit-exact port of the Mono ``System.Random`` subtractive generator
(Knuth, TAOCP Vol. 2, §3.2.2) that hosts use to hand rule seeds to modules.

Reproducing the generator exactly is what keeps a rule seed meaning the
same manual across implementations: every bounded draw, shuffle and pick has
to consume the stream in the same order as the host's reference generator.

Usage:
    rng = MonoRandom(42)
    rng.next_range(0, 4)          # 0 <= n < 4
    rng.shuffle_fisher_yates(xs)  # in place, returns xs
    rng.choice(xs)                # same stream consumption as PickRandom
"""

from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar('T')

MBIG: int = 2147483647  # int.MaxValue
MSEED: int = 161803398
INT32_MIN: int = -2147483648


def _int32(value: int) -> int:
    """Wrap to signed 32-bit, as unchecked C# int arithmetic does."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class MonoRandom:
    """
    Deterministic pseudo-random source seeded by a rule seed.

    Same seed, same sequence of draws, on every run and platform.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._seed_array: List[int] = [0] * 56

        subtraction = MBIG if seed == INT32_MIN else abs(_int32(seed))
        mj = _int32(MSEED - subtraction)
        self._seed_array[55] = mj
        mk = 1
        for i in range(1, 55):
            ii = (21 * i) % 55
            self._seed_array[ii] = mk
            mk = _int32(mj - mk)
            if mk < 0:
                mk += MBIG
            mj = self._seed_array[ii]

        for _ in range(1, 5):
            for i in range(1, 56):
                value = _int32(self._seed_array[i] - self._seed_array[1 + (i + 30) % 55])
                if value < 0:
                    value += MBIG
                self._seed_array[i] = value

        self._inext = 0
        self._inextp = 31  # Mono offset; the .NET Framework generator uses 21

    def next_double(self) -> float:
        """Next sample in [0, 1)."""
        self._inext += 1
        if self._inext >= 56:
            self._inext = 1
        self._inextp += 1
        if self._inextp >= 56:
            self._inextp = 1

        value = self._seed_array[self._inext] - self._seed_array[self._inextp]
        if value < 0:
            value += MBIG
        self._seed_array[self._inext] = value
        return value * (1.0 / MBIG)

    def next(self) -> int:
        """Non-negative int below int.MaxValue."""
        return int(self.next_double() * MBIG)

    def next_int(self, max_value: int) -> int:
        """Integer in [0, max_value)."""
        if max_value < 0:
            raise ValueError(f"max_value must be non-negative, got {max_value}")
        return int(self.next_double() * max_value)

    def next_range(self, min_value: int, max_value: int) -> int:
        """
        Integer in [min_value, max_value).

        A range of width 0 or 1 returns ``min_value`` without consuming a
        sample, exactly like the reference generator.
        """
        if min_value > max_value:
            raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
        diff = max_value - min_value
        if diff <= 1:
            return min_value
        return int(self.next_double() * diff) + min_value

    def skip(self, count: int) -> None:
        """Discard ``count`` full-range draws."""
        for _ in range(count):
            self.next()

    def shuffle_fisher_yates(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle ``items`` in place and return it."""
        i = len(items)
        while i > 1:
            index = self.next_range(0, i)
            i -= 1
            items[index], items[i] = items[i], items[index]
        return items

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly; raises IndexError on an empty sequence."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.next_range(0, len(items))]

    def __repr__(self) -> str:
        return f"MonoRandom(seed={self.seed})"
