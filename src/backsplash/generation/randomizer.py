"""
Seeded random numbers and shuffles.

The stream is the ARC4-based generator of the `seedrandom` JavaScript
library, reproduced exactly so that a seed gives the same pattern here as in
any tool built on that library:

1. The seed string is mixed into a key of at most 256 bytes.
2. An ARC4 cipher is keyed with it and its first 256 bytes are discarded.
3. Reals are built from 6 bytes (48 bits), topped up a byte at a time until
   52 significant bits are present, then scaled into [0, 1).
"""

from __future__ import annotations

from typing import Hashable, Mapping, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

WIDTH = 256
MASK = WIDTH - 1
CHUNKS = 6
DIGITS = 52
START_DENOM = float(WIDTH**CHUNKS)
SIGNIFICANCE = float(2**DIGITS)
OVERFLOW = SIGNIFICANCE * 2


def mix_key(seed: str) -> list[int]:
  """Smear the UTF-16 code units of `seed` into an ARC4 key."""
  encoded = seed.encode("utf-16-le")
  units = [encoded[k] | (encoded[k + 1] << 8) for k in range(0, len(encoded), 2)]

  key: list[int] = []
  smear = 0
  for j, unit in enumerate(units):
    index = MASK & j
    if index < len(key):
      smear ^= key[index] * 19
      key[index] = MASK & (smear + unit)
    else:
      key.append(MASK & (smear + unit))
  return key


class ARC4:
  """ARC4 keystream, dropping the first 256 bytes."""

  def __init__(self, key: Sequence[int]):
    if not key:
      key = [0]
    keylen = len(key)

    s = list(range(WIDTH))
    j = 0
    for i in range(WIDTH):
      t = s[i]
      j = MASK & (j + key[i % keylen] + t)
      s[i] = s[j]
      s[j] = t

    self._s = s
    self._i = 0
    self._j = 0
    self.next_bytes(WIDTH)

  def next_bytes(self, count: int) -> int:
    """Read `count` bytes of keystream as one big-endian integer."""
    s = self._s
    i, j = self._i, self._j
    result = 0
    for _ in range(count):
      i = MASK & (i + 1)
      t = s[i]
      j = MASK & (j + t)
      s[i] = s[j]
      s[j] = t
      result = result * WIDTH + s[MASK & (s[i] + t)]
    self._i, self._j = i, j
    return result


class Randomizer:
  """A supplier of random numbers and shuffles, keyed by a string seed."""

  def __init__(self, seed: str):
    self.seed = seed
    self._arc4 = ARC4(mix_key(seed))

  def next(self) -> float:
    """Get the next random real in [0, 1)."""
    arc4 = self._arc4
    n = float(arc4.next_bytes(CHUNKS))
    d = START_DENOM
    x = 0
    while n < SIGNIFICANCE:
      n = (n + x) * WIDTH
      d *= WIDTH
      x = arc4.next_bytes(1)
    while n >= OVERFLOW:
      n /= 2
      d /= 2
      x >>= 1
    return (n + x) / d

  def next_int32(self) -> int:
    """Get the next random signed 32-bit integer."""
    value = self._arc4.next_bytes(4)
    if value >= 2**31:
      value -= 2**32
    return value

  def next_int(self) -> int:
    """Get the next random non-negative integer."""
    return abs(self.next_int32())

  def shuffle(self, items: Sequence[T]) -> list[T]:
    """
    Randomly shuffle some `items`.

    Each step draws an index into the items not yet taken and moves that item
    to the result; the last remaining item is appended without a draw.
    """
    if not items:
      return list(items)

    supply = list(items)
    result = []
    while len(supply) > 1:
      result.append(supply.pop(self.next_int() % len(supply)))
    result.append(supply[0])
    return result

  def weighted_shuffle(self, items: Sequence[K], weights: Mapping[K, float]) -> list[K]:
    """
    Shuffle some `items` on a weighted random distribution.

    Items with higher weights are more likely to appear earlier. Items with no
    weight of their own get the mean of all the weights.
    """
    values = list(weights.values())
    average = sum(values) / len(values) if values else 1.0
    keys = [-self.next() * weights.get(item, average) for item in items]
    order = sorted(range(len(items)), key=lambda index: keys[index])
    return [items[index] for index in order]
