from __future__ import annotations

from functools import cached_property

# Coordinates of x-only points only need +, -, * and equality, plus division
# for anything that normalizes. Any ring type exposing zero, one, is_field and
# int conversion by calling it will do; these two are the ones shipped here.


class Zmod:
  """The ring of integers modulo n (no division)"""
  is_field = False

  def __init__(self, n: int):
    if n < 2: raise ValueError(f"Modulus must be at least 2, got {n}")
    self.n = n
    self.zero = self(0)
    self.one = self(1)

  def __call__(self, x: int) -> ModInt:
    return ModInt(x, self)

  def __eq__(self, other):
    return type(self) is type(other) and self.n == other.n

  def __hash__(self): return hash((type(self).__name__, self.n))
  def __repr__(self): return f"{type(self).__name__}({self.n})"


class GF(Zmod):
  """A prime field modulo p"""
  is_field = True

  def __init__(self, p: int):
    # Fermat test will do, this is not meant for adversarial moduli
    if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
      raise ValueError(f"p is not an odd prime: {p}")
    super().__init__(p)

  def __call__(self, x: int) -> fe:
    return fe(x, self)


class ModInt:
  """An element of Zmod(n)"""
  def __init__(self, x: int, parent: Zmod):
    self.parent = parent
    self.val = x % parent.n

  def __hash__(self): return hash(self.val)
  def __repr__(self): return str(self.val)
  def __int__(self): return self.val

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, ModInt): raise TypeError(f"Cannot compare {type(self).__name__} with {other!r}")
    return self.parent == other.parent and self.val == other.val

  def _check(self, o: ModInt) -> None:
    if not isinstance(o, ModInt) or o.parent != self.parent:
      raise TypeError(f"Cannot combine elements of {self.parent!r} and {getattr(o, 'parent', o)!r}")

  def __neg__(self): return self.parent(-self.val)

  def __add__(self, o: ModInt):
    self._check(o)
    return self.parent(self.val + o.val)

  def __sub__(self, o: ModInt):
    self._check(o)
    return self.parent(self.val - o.val)

  def __mul__(self, o: ModInt):
    self._check(o)
    return self.parent(self.val * o.val)


class fe(ModInt):
  """An element of the prime field GF(p)"""

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    self._check(o)
    return self if o == self.parent.one else self * o.inv

  @cached_property
  def inv(self) -> fe:
    if not self.val: raise ZeroDivisionError(f"{self.parent!r}: zero has no inverse")
    return self.parent(pow(self.val, -1, self.parent.n))
