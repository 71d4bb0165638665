from __future__ import annotations

from typing import Union

from .exceptions import CapabilityError
from .field import GF, ModInt
from .point import FieldXPoint, XPoint

# Montgomery curve: y2 = x3 + A x2 + x
# Only A matters for x-only arithmetic (B scales y alone and is left out).


class MontgomeryCurve:
  def __init__(self, A: ModInt, a24: Union[ModInt, int, None] = None):
    self.A = A
    self.field = A.parent
    one = self.field.one
    two = one + one
    four = two + two
    if a24 is None:
      if not self.field.is_field:
        raise CapabilityError(f"(A+2)/4 needs division, provide a24 explicitly over {self.field!r}")
      a24 = (A + two) / four
    elif isinstance(a24, int):
      a24 = self.field(a24)
    if four * a24 != A + two:
      raise ValueError(f"a24 = {a24!r} is not (A+2)/4 for A = {A!r}")
    # Precomputed doubling constant
    self.a24 = a24

  @property
  def is_field(self) -> bool: return self.field.is_field

  @property
  def zero(self) -> ModInt: return self.field.zero

  @property
  def one(self) -> ModInt: return self.field.one

  def point(self, X: Union[ModInt, int], Z: Union[ModInt, int, None] = None) -> XPoint:
    """Point (X:Z) from raw coordinates, on the tier matching the base ring."""
    if isinstance(X, int): X = self.field(X)
    if Z is None: Z = self.one
    elif isinstance(Z, int): Z = self.field(Z)
    return (FieldXPoint if self.is_field else XPoint)(X, Z, self)

  @property
  def infinity(self) -> XPoint:
    """The point at infinity (0:0). A new object each time."""
    return self.point(self.zero, self.zero)

  @property
  def fixed_torsion(self) -> XPoint:
    """The 2-torsion point at the origin (0:1). A new object each time."""
    return self.point(self.zero, self.one)

  def __eq__(self, other):
    if not isinstance(other, MontgomeryCurve): return NotImplemented
    return self is other or (self.field == other.field and self.A == other.A)

  def __hash__(self): return hash((self.field, self.A))
  def __repr__(self): return f"MontgomeryCurve({self.A!r})"


# Standard curves (RFC 7748)
curve25519 = MontgomeryCurve(GF(2**255 - 19)(486662))
curve448 = MontgomeryCurve(GF(2**448 - 2**224 - 1)(156326))
