from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import CapabilityError

if TYPE_CHECKING:
  from .curve import MontgomeryCurve
  from .field import ModInt

# x-only points are (X:Z) with x = X/Z. Two coordinate patterns are reserved:
#  - (0:0) is the point at infinity (the only representative xdbl produces)
#  - (0:z) for z != 0 is the point of order 2 at the origin, its own negative


class XPoint:
  """x-only projective point (X:Z) over any ring. Supports xdbl and xadd only."""

  def __init__(self, X: ModInt, Z: ModInt, curve: MontgomeryCurve):
    self.X = X
    self.Z = Z
    self.curve = curve

  @property
  def ring(self):
    """The ring of the coordinates"""
    return self.curve.field

  @property
  def is_infinity(self) -> bool: return self.Z == self.curve.zero

  @property
  def is_fixed_torsion(self) -> bool:
    """True for (0:z), the 2-torsion point at the origin. Z is not checked."""
    return self.X == self.curve.zero

  def __repr__(self): return f"({self.X!r}:{self.Z!r})"

  def __eq__(self, othr):
    """Same curve and exactly the same coordinates. See are_equal for projective equality."""
    if not isinstance(othr, XPoint): raise TypeError(f"XPoints cannot be compared with {type(othr)}")
    return self.curve == othr.curve and self.X == othr.X and self.Z == othr.Z


class FieldXPoint(XPoint):
  """x-only point over a field, adding normalization and scalar multiplication."""

  def normalized(self) -> FieldXPoint:
    """Return a new point with Z = 1, or (0:0) for the point at infinity. The input is not changed."""
    E = self.curve
    if self.is_infinity:
      return FieldXPoint(E.zero, E.zero, E)
    return FieldXPoint(self.X / self.Z, E.one, E)

  def normalize(self) -> None:
    """Rewrite the coordinates in place to the normalized representative."""
    E = self.curve
    if self.is_infinity:
      self.X = E.zero
    else:
      self.X = self.X / self.Z
      self.Z = E.one

  @property
  def x(self):
    """The affine x coordinate"""
    if self.is_infinity: raise ValueError("The point at infinity has no x coordinate")
    return self.X / self.Z

  def __mul__(self, k: int) -> FieldXPoint:
    """Multiply the point by an integer scalar."""
    if not isinstance(k, int): return NotImplemented
    from .mont import scalarmult
    return scalarmult(k, self)

  def __rmul__(self, k: int) -> FieldXPoint:
    return self * k


def are_equal(P: XPoint, Q: XPoint) -> bool:
  """Projective equality: True if P and Q are the same point on the same curve, whatever the scaling."""
  for R in P, Q:
    if not isinstance(R, FieldXPoint):
      raise CapabilityError(f"Projective equality needs a field, got a point over {R.ring!r}")
  return P.normalized() == Q.normalized()
