from .exceptions import CapabilityError, CurveMismatchError, DegenerateDifferenceError
from .point import FieldXPoint, XPoint

# x-only arithmetic on Montgomery curves, formulas from Costello & Smith,
# "Montgomery curves and their arithmetic" (https://eprint.iacr.org/2017/212)

# Not constant time: the ladder branches on scalar bits and the field
# operations are plain Python integers. Use libsodium or similar for secrets.


def xdbl(P: XPoint) -> XPoint:
  """Double any x-only point using the least possible field operations."""
  E = P.curve
  v1 = P.X + P.Z
  v1 = v1 * v1
  v2 = P.X - P.Z
  v2 = v2 * v2

  X2 = v1 * v2

  v1 = v1 - v2  # 4 X Z
  v3 = E.a24 * v1 + v2

  Z2 = v1 * v3

  # Infinity must come out as exactly (0:0)
  if Z2 == E.zero: X2 = E.zero

  return E.point(X2, Z2)


def xadd(P: XPoint, Q: XPoint, D: XPoint) -> XPoint:
  """
  Differential addition of x-only points using the least possible field operations.

  :param D: P - Q, which may not be (0:0) nor (0:z)
  :returns: P + Q on the curve of P (not normalized, no infinity correction)
  :raises DegenerateDifferenceError: if D is infinity or the 2-torsion point
  :raises CurveMismatchError: if the points are not on the same curve
  """
  E = P.curve
  if Q.curve != E or D.curve != E:
    raise CurveMismatchError(f"Cannot add points of {Q.curve!r} and {D.curve!r} on {E!r}")
  if D.is_infinity or D.is_fixed_torsion:
    raise DegenerateDifferenceError(f"Invalid difference point {D!r}")

  v0 = (P.X + P.Z) * (Q.X - Q.Z)
  v1 = (P.X - P.Z) * (Q.X + Q.Z)

  v3 = v0 + v1
  v4 = v0 - v1

  return E.point(D.Z * (v3 * v3), D.X * (v4 * v4))


def ladder(k: int, P: FieldXPoint) -> FieldXPoint:
  """
  Montgomery ladder for kP with k >= 1 and P neither infinity nor the 2-torsion point.

  Use scalarmult instead, which handles all other inputs.
  """
  P = P.normalized()
  # Invariant: x0 = nP, x1 = (n+1)P for the leading bits n of k
  x0, x1 = P, xdbl(P)
  for n in reversed(range(k.bit_length() - 1)):
    if k >> n & 1:
      x0, x1 = xadd(x0, x1, P), xdbl(x1)
    else:
      x0, x1 = xdbl(x0), xadd(x0, x1, P)
  return x0


def scalarmult(k: int, P: FieldXPoint) -> FieldXPoint:
  """Multiply x-only point P by integer k (any sign)."""
  if not isinstance(P, FieldXPoint):
    raise CapabilityError(f"Scalar multiplication needs a field, got a point over {P.ring!r}")
  E = P.curve
  if k == 0: return E.infinity
  # x-only points cannot tell kP from -kP
  if k < 0: return scalarmult(-k, P)
  if P.is_infinity: return E.infinity
  # The ladder cannot use these as the difference, but their multiples are known
  if P.is_fixed_torsion: return E.fixed_torsion if k & 1 else E.infinity
  return ladder(k, P)
