# x-only arithmetic on Montgomery curves y2 = x3 + A x2 + x over any ring or
# field, and Montgomery ladder scalar multiplication.

# Not constant time and no subgroup or validity checks on points or curves,
# so this is for computation and research (e.g. isogenies), not for secrets.

# Public symbols are imported here. Use scalarmult (or k * P) for kP, the
# lower level ladder needs inputs that scalarmult has already filtered.

from .curve import MontgomeryCurve, curve25519, curve448
from .exceptions import CapabilityError, CurveMismatchError, DegenerateDifferenceError
from .field import GF, ModInt, Zmod, fe
from .mont import ladder, scalarmult, xadd, xdbl
from .point import FieldXPoint, XPoint, are_equal

__version__ = "0.1.0"
