class CapabilityError(TypeError):
  """The operation needs division but the coordinates only form a ring"""

class DegenerateDifferenceError(ValueError):
  """Differential addition cannot use infinity or the 2-torsion point as the difference"""

class CurveMismatchError(ValueError):
  """Points on different curves cannot be combined"""
